"""UDP broadcast probe for locating the PC on the local network.

Sends the discover magic string to the broadcast address and waits for a
single reply. The PC answers with the response magic string from its own
address, which becomes the discovered host.

Each attempt owns its socket; the socket is closed on every exit path.
"""

import socket
import sys
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

from ..config.schema import ProbeConfig
from .outcome import (
    NO_PC_FOUND,
    UNEXPECTED_RESPONSE,
    DiscoveryOutcome,
    Failed,
    Found,
    OutcomeCallback,
    network_error,
)

SocketFactory = Callable[[], socket.socket]


def udp_socket() -> socket.socket:
    """Create an IPv4 UDP socket."""
    return socket.socket(socket.AF_INET, socket.SOCK_DGRAM)


class DiscoveryProbe:
    """Broadcasts a discovery probe and reports the responding PC.

    Attempts started with :meth:`discover` run on a bounded worker pool owned
    by the probe, so the caller never blocks on the network. The outcome
    callback is invoked on the worker thread; callers that need it on another
    thread must redispatch it themselves.
    """

    def __init__(
        self,
        config: Optional[ProbeConfig] = None,
        socket_factory: Optional[SocketFactory] = None,
    ):
        """Initialize the probe.

        Args:
            config: Probe settings. Default: port 9999, 5s timeout.
            socket_factory: Callable returning a new UDP socket per attempt.
        """
        self.config = config or ProbeConfig()
        self._socket_factory = socket_factory or udp_socket
        self._executor = ThreadPoolExecutor(
            max_workers=self.config.max_workers,
            thread_name_prefix="pc-discovery",
        )

    def discover(
        self, on_outcome: Optional[OutcomeCallback] = None
    ) -> "Future[DiscoveryOutcome]":
        """Start a discovery attempt in the background.

        Args:
            on_outcome: Called exactly once with the attempt's outcome.
                None = only resolve the returned future.

        Returns:
            Future resolving to the same outcome passed to ``on_outcome``.

        Raises:
            RuntimeError: If the probe has been closed.
        """
        return self._executor.submit(self._run, on_outcome)

    def probe(self) -> DiscoveryOutcome:
        """Run one discovery attempt on the calling thread.

        Never raises; every failure is converted to a :class:`Failed` outcome.
        """
        try:
            with self._socket_factory() as sock:
                return self._exchange(sock)
        except socket.timeout:
            self._log("No PC found - timeout")
            return Failed(NO_PC_FOUND)
        except OSError as e:
            self._log(f"Discovery error: {e}")
            return network_error(e)
        except Exception as e:
            self._log(f"Discovery error: {type(e).__name__}: {e}")
            return Failed(f"Unexpected error: {type(e).__name__}: {e}")

    def _run(self, on_outcome: Optional[OutcomeCallback]) -> DiscoveryOutcome:
        outcome = self.probe()
        if on_outcome is None:
            return outcome
        try:
            on_outcome(outcome)
        except Exception as e:
            self._log(f"Outcome callback failed: {type(e).__name__}: {e}")
        return outcome

    def _exchange(self, sock: socket.socket) -> DiscoveryOutcome:
        """Send the probe and wait for a single reply on ``sock``."""
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        sock.sendto(self.config.discover_message.encode("utf-8"), self.config.target)
        self._log(f"Discovery packet sent to {self.config.broadcast_address}:{self.config.port}")

        sock.settimeout(self.config.timeout)
        data, addr = sock.recvfrom(self.config.buffer_size)
        return self._parse_response(data, addr[0])

    def _parse_response(self, data: bytes, host: str) -> DiscoveryOutcome:
        try:
            response = data.decode("utf-8")
        except UnicodeDecodeError:
            response = None

        if response != self.config.response_message:
            self._log(f"Unexpected response from {host}: {data[:64]!r}")
            return Failed(UNEXPECTED_RESPONSE)

        self._log(f"Found PC at: {host}")
        return Found(host)

    def _log(self, message: str) -> None:
        if self.config.verbose:
            print(f"[pc-discovery] {message}", file=sys.stderr)

    def close(self) -> None:
        """Shut down the worker pool after in-flight attempts finish."""
        self._executor.shutdown(wait=True)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
