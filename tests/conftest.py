"""Shared fixtures: loopback UDP responders and fake sockets."""

from __future__ import annotations

import socket
import threading

import pytest

from pc_discovery.config.schema import RESPONSE_MESSAGE, ProbeConfig


class Responder:
    """Answers the first datagram it receives on 127.0.0.1.

    With ``reply=None`` it only listens, so the probe sees a timeout rather
    than an ICMP port-unreachable error.
    """

    def __init__(self, reply: bytes | None = RESPONSE_MESSAGE.encode()):
        self.reply = reply
        self.received: list[bytes] = []
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self.sock.bind(("127.0.0.1", 0))
        self.sock.settimeout(5.0)
        self.port = self.sock.getsockname()[1]
        self._thread = threading.Thread(target=self._serve, daemon=True)

    def start(self) -> "Responder":
        self._thread.start()
        return self

    def _serve(self) -> None:
        try:
            data, addr = self.sock.recvfrom(1024)
        except OSError:
            return
        self.received.append(data)
        if self.reply is not None:
            self.sock.sendto(self.reply, addr)

    def close(self) -> None:
        self.sock.close()
        self._thread.join(timeout=6.0)

    def config(self, **overrides) -> ProbeConfig:
        """Probe config aimed at this responder."""
        values = {"broadcast_address": "127.0.0.1", "port": self.port, "timeout": 2.0}
        values.update(overrides)
        return ProbeConfig(**values)


@pytest.fixture
def responder():
    r = Responder().start()
    yield r
    r.close()


@pytest.fixture
def make_responder():
    started: list[Responder] = []

    def _make(reply: bytes | None) -> Responder:
        r = Responder(reply).start()
        started.append(r)
        return r

    yield _make
    for r in started:
        r.close()


class FakeSocket:
    """Stand-in for a UDP socket that records every call."""

    def __init__(
        self,
        reply: tuple[bytes, tuple[str, int]] | None = None,
        setsockopt_error: Exception | None = None,
        send_error: Exception | None = None,
        recv_error: Exception | None = None,
    ):
        self.reply = reply
        self.setsockopt_error = setsockopt_error
        self.send_error = send_error
        self.recv_error = recv_error
        self.options: dict[tuple[int, int], int] = {}
        self.sent: list[tuple[bytes, tuple[str, int]]] = []
        self.timeout: float | None = None
        self.recv_sizes: list[int] = []
        self.closed = False

    def setsockopt(self, level, option, value):
        if self.setsockopt_error:
            raise self.setsockopt_error
        self.options[(level, option)] = value

    def sendto(self, data, address):
        if self.send_error:
            raise self.send_error
        self.sent.append((data, address))
        return len(data)

    def settimeout(self, value):
        self.timeout = value

    def recvfrom(self, bufsize):
        self.recv_sizes.append(bufsize)
        if self.recv_error:
            raise self.recv_error
        if self.reply is None:
            raise socket.timeout("timed out")
        return self.reply

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class SocketTracker:
    """Socket factory handing out a prepared FakeSocket per attempt."""

    def __init__(self, **fake_kwargs):
        self.fake_kwargs = fake_kwargs
        self.sockets: list[FakeSocket] = []

    def __call__(self) -> FakeSocket:
        sock = FakeSocket(**self.fake_kwargs)
        self.sockets.append(sock)
        return sock

    @property
    def open_count(self) -> int:
        return sum(1 for s in self.sockets if not s.closed)


@pytest.fixture
def tracker_factory():
    return SocketTracker
