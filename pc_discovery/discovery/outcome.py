"""Discovery outcome types.

An attempt produces exactly one outcome: either the PC was found at an
address, or the attempt failed with a human-readable reason.
"""

from dataclasses import dataclass
from typing import Callable, Union

# Failure reasons reported to callers
NO_PC_FOUND = "No PC found on network"
UNEXPECTED_RESPONSE = "Unexpected response"
NETWORK_ERROR_PREFIX = "Network error: "


@dataclass(frozen=True)
class Found:
    """A responder answered with the expected magic string."""
    address: str

    @property
    def success(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"Found PC at {self.address}"


@dataclass(frozen=True)
class Failed:
    """The attempt ended without discovering a PC."""
    reason: str

    @property
    def success(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.reason


DiscoveryOutcome = Union[Found, Failed]
OutcomeCallback = Callable[[DiscoveryOutcome], None]


def network_error(exc: BaseException) -> Failed:
    """Build the failure outcome for a socket-level error."""
    return Failed(f"{NETWORK_ERROR_PREFIX}{exc}")


def listener_callback(
    on_discovered: Callable[[str], None],
    on_failed: Callable[[str], None],
) -> OutcomeCallback:
    """Adapt a two-method listener to a single outcome callback.

    Args:
        on_discovered: Called with the responder's IP address.
        on_failed: Called with the failure reason.

    Returns:
        Callback that dispatches each outcome to exactly one of the two.
    """
    def dispatch(outcome: DiscoveryOutcome) -> None:
        if isinstance(outcome, Found):
            on_discovered(outcome.address)
        else:
            on_failed(outcome.reason)

    return dispatch
