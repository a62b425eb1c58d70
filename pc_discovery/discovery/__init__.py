"""Discovery module - UDP broadcast PC discovery."""

from .outcome import (
    NO_PC_FOUND,
    UNEXPECTED_RESPONSE,
    DiscoveryOutcome,
    Failed,
    Found,
    listener_callback,
)
from .probe import DiscoveryProbe, udp_socket
from .profile import ConnectionProfile, DEFAULT_VNC_PORT

__all__ = [
    "NO_PC_FOUND",
    "UNEXPECTED_RESPONSE",
    "DiscoveryOutcome",
    "Failed",
    "Found",
    "listener_callback",
    "DiscoveryProbe",
    "udp_socket",
    "ConnectionProfile",
    "DEFAULT_VNC_PORT",
]
