"""Locate the PC on the local network by UDP broadcast."""

from .config import ProbeConfig, load_config
from .discovery import (
    ConnectionProfile,
    DiscoveryOutcome,
    DiscoveryProbe,
    Failed,
    Found,
    listener_callback,
)

__version__ = "0.1.0"

__all__ = [
    "ProbeConfig",
    "load_config",
    "ConnectionProfile",
    "DiscoveryOutcome",
    "DiscoveryProbe",
    "Failed",
    "Found",
    "listener_callback",
]
