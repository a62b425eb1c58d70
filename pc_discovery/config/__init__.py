"""Config module - probe settings and YAML loading."""

from .schema import (
    BROADCAST_ADDRESS,
    DEFAULT_DISCOVERY_PORT,
    DEFAULT_TIMEOUT,
    DISCOVER_MESSAGE,
    RESPONSE_MESSAGE,
    ProbeConfig,
    ValidationError,
    ValidationResult,
)
from .loader import apply_overrides, load_config, parse_config_data, parse_config_file
from .validator import validate_config

__all__ = [
    "BROADCAST_ADDRESS",
    "DEFAULT_DISCOVERY_PORT",
    "DEFAULT_TIMEOUT",
    "DISCOVER_MESSAGE",
    "RESPONSE_MESSAGE",
    "ProbeConfig",
    "ValidationError",
    "ValidationResult",
    "apply_overrides",
    "load_config",
    "parse_config_data",
    "parse_config_file",
    "validate_config",
]
