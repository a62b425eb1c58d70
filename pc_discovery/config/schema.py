"""Configuration data models for PC discovery.

Defines the probe constants and the validation result types used by the
config loader.
"""

from dataclasses import dataclass, field

# Wire protocol constants
DISCOVER_MESSAGE = "INMO_AAR3_DISCOVER"
RESPONSE_MESSAGE = "INMO_AAR3_RESPONSE"
BROADCAST_ADDRESS = "255.255.255.255"
DEFAULT_DISCOVERY_PORT = 9999

# Receive timeout in seconds
DEFAULT_TIMEOUT = 5.0

# Receive buffer size in bytes
DEFAULT_BUFFER_SIZE = 1024

DEFAULT_MAX_WORKERS = 4


@dataclass
class ProbeConfig:
    """Settings for a discovery probe."""
    broadcast_address: str = BROADCAST_ADDRESS
    port: int = DEFAULT_DISCOVERY_PORT
    timeout: float = DEFAULT_TIMEOUT
    buffer_size: int = DEFAULT_BUFFER_SIZE
    discover_message: str = DISCOVER_MESSAGE
    response_message: str = RESPONSE_MESSAGE
    max_workers: int = DEFAULT_MAX_WORKERS
    verbose: bool = False

    @property
    def target(self) -> tuple[str, int]:
        """Destination of the probe datagram."""
        return self.broadcast_address, self.port


@dataclass
class ValidationError:
    """A single validation error."""
    path: str
    message: str
    severity: str = "error"  # "error" or "warning"


@dataclass
class ValidationResult:
    """Result of config validation."""
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def __str__(self) -> str:
        if self.valid:
            msg = "Valid"
            if self.warnings:
                msg += f" ({self.warning_count} warnings)"
            return msg
        return f"Invalid: {self.error_count} errors, {self.warning_count} warnings"
