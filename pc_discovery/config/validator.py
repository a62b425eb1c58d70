"""Config validator for PC discovery.

Validates ProbeConfig values before any socket is opened.
"""

from .schema import BROADCAST_ADDRESS, ProbeConfig, ValidationError, ValidationResult


def validate_config(config: ProbeConfig) -> ValidationResult:
    """Validate a ProbeConfig.

    Checks:
    - Port range and worker count
    - Positive timeout and buffer size
    - Non-empty magic strings that fit the receive buffer

    Args:
        config: Config to validate.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    _validate_network(config, errors, warnings)
    _validate_messages(config, errors)

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _validate_network(
    config: ProbeConfig,
    errors: list[ValidationError],
    warnings: list[ValidationError],
) -> None:
    if not isinstance(config.broadcast_address, str) or not config.broadcast_address:
        errors.append(ValidationError(
            path="discovery.broadcast_address",
            message="'broadcast_address' is required and must not be empty.",
        ))
    elif config.broadcast_address != BROADCAST_ADDRESS:
        warnings.append(ValidationError(
            path="discovery.broadcast_address",
            message=f"Using '{config.broadcast_address}' instead of {BROADCAST_ADDRESS}.",
            severity="warning",
        ))

    if not _is_int(config.port) or not 1 <= config.port <= 65535:
        errors.append(ValidationError(
            path="discovery.port",
            message=f"Port must be an integer between 1 and 65535, got {config.port!r}.",
        ))

    if not _is_number(config.timeout) or config.timeout <= 0:
        errors.append(ValidationError(
            path="discovery.timeout",
            message=f"Timeout must be a positive number of seconds, got {config.timeout!r}.",
        ))

    if not isinstance(config.verbose, bool):
        errors.append(ValidationError(
            path="discovery.verbose",
            message=f"verbose must be true or false, got {config.verbose!r}.",
        ))

    if not _is_int(config.max_workers) or config.max_workers < 1:
        errors.append(ValidationError(
            path="discovery.max_workers",
            message=f"max_workers must be at least 1, got {config.max_workers!r}.",
        ))


def _validate_messages(config: ProbeConfig, errors: list[ValidationError]) -> None:
    for name in ("discover_message", "response_message"):
        value = getattr(config, name)
        if not isinstance(value, str) or not value:
            errors.append(ValidationError(
                path=f"discovery.{name}",
                message=f"'{name}' is required and must not be empty.",
            ))

    if not _is_int(config.buffer_size) or config.buffer_size <= 0:
        errors.append(ValidationError(
            path="discovery.buffer_size",
            message=f"Buffer size must be a positive integer, got {config.buffer_size!r}.",
        ))
    elif isinstance(config.response_message, str):
        needed = len(config.response_message.encode("utf-8"))
        if config.buffer_size < needed:
            errors.append(ValidationError(
                path="discovery.buffer_size",
                message=f"Buffer size {config.buffer_size} cannot hold the {needed}-byte response.",
            ))
