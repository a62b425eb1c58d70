"""YAML config loader for PC discovery.

Resolves the config file from an explicit path, the PC_DISCOVERY_CONFIG
environment variable, or ~/.pc-discovery/config.yaml, and parses it into a
ProbeConfig.

Example file:

    discovery:
      port: 9999
      timeout: 5
      verbose: true
"""

import dataclasses
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .schema import ProbeConfig
from .validator import validate_config

CONFIG_ENV_VAR = "PC_DISCOVERY_CONFIG"
CONFIG_HOME_DIR = ".pc-discovery"
CONFIG_FILE_NAME = "config.yaml"


def default_config_path() -> Path:
    """Path of the per-user config file."""
    return Path.home() / CONFIG_HOME_DIR / CONFIG_FILE_NAME


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """Find the config file to load.

    Searches in order:
    1. Explicit ``path`` argument
    2. PC_DISCOVERY_CONFIG environment variable
    3. ~/.pc-discovery/config.yaml, if it exists

    Returns:
        Path to the config file, or None to use built-in defaults.
    """
    if path:
        return Path(path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    home_path = default_config_path()
    if home_path.exists():
        return home_path

    return None


def load_config(path: Optional[Union[str, Path]] = None) -> ProbeConfig:
    """Load and validate the probe configuration.

    Args:
        path: Config file path. None = search the default locations.

    Returns:
        Validated ProbeConfig.

    Raises:
        FileNotFoundError: If the resolved config file doesn't exist.
        ValueError: If the file is malformed or fails validation.
    """
    config_path = resolve_config_path(path)
    config = parse_config_file(config_path) if config_path else ProbeConfig()
    return ensure_valid(config)


def ensure_valid(config: ProbeConfig) -> ProbeConfig:
    """Return ``config`` unchanged, or raise ValueError listing its errors."""
    validation = validate_config(config)
    if not validation.valid:
        errors_str = "; ".join(f"{e.path}: {e.message}" for e in validation.errors)
        raise ValueError(f"Invalid config: {errors_str}")
    return config


def parse_config_file(file_path: Union[str, Path]) -> ProbeConfig:
    """Parse a YAML config file into a ProbeConfig.

    An empty file yields the defaults.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    if file_path.suffix not in (".yaml", ".yml"):
        raise ValueError(f"Expected .yaml or .yml file, got: {file_path.suffix}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML in {file_path}: {e}") from e

    if data is None:
        return ProbeConfig()

    return parse_config_data(data, source=str(file_path))


def parse_config_data(data: dict, source: str = "<inline>") -> ProbeConfig:
    """Parse a ProbeConfig from a dictionary (already loaded YAML).

    Raises:
        ValueError: If the data is not shaped as expected.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data).__name__}")

    section = data.get("discovery") or {}
    if not isinstance(section, dict):
        raise ValueError(f"'discovery' must be a mapping in {source}")

    return ProbeConfig(**{
        k: v for k, v in section.items()
        if k in ProbeConfig.__dataclass_fields__
    })


def apply_overrides(config: ProbeConfig, **overrides: Any) -> ProbeConfig:
    """Return a copy of ``config`` with every non-None override applied."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    return dataclasses.replace(config, **changes)
