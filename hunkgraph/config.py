"""Configuration management for hunkgraph.

Handles user-level configuration stored in ~/.hunkgraph/config.yaml:
- palette_size: Number of colors lane color indices are wrapped into
- log_level: Logging level used by the CLI
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator


class ConfigError(Exception):
    """Raised when there's an error with the configuration file."""
    pass


_CONFIG_DIR = Path.home() / ".hunkgraph"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class HunkgraphConfig(BaseModel):
    """Validated hunkgraph settings."""

    palette_size: int = Field(default=8, ge=1)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    def palette_slot(self, color_index: int) -> int:
        """Wrap a lane color index into the configured palette."""
        return color_index % self.palette_size


def get_config_dir() -> Path:
    """Get the hunkgraph configuration directory.

    Returns:
        Path to ~/.hunkgraph/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.hunkgraph/config.yaml
    """
    return get_config_dir() / "config.yaml"


def load_config() -> HunkgraphConfig:
    """Load configuration from ~/.hunkgraph/config.yaml.

    Returns:
        HunkgraphConfig, with defaults if the file doesn't exist.

    Raises:
        ConfigError: If the file can't be read or holds invalid values.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return HunkgraphConfig()

    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_file} must contain a mapping")

    try:
        return HunkgraphConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_file}: {e}")


def save_config(config: HunkgraphConfig) -> None:
    """Save configuration to ~/.hunkgraph/config.yaml.

    Args:
        config: Configuration to save.
    """
    config_file = get_config_file_path()

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w") as f:
            yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigError(f"Failed to save config to {config_file}: {e}")


def set_config_value(key: str, value: Any) -> HunkgraphConfig:
    """Update a single setting and persist it.

    Args:
        key: Setting name (e.g., "palette_size").
        value: New value; validated by HunkgraphConfig.

    Returns:
        The updated configuration.

    Raises:
        ConfigError: If the key is unknown or the value is invalid.
    """
    if key not in HunkgraphConfig.model_fields:
        raise ConfigError(f"Unknown config key: {key}")

    data = load_config().model_dump()
    data[key] = value
    try:
        config = HunkgraphConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid value for {key}: {e}")

    save_config(config)
    return config
