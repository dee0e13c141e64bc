"""Configuration loading for a3kit."""

from .parser import (
    A3KitConfig,
    DEFAULT_CONFIG_NAME,
    parse_config,
    validate_config,
)
from a3kit.core.exceptions import ConfigError

__all__ = [
    "A3KitConfig",
    "DEFAULT_CONFIG_NAME",
    "ConfigError",
    "parse_config",
    "validate_config",
]
