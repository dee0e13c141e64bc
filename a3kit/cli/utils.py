"""
Shared utilities for CLI commands.

Combines the configuration file with command-line overrides so every
command sees the same settings.
"""

import dataclasses
import logging
from pathlib import Path
from typing import Optional

from a3kit.config.parser import (
    A3KitConfig,
    DEFAULT_CONFIG_NAME,
    parse_config,
    validate_config,
)
from a3kit.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# argparse attribute -> A3KitConfig field
_OVERRIDES = {
    "target": "target",
    "os": "os",
    "package_dir": "package_dir",
    "launcher_path": "launcher_path",
    "workspace": "workspace",
}


def find_config_file(args, cwd: Optional[Path] = None) -> Optional[Path]:
    """
    Locate the configuration file for a command.

    Args:
        args: Parsed arguments (uses args.config if set)
        cwd: Directory searched for the default config (default: current directory)

    Returns:
        Path to the configuration file, or None if there is none

    Raises:
        ConfigError: If an explicitly given config file does not exist
    """
    explicit = getattr(args, "config", None)
    if explicit:
        if not Path(explicit).exists():
            raise ConfigError(f"Configuration file not found: {explicit}")
        return Path(explicit)

    default_config = (cwd or Path.cwd()) / DEFAULT_CONFIG_NAME
    if default_config.exists():
        return default_config

    logger.debug("No config file found, using command-line options only")
    return None


def load_settings(args, cwd: Optional[Path] = None) -> A3KitConfig:
    """
    Load settings from the config file and apply command-line overrides.

    Args:
        args: Parsed arguments
        cwd: Directory searched for the default config and against which
            relative path flags are taken (default: current directory)

    Returns:
        Validated configuration

    Raises:
        ConfigError: If the merged settings are invalid
    """
    config_file = find_config_file(args, cwd)
    if config_file is not None:
        logger.debug(f"Loading configuration from {config_file}")
        config = parse_config(config_file)
    else:
        config = A3KitConfig(version=1)

    overrides = {}
    for attr, field_name in _OVERRIDES.items():
        value = getattr(args, attr, None)
        if value is not None:
            overrides[field_name] = value

    # Relative flag paths are relative to the invocation directory
    base_dir = cwd or Path.cwd()
    for field_name in ("package_dir", "workspace"):
        if field_name in overrides:
            overrides[field_name] = base_dir / overrides[field_name]
    if overrides.get("launcher_path"):
        overrides["launcher_path"] = str(base_dir / overrides["launcher_path"])

    config = dataclasses.replace(config, **overrides)
    validate_config(config)
    return config
