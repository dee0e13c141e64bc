"""YAML configuration parser for a3kit.

This module provides parsing and validation for a3kit.yaml configuration files.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import yaml

from a3kit.core.exceptions import ConfigError
from a3kit.core.platform import OSClass, detect_os_class

DEFAULT_CONFIG_NAME = "a3kit.yaml"

# Enum values and archive tags, both understood by OSClass.parse
OS_CHOICES = (
    ("auto",)
    + tuple(c.value for c in OSClass)
    + tuple(c.archive_tag for c in OSClass)
)


@dataclass
class A3KitConfig:
    """Complete a3kit configuration."""

    version: int
    target: Optional[str] = None
    os: str = "auto"  # "auto", an OSClass value or an archive tag
    workspace: Optional[Path] = None
    package_dir: Optional[Path] = None
    launcher_path: Optional[str] = None

    def os_class(self) -> OSClass:
        """OS class to resolve for; 'auto' detects the host."""
        if self.os == "auto":
            return detect_os_class()
        return OSClass.parse(self.os)


def parse_config(config_path: Path) -> A3KitConfig:
    """
    Parse a3kit.yaml configuration file.

    Relative paths in the file are taken relative to the file's directory.

    Args:
        config_path: Path to a3kit.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        raise ConfigError("Configuration file is empty")

    return _parse_and_validate(data, config_path.resolve().parent)


def _parse_and_validate(data: dict, base_dir: Path) -> A3KitConfig:
    """Parse and validate configuration data."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    if "version" not in data:
        raise ConfigError("Missing required field: version")

    if data["version"] != 1:
        raise ConfigError(f"Unsupported version: {data['version']} (expected 1)")

    workspace = _optional_str(data, "workspace")
    package_dir = _optional_str(data, "package_dir")
    launcher_path = _optional_str(data, "launcher_path")

    config = A3KitConfig(
        version=1,
        target=_optional_str(data, "target"),
        os=str(data.get("os", "auto")).lower(),
        workspace=base_dir / workspace if workspace is not None else None,
        package_dir=base_dir / package_dir if package_dir is not None else None,
        launcher_path=(
            str(base_dir / launcher_path) if launcher_path else launcher_path
        ),
    )
    validate_config(config)
    return config


def validate_config(config: A3KitConfig) -> None:
    """
    Validate a configuration.

    Args:
        config: Configuration to check

    Raises:
        ConfigError: If the OS is unknown, no resolution mode is configured,
            or package_dir is set without a target
    """
    if config.os not in OS_CHOICES:
        raise ConfigError(
            f"Invalid os: {config.os} (expected one of: {', '.join(OS_CHOICES)})"
        )

    if config.package_dir is None and config.launcher_path is None:
        raise ConfigError("Either package_dir or launcher_path must be set")

    if config.package_dir is not None and not config.target:
        raise ConfigError("Missing required field: target (required with package_dir)")


def _optional_str(data: dict, key: str) -> Optional[str]:
    """Read an optional string field."""
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value
