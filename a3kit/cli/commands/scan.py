"""
Scan command implementation.

Lists the installer packages that match a target and OS without
unpacking anything.
"""

import logging

from a3kit.cli.utils import load_settings
from a3kit.core.exceptions import ConfigError
from a3kit.core.filesystem import list_directory
from a3kit.installer.selector import list_candidates, select_best

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the scan command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if at least one package matches, 1 otherwise)
    """
    settings = load_settings(args)
    if settings.package_dir is None:
        raise ConfigError("scan requires a package directory (--package-dir)")

    os_class = settings.os_class()
    logger.debug(f"Scanning {settings.package_dir} for {settings.target} on {os_class}")
    entries = list_directory(settings.package_dir)
    tag, suffix = os_class.archive_tag, os_class.archive_suffix

    candidates = list_candidates(entries, settings.target, tag, suffix)
    selected, build = select_best(entries, settings.target, tag, suffix)

    if not candidates:
        print(f"No a³ installer packages for {settings.target} ({tag}) in {settings.package_dir}")
        return 1

    print(f"a³ installer packages for {settings.target} ({tag}) in {settings.package_dir}:")
    for entry, name in candidates:
        marker = "*" if entry == selected else " "
        print(f"  {marker} b{name.build:<10} {entry.name}")
    print(f"Selected build: {build}")

    return 0
