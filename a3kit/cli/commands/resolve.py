"""
Resolve command implementation.

Resolves the a³ tool path for the current build and prints it.
"""

import json
import logging
from pathlib import Path

from a3kit.cli.utils import load_settings
from a3kit.installer.tool_installer import resolve_tool

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the resolve command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if a tool path was resolved, 1 otherwise)
    """
    settings = load_settings(args)
    os_class = settings.os_class()
    workspace = settings.workspace or Path.cwd()

    logger.debug(f"Resolving a³ for {settings.target or '<launcher>'} on {os_class}")

    result = resolve_tool(
        workspace,
        os_class,
        target=settings.target,
        package_dir=settings.package_dir,
        launcher_path=settings.launcher_path,
    )

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    elif result.ok:
        print(result.tool_path)

    if not result.ok:
        logger.error(f"a³ tool path not resolved: {result.message}")
        return 1

    return 0
