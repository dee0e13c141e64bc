"""
a3kit CLI argument parser.

This module implements the command-line interface for a3kit using argparse.
"""

import argparse
import importlib
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from a3kit.config.parser import OS_CHOICES
from a3kit.core.exceptions import A3KitError

try:
    from importlib.metadata import version

    __version__ = version("a3kit")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)

_COMMANDS_PACKAGE = "a3kit.cli.commands"


class CLI:
    """a3kit command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="a3kit",
            description="a3kit - Locate and install the a³ analyzer for CI builds",
            epilog='Use "a3kit COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"a3kit {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./a3kit.yaml)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_resolve_command(subparsers)
        self._add_scan_command(subparsers)

        return parser

    def _add_common_options(self, parser):
        """Options shared by all resolution commands."""
        parser.add_argument(
            "--target",
            metavar="NAME",
            help="Analysis target (e.g., arm, ppc, tricore)",
        )
        parser.add_argument(
            "--os",
            choices=OS_CHOICES,
            metavar="OS",
            help="OS class of the build agent or its archive tag [default: auto]",
        )
        parser.add_argument(
            "--package-dir",
            type=Path,
            metavar="PATH",
            help="Directory holding a³ installer packages",
        )

    def _add_resolve_command(self, subparsers):
        """Add 'resolve' subcommand."""
        parser = subparsers.add_parser(
            "resolve",
            help="Resolve the a³ tool path",
            description=(
                "Unpack the newest matching installer package into the workspace, "
                "or fall back to the pre-installed launcher, and print the tool path"
            ),
        )
        self._add_common_options(parser)
        parser.add_argument(
            "--launcher-path",
            metavar="PATH",
            help="Directory of the pre-installed alauncher (or a file inside it)",
        )
        parser.add_argument(
            "--workspace",
            type=Path,
            metavar="PATH",
            help="Build workspace to unpack into (default: current directory)",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print the full resolution result as JSON",
        )

    def _add_scan_command(self, subparsers):
        """Add 'scan' subcommand."""
        parser = subparsers.add_parser(
            "scan",
            help="List matching installer packages",
            description=(
                "List installer packages for a target and OS and show which one "
                "would be selected. Nothing is unpacked."
            ),
        )
        self._add_common_options(parser)

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Command exit code; 1 on configuration or unexpected errors,
            130 when interrupted
        """
        parsed_args = self.parse_args(args)
        _configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return _load_command(parsed_args.command).run(parsed_args)
        except KeyboardInterrupt:
            logger.info("Interrupted")
            return 130
        except A3KitError as e:
            logger.error(str(e))
            return 1
        except Exception as e:
            logger.error(f"{parsed_args.command} failed: {e}")
            if parsed_args.verbose:
                traceback.print_exc()
            return 1


def _configure_logging(args) -> None:
    """Route log records to stderr at the level chosen by -v / -q."""
    if args.verbose:
        level, fmt = logging.DEBUG, "%(levelname)s [%(name)s] %(message)s"
    elif args.quiet:
        level, fmt = logging.ERROR, "%(levelname)s: %(message)s"
    else:
        level, fmt = logging.INFO, "%(message)s"
    logging.basicConfig(level=level, format=fmt, force=True)


def _load_command(name: str):
    """Import the module implementing a subcommand; it exposes run(args)."""
    return importlib.import_module(f"{_COMMANDS_PACKAGE}.{name}")


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
