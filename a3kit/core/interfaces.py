"""
Core interfaces for a3kit.

This module defines the narrow interfaces the resolution core depends on:
a package store for directory listing and archive extraction, and a log
sink for progress and error lines. The core never touches the filesystem
or the logging system directly.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class PackageEntry:
    """One immediate child of a package directory."""

    name: str
    path: Path
    is_directory: bool = False


class PackageStore(ABC):
    """
    Abstract interface for listing package directories and unpacking archives.

    Implementations may raise OSError (or subclasses of FilesystemError)
    from any method; the archive installer treats those as "no candidate".
    """

    @abstractmethod
    def list_entries(self, directory: Path) -> List[PackageEntry]:
        """
        List the immediate children of a directory.

        Args:
            directory: Directory to list (not recursed)

        Returns:
            Entries in the order the underlying listing yields them
        """
        pass

    @abstractmethod
    def is_directory(self, path: Path) -> bool:
        """
        Check whether a path designates an existing directory.

        Args:
            path: Path to check

        Returns:
            True if the path exists and is a directory
        """
        pass

    @abstractmethod
    def extract(self, entry: PackageEntry, destination: Path) -> None:
        """
        Unpack an archive entry into a destination directory.

        Args:
            entry: Archive entry returned by list_entries()
            destination: Directory the archive contents are unpacked into
        """
        pass


class LogSink(ABC):
    """Abstract interface for progress, info and error lines."""

    @abstractmethod
    def emit(self, level: int, message: str) -> None:
        """
        Emit one line.

        Args:
            level: Standard logging level (logging.INFO, logging.ERROR, ...)
            message: Free-text message
        """
        pass


class LoggingSink(LogSink):
    """Log sink that forwards to a standard library logger."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("a3kit")

    def emit(self, level: int, message: str) -> None:
        self._logger.log(level, message)


__all__ = [
    "PackageEntry",
    "PackageStore",
    "LogSink",
    "LoggingSink",
]
