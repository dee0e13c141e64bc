"""
Local filesystem utilities for a3kit.

This module provides the filesystem primitives the resolution core consumes
through the PackageStore interface:
- Non-recursive directory listing
- Safe ZIP archive extraction (directory traversal protection,
  Unix permission bits restored from the archive)

All a³ installer packages are shipped as .zip files on every OS class.
"""

import logging
import os
import stat
import zipfile
from pathlib import Path
from typing import Callable, List, Optional, Union

from a3kit.core.interfaces import PackageEntry, PackageStore

logger = logging.getLogger(__name__)


# ============================================================================
# Error Handling
# ============================================================================


class FilesystemError(Exception):
    """Base exception for filesystem operations."""

    pass


class ArchiveExtractionError(FilesystemError):
    """Failed to extract an archive."""

    pass


class UnsupportedArchiveFormat(ArchiveExtractionError):
    """Archive format is not supported."""

    pass


class InsecureArchiveError(ArchiveExtractionError):
    """Archive contains insecure paths (directory traversal attempt)."""

    pass


# ============================================================================
# Directory Listing
# ============================================================================


def list_directory(directory: Union[str, Path]) -> List[PackageEntry]:
    """
    List the immediate children of a directory.

    Args:
        directory: Directory to list

    Returns:
        One PackageEntry per child, in the order the OS returns them

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path is not a directory
        OSError: On any other listing failure

    Example:
        >>> [e.name for e in list_directory('/shared/a3')]
        ['a3_arm_win64_b277911_release.zip', 'old']
    """
    entries = []
    with os.scandir(directory) as it:
        for dir_entry in it:
            entries.append(
                PackageEntry(
                    name=dir_entry.name,
                    path=Path(dir_entry.path),
                    is_directory=dir_entry.is_dir(),
                )
            )
    return entries


# ============================================================================
# Archive Extraction
# ============================================================================


def _validate_archive_path(path: str, destination: Path) -> None:
    """
    Validate that an archive member path is safe to extract.

    Prevents directory traversal attacks (e.g., paths containing '../').

    Args:
        path: Member path from archive
        destination: Extraction destination

    Raises:
        InsecureArchiveError: If path attempts directory traversal
    """
    member_path = (destination / path).resolve()

    if not member_path.is_relative_to(destination.resolve()):
        raise InsecureArchiveError(
            f"Archive member '{path}' attempts directory traversal. "
            "This is a security risk and extraction has been blocked."
        )


def extract_archive(
    archive_path: Union[str, Path],
    destination: Union[str, Path],
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> None:
    """
    Extract a ZIP archive to a destination directory.

    Validates all member paths before extracting anything.

    Args:
        archive_path: Path to the archive file
        destination: Directory to extract to (created if missing)
        progress_callback: Optional callback(current, total) for progress

    Raises:
        UnsupportedArchiveFormat: If the archive is not a .zip file
        ArchiveExtractionError: If extraction fails
        InsecureArchiveError: If archive contains malicious paths

    Example:
        >>> extract_archive('a3_arm_linux64_b42_release.zip', '/ws')
    """
    archive_path = Path(archive_path)
    destination = Path(destination)

    if not archive_path.name.lower().endswith(".zip"):
        raise UnsupportedArchiveFormat(
            f"Unsupported archive format: {archive_path.suffix}. Supported: .zip"
        )

    if not archive_path.exists():
        raise ArchiveExtractionError(f"Archive not found: {archive_path}")

    destination.mkdir(parents=True, exist_ok=True)

    try:
        _extract_zip(archive_path, destination, progress_callback)
    except InsecureArchiveError:
        raise
    except Exception as e:
        raise ArchiveExtractionError(f"Failed to extract {archive_path}: {e}")


def _extract_zip(
    archive_path: Path,
    destination: Path,
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> None:
    """Extract a ZIP archive, restoring Unix permission bits."""
    with zipfile.ZipFile(archive_path, "r") as zf:
        members = zf.infolist()
        total = len(members)

        # Validate all paths first
        for member in members:
            _validate_archive_path(member.filename, destination)

        for i, member in enumerate(members):
            _make_writable(destination / member.filename)
            extracted = Path(zf.extract(member, destination))
            mode = member.external_attr >> 16
            if mode and not member.is_dir():
                os.chmod(extracted, mode & 0o7777)
            if progress_callback:
                progress_callback(i + 1, total)


def _make_writable(path: Path) -> None:
    """Add the owner write bit to an existing file so it can be overwritten."""
    if path.is_file() and not os.access(path, os.W_OK):
        os.chmod(path, path.stat().st_mode | stat.S_IWUSR)


# ============================================================================
# Package Store
# ============================================================================


class LocalPackageStore(PackageStore):
    """PackageStore backed by the local filesystem."""

    def list_entries(self, directory: Path) -> List[PackageEntry]:
        return list_directory(directory)

    def is_directory(self, path: Path) -> bool:
        return Path(path).is_dir()

    def extract(self, entry: PackageEntry, destination: Path) -> None:
        logger.debug(f"Extracting {entry.path} to {destination}")
        extract_archive(entry.path, destination)


__all__ = [
    "FilesystemError",
    "ArchiveExtractionError",
    "UnsupportedArchiveFormat",
    "InsecureArchiveError",
    "list_directory",
    "extract_archive",
    "LocalPackageStore",
]
