"""
Operating-system classes for a3kit.

This module defines the OS classes an a³ installation can target and the
per-OS naming conventions used when looking up installer archives and
launcher binaries.

Features:
- OSClass enumeration (UNIX, WINDOWS, MACOS)
- Archive OS tag and file suffix per OS class ('linux64', 'win64', 'macos64')
- Executable suffix per OS class ('.exe' on Windows only)
- Host OS detection with caching

Usage:
    from a3kit.core.platform import OSClass, detect_os_class

    os_class = detect_os_class()
    print(f"OS tag: {os_class.archive_tag}")
    print(f"Launcher: alauncher{os_class.executable_suffix}")
"""

import functools
import platform
from enum import Enum


class OSClass(Enum):
    """OS class of a build agent."""

    UNIX = "unix"
    WINDOWS = "windows"
    MACOS = "macos"

    @property
    def archive_tag(self) -> str:
        """
        OS tag embedded in installer archive names.

        Example:
            >>> OSClass.WINDOWS.archive_tag
            'win64'
        """
        return _ARCHIVE_TAGS[self][0]

    @property
    def archive_suffix(self) -> str:
        """File suffix expected at the end of installer archive names."""
        return _ARCHIVE_TAGS[self][1]

    @property
    def executable_suffix(self) -> str:
        """Suffix appended to executable file names."""
        return ".exe" if self is OSClass.WINDOWS else ""

    @classmethod
    def parse(cls, value: str) -> "OSClass":
        """
        Parse an OS class name (case-insensitive).

        Accepts the enum values ('unix', 'windows', 'macos') as well as the
        archive tags ('linux64', 'win64', 'macos64').

        Raises:
            ValueError: If the name is not recognized
        """
        normalized = value.strip().lower()
        for os_class in cls:
            if normalized in (os_class.value, os_class.archive_tag):
                return os_class
        choices = ", ".join(c.value for c in cls)
        raise ValueError(f"Unknown OS class: {value!r} (expected one of: {choices})")

    def __str__(self) -> str:
        return self.value


# OS class -> (archive OS tag, archive suffix)
_ARCHIVE_TAGS = {
    OSClass.UNIX: ("linux64", ".zip"),
    OSClass.WINDOWS: ("win64", ".zip"),
    OSClass.MACOS: ("macos64", ".zip"),
}


@functools.lru_cache(maxsize=1)
def detect_os_class() -> OSClass:
    """
    Detect the OS class of the current host.

    This function is cached - it only runs detection once per process.

    Returns:
        OSClass of the host. Any POSIX system other than macOS maps to UNIX.
    """
    system = platform.system().lower()

    if system == "windows":
        return OSClass.WINDOWS
    elif system == "darwin":
        return OSClass.MACOS
    else:
        return OSClass.UNIX


def clear_platform_cache():
    """
    Clear the OS detection cache.

    This forces the next call to detect_os_class() to re-detect.
    """
    detect_os_class.cache_clear()


__all__ = [
    "OSClass",
    "detect_os_class",
    "clear_platform_cache",
]
