"""
Core functionality for a3kit.

This package contains the foundational modules that the installer
components depend on.
"""

from .platform import (
    OSClass,
    detect_os_class,
    clear_platform_cache,
)

from .interfaces import (
    PackageEntry,
    PackageStore,
    LogSink,
    LoggingSink,
)

from .filesystem import (
    FilesystemError,
    ArchiveExtractionError,
    UnsupportedArchiveFormat,
    InsecureArchiveError,
    list_directory,
    extract_archive,
    LocalPackageStore,
)

from .exceptions import (
    A3KitError,
    ConfigError,
    ResolutionError,
    NoCandidateFoundError,
    UnsupportedModeError,
    MalformedPathError,
)

__all__ = [
    "OSClass",
    "detect_os_class",
    "clear_platform_cache",
    "PackageEntry",
    "PackageStore",
    "LogSink",
    "LoggingSink",
    "FilesystemError",
    "ArchiveExtractionError",
    "UnsupportedArchiveFormat",
    "InsecureArchiveError",
    "list_directory",
    "extract_archive",
    "LocalPackageStore",
    "A3KitError",
    "ConfigError",
    "ResolutionError",
    "NoCandidateFoundError",
    "UnsupportedModeError",
    "MalformedPathError",
]
