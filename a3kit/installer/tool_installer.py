"""
a³ tool installer facade.

Selects one resolution mode at construction time and exposes the resolved
tool path and metadata:

- ArchiveMode: unpack the newest matching installer package
- LauncherMode: use a pre-installed launcher

Usage:
    from a3kit.installer import A3ToolInstaller
    from a3kit.core.platform import OSClass

    installer = A3ToolInstaller.from_package_dir(ws, "/shared/a3", "arm", OSClass.UNIX)
    if installer.get_tool_file_path() is None:
        installer = A3ToolInstaller.from_launcher(ws, "/opt/a3", OSClass.UNIX)
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from a3kit.core.interfaces import LoggingSink, LogSink, PackageStore
from a3kit.core.platform import OSClass
from a3kit.installer.archive import ArchiveInstaller
from a3kit.installer.launcher import LauncherResolver
from a3kit.installer.result import ResolutionOutcome, ResolutionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArchiveMode:
    """Resolve from a directory of installer packages."""

    package_dir: Path
    target: str


@dataclass(frozen=True)
class LauncherMode:
    """Resolve a pre-installed launcher."""

    launcher_path: Union[str, Path]


ResolutionMode = Union[ArchiveMode, LauncherMode]


class A3ToolInstaller:
    """
    Resolves the a³ tool for one build in exactly one mode.

    Resolution happens in the constructor; the result is immutable.
    """

    def __init__(
        self,
        workspace: Union[str, Path],
        mode: ResolutionMode,
        os_class: OSClass,
        sink: Optional[LogSink] = None,
        store: Optional[PackageStore] = None,
    ):
        """
        Initialize installer and resolve the tool path.

        Args:
            workspace: Build workspace (archive extraction destination)
            mode: ArchiveMode or LauncherMode
            os_class: OS class of the build agent
            sink: Log sink for progress lines. If None, logs via `logging`.
            store: Package store. If None, uses the local filesystem.
        """
        self.workspace = Path(workspace)
        self.mode = mode
        self.os_class = os_class
        sink = sink or LoggingSink(logger)

        if isinstance(mode, ArchiveMode):
            self.result = ArchiveInstaller(store, sink).resolve(
                self.workspace, mode.package_dir, mode.target, os_class
            )
        elif isinstance(mode, LauncherMode):
            self.result = LauncherResolver(store, sink).resolve(
                self.workspace, mode.launcher_path, os_class
            )
        else:
            raise TypeError(f"Unknown resolution mode: {mode!r}")

    @classmethod
    def from_package_dir(
        cls,
        workspace: Union[str, Path],
        package_dir: Union[str, Path],
        target: str,
        os_class: OSClass,
        sink: Optional[LogSink] = None,
        store: Optional[PackageStore] = None,
    ) -> "A3ToolInstaller":
        """Search package_dir for the newest installer package and unpack it."""
        return cls(workspace, ArchiveMode(Path(package_dir), target), os_class, sink, store)

    @classmethod
    def from_launcher(
        cls,
        workspace: Union[str, Path],
        launcher_path: Union[str, Path],
        os_class: OSClass,
        sink: Optional[LogSink] = None,
        store: Optional[PackageStore] = None,
    ) -> "A3ToolInstaller":
        """Use the pre-installed launcher at launcher_path (directory or file)."""
        # Keep the raw string: Path("") would turn into "."
        return cls(workspace, LauncherMode(launcher_path), os_class, sink, store)

    def get_tool_file_path(self) -> Optional[Path]:
        return self.result.tool_path

    def get_build_nr(self) -> int:
        return self.result.selected_build

    def get_target(self) -> Optional[str]:
        return self.result.target

    def get_node_os(self) -> OSClass:
        return self.os_class


def resolve_tool(
    workspace: Union[str, Path],
    os_class: OSClass,
    target: Optional[str] = None,
    package_dir: Optional[Union[str, Path]] = None,
    launcher_path: Optional[Union[str, Path]] = None,
    sink: Optional[LogSink] = None,
    store: Optional[PackageStore] = None,
) -> ResolutionResult:
    """
    Resolve the a³ tool, trying archive mode before launcher mode.

    Archive mode runs when package_dir is given. Launcher mode runs when
    launcher_path is given and archive mode was not configured or found
    nothing. Errors from launcher mode (e.g. MacOS) are returned as is.

    Args:
        workspace: Build workspace
        os_class: OS class of the build agent
        target: Analysis target, required for archive mode
        package_dir: Directory holding installer packages
        launcher_path: Launcher directory or file
        sink: Log sink for progress lines
        store: Package store

    Returns:
        ResolutionResult of the last mode that ran

    Raises:
        ValueError: If neither mode is configured, or archive mode lacks a target
    """
    if package_dir is None and launcher_path is None:
        raise ValueError("Either a package directory or a launcher path is required")

    result = None
    if package_dir is not None:
        if not target:
            raise ValueError("A target is required to search installer packages")
        result = A3ToolInstaller.from_package_dir(
            workspace, package_dir, target, os_class, sink, store
        ).result
        if result.outcome is not ResolutionOutcome.NOT_FOUND:
            return result

    if launcher_path is not None:
        if result is not None:
            logger.debug("No installer package resolved, falling back to launcher")
        result = A3ToolInstaller.from_launcher(
            workspace, launcher_path, os_class, sink, store
        ).result

    return result
