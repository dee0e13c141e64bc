"""
Archive mode: install a³ from a shared directory of installer packages.

The installer scans a package directory for archives named after the
target and OS, selects the one with the highest build number, unpacks it
into the workspace and predicts the path of the tool binary inside it.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from a3kit.core.filesystem import FilesystemError, LocalPackageStore
from a3kit.core.interfaces import LoggingSink, LogSink, PackageStore
from a3kit.core.platform import OSClass
from a3kit.installer.naming import tool_binary_relpath
from a3kit.installer.result import ResolutionOutcome, ResolutionResult
from a3kit.installer.selector import NO_BUILD, select_best

logger = logging.getLogger(__name__)


class ArchiveInstaller:
    """
    Resolves the a³ tool path from versioned installer archives.

    Resolution is best effort: listing and extraction failures are reported
    as a NOT_FOUND result so the caller can fall back to launcher mode.

    Example:
        >>> installer = ArchiveInstaller()
        >>> result = installer.resolve(Path("/ws"), "/shared/a3", "arm", OSClass.WINDOWS)
        >>> result.tool_path
        PosixPath('/ws/a3_arm_win64_b277911_release/bin/a3arm.exe')
    """

    def __init__(
        self,
        store: Optional[PackageStore] = None,
        sink: Optional[LogSink] = None,
    ):
        """
        Initialize archive installer.

        Args:
            store: Package store used for listing and extraction.
                If None, uses the local filesystem.
            sink: Log sink for progress lines. If None, logs via `logging`.
        """
        self.store = store or LocalPackageStore()
        self.sink = sink or LoggingSink(logger)

    def resolve(
        self,
        workspace_root: Union[str, Path],
        package_dir: Union[str, Path],
        target: str,
        os_class: OSClass,
    ) -> ResolutionResult:
        """
        Select, unpack and locate the a³ installer package for a target.

        Args:
            workspace_root: Directory the archive is unpacked into
            package_dir: Directory holding the installer packages. Relative
                paths are taken relative to workspace_root.
            target: Analysis target (e.g. 'arm', 'ppc', 'tricore')
            os_class: OS class of the build agent

        Returns:
            ResolutionResult with outcome RESOLVED or NOT_FOUND
        """
        workspace_root = Path(workspace_root)
        package_dir = workspace_root / package_dir
        expected_os = os_class.archive_tag
        expected_suffix = os_class.archive_suffix

        self.sink.emit(
            logging.INFO,
            f"Scanning for a³ {target} installation packages in {package_dir} ...",
        )

        try:
            entries = self.store.list_entries(package_dir)
        except (OSError, FilesystemError) as e:
            message = f"Failed to list installer packages in {package_dir}: {e}"
            self.sink.emit(logging.WARNING, message)
            return self._not_found(target, os_class, message)

        selected, build = select_best(entries, target, expected_os, expected_suffix)

        if selected is None:
            message = (
                f"No a³ installer package for OS: {expected_os} and Target: {target} "
                f'found! Try to locate installed "alauncher[.exe]".'
            )
            self.sink.emit(logging.INFO, message)
            return self._not_found(target, os_class, message)

        self.sink.emit(
            logging.INFO,
            f"Installer package '{selected.name}' has been selected and will be "
            f"unpacked to {workspace_root} ...",
        )

        # The archive carries its install root directory; only predict the path
        tool_path = workspace_root / tool_binary_relpath(target, os_class, build)

        try:
            self.store.extract(selected, workspace_root)
        except (OSError, FilesystemError) as e:
            message = f"Failed to unpack installer package '{selected.name}': {e}"
            self.sink.emit(logging.WARNING, message)
            return self._not_found(target, os_class, message)

        self.sink.emit(logging.INFO, f"Setting tool path to: {tool_path}")

        return ResolutionResult(
            os_class=os_class,
            outcome=ResolutionOutcome.RESOLVED,
            tool_path=tool_path,
            selected_build=build,
            target=target,
            message=f"Installed {selected.name}",
        )

    @staticmethod
    def _not_found(target: str, os_class: OSClass, message: str) -> ResolutionResult:
        return ResolutionResult(
            os_class=os_class,
            outcome=ResolutionOutcome.NOT_FOUND,
            tool_path=None,
            selected_build=NO_BUILD,
            target=target,
            message=message,
        )
