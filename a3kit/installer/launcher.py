"""
Launcher mode: use a centrally installed a³ launcher ("alauncher").

The launcher picks the correct analyzer for a project itself, so this mode
only has to turn the configured path into the path of the launcher binary
for the agent's OS. Nothing is unpacked and no build number is reported.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from a3kit.core.filesystem import FilesystemError, LocalPackageStore
from a3kit.core.interfaces import LoggingSink, LogSink, PackageStore
from a3kit.core.platform import OSClass
from a3kit.installer.result import ResolutionOutcome, ResolutionResult

logger = logging.getLogger(__name__)

LAUNCHER_NAME = "alauncher"


def launcher_binary_name(os_class: OSClass) -> str:
    """File name of the launcher binary, e.g. 'alauncher.exe' on Windows."""
    return LAUNCHER_NAME + os_class.executable_suffix


def _parent_dir(path: Path) -> Optional[Path]:
    """Parent directory of a path, or None for roots and bare file names."""
    if not path.name or len(path.parts) < 2:
        return None
    return path.parent


class LauncherResolver:
    """
    Resolves the path of a pre-installed a³ launcher binary.

    The configured path may be the launcher's directory or any file inside
    it; in the latter case the file name is replaced by the launcher name
    for the OS.
    """

    def __init__(
        self,
        store: Optional[PackageStore] = None,
        sink: Optional[LogSink] = None,
    ):
        self.store = store or LocalPackageStore()
        self.sink = sink or LoggingSink(logger)

    def resolve(
        self,
        workspace_root: Union[str, Path],
        launcher_path: Union[str, Path],
        os_class: OSClass,
    ) -> ResolutionResult:
        """
        Compute the launcher binary path.

        Args:
            workspace_root: Workspace of the build; relative launcher paths
                are taken relative to it
            launcher_path: Launcher directory, or a file inside it
            os_class: OS class of the build agent

        Returns:
            ResolutionResult with outcome RESOLVED, UNSUPPORTED_MODE or
            MALFORMED_PATH
        """
        if os_class is OSClass.MACOS:
            message = (
                "a³ installation mode not supported on MacOS. "
                "Use the portable archive mode instead."
            )
            self.sink.emit(logging.ERROR, message)
            return ResolutionResult(
                os_class=os_class,
                outcome=ResolutionOutcome.UNSUPPORTED_MODE,
                message=message,
            )

        binary = launcher_binary_name(os_class)
        configured = str(launcher_path)
        path = Path(workspace_root) / configured

        # An empty path would otherwise designate the workspace itself
        if configured and self._is_directory(path):
            tool_path = path / binary
        else:
            # A file (or nothing) was given: keep its directory, use our binary name
            parent = _parent_dir(Path(configured))
            if parent is None:
                message = f"Launcher path has no parent directory: '{configured}'"
                self.sink.emit(logging.ERROR, message)
                return ResolutionResult(
                    os_class=os_class,
                    outcome=ResolutionOutcome.MALFORMED_PATH,
                    message=message,
                )
            tool_path = Path(workspace_root) / parent / binary

        self.sink.emit(logging.INFO, f"Setting tool path to: {tool_path}")

        return ResolutionResult(
            os_class=os_class,
            outcome=ResolutionOutcome.RESOLVED,
            tool_path=tool_path,
            message=f"Using launcher {tool_path}",
        )

    def _is_directory(self, path: Path) -> bool:
        """Directory check that reports store failures as "not a directory"."""
        try:
            return self.store.is_directory(path)
        except (OSError, FilesystemError) as e:
            self.sink.emit(logging.WARNING, f"Cannot inspect launcher path {path}: {e}")
            return False
