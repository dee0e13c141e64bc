"""
a³ tool resolution.

This package locates the a³ analyzer binary for a build, either by
unpacking the newest matching installer package from a shared directory
or by pointing at a pre-installed launcher.
"""

from .naming import (
    CandidateName,
    parse_candidate_name,
    install_root_name,
    tool_binary_name,
    tool_binary_relpath,
)

from .selector import (
    NO_BUILD,
    list_candidates,
    select_best,
)

from .result import (
    ResolutionOutcome,
    ResolutionResult,
)

from .archive import ArchiveInstaller

from .launcher import (
    LauncherResolver,
    launcher_binary_name,
)

from .tool_installer import (
    A3ToolInstaller,
    ArchiveMode,
    LauncherMode,
    resolve_tool,
)

__all__ = [
    "CandidateName",
    "parse_candidate_name",
    "install_root_name",
    "tool_binary_name",
    "tool_binary_relpath",
    "NO_BUILD",
    "list_candidates",
    "select_best",
    "ResolutionOutcome",
    "ResolutionResult",
    "ArchiveInstaller",
    "LauncherResolver",
    "launcher_binary_name",
    "A3ToolInstaller",
    "ArchiveMode",
    "LauncherMode",
    "resolve_tool",
]
