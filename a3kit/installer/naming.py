"""
a³ installer archive naming convention.

Installer packages produced by the a³ packaging tool are named

    a3_<target>_<osTag>_b<buildNumber>_<releaseSuffix>

e.g. ``a3_arm_win64_b277911_release.zip``. This module parses such names and
predicts where the tool binary lands once an archive has been unpacked.
"""

import re
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Optional

from a3kit.core.platform import OSClass

TOOL_PREFIX = "a3"
NAME_DELIMITER = "_"

_BUILD_FIELD = re.compile(r"b([0-9]+)")


@dataclass(frozen=True)
class CandidateName:
    """Parsed view of an installer archive name."""

    prefix: str
    target: str
    os_tag: str
    build: int
    release_suffix: str


def parse_candidate_name(entry_name: str, target: str) -> Optional[CandidateName]:
    """
    Parse an installer archive name for the given target.

    Non-conforming names are rejected by returning None, never by raising.

    Args:
        entry_name: File name of a directory entry
        target: Analysis target the name must belong to (e.g. 'arm')

    Returns:
        CandidateName, or None if the name does not follow the convention

    Example:
        >>> parse_candidate_name("a3_arm_win64_b277911_release.zip", "arm")
        CandidateName(prefix='a3', target='arm', os_tag='win64', build=277911, release_suffix='release.zip')
        >>> parse_candidate_name("a3_ppc_win64_b1_release.zip", "arm") is None
        True
    """
    if not entry_name.startswith(TOOL_PREFIX + NAME_DELIMITER + target + NAME_DELIMITER):
        return None

    # a3_arm_win64_b277911_release.zip -> [a3, arm, win64, b277911, release.zip]
    segments = entry_name.split(NAME_DELIMITER)
    if len(segments) < 5:
        return None

    match = _BUILD_FIELD.fullmatch(segments[3])
    if not match:
        return None

    return CandidateName(
        prefix=segments[0],
        target=segments[1],
        os_tag=segments[2],
        build=int(match.group(1)),
        release_suffix=segments[4],
    )


def install_root_name(target: str, os_class: OSClass, build: int) -> str:
    """
    Name of the directory an installer archive unpacks to.

    Example:
        >>> install_root_name("tricore", OSClass.MACOS, 42)
        'a3_tricore_macos64_b42_release.app'
    """
    root = f"{TOOL_PREFIX}_{target}_{os_class.archive_tag}_b{build}_release"
    if os_class is OSClass.MACOS:
        root += ".app"
    return root


def tool_binary_name(target: str, os_class: OSClass) -> str:
    """File name of the a³ binary for a target, e.g. 'a3arm.exe'."""
    return f"{TOOL_PREFIX}{target}{os_class.executable_suffix}"


def tool_binary_relpath(target: str, os_class: OSClass, build: int) -> PurePosixPath:
    """
    Path of the a³ binary relative to the extraction directory.

    Example:
        >>> str(tool_binary_relpath("arm", OSClass.WINDOWS, 277911))
        'a3_arm_win64_b277911_release/bin/a3arm.exe'
    """
    root = PurePosixPath(install_root_name(target, os_class, build))
    if os_class is OSClass.MACOS:
        bin_dir = root / "Contents" / "MacOS"
    else:
        bin_dir = root / "bin"
    return bin_dir / tool_binary_name(target, os_class)
