"""
Installer package selection.

Picks the installer archive with the highest build number among the
entries of a package directory that match a target and OS.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from a3kit.core.interfaces import PackageEntry
from a3kit.installer.naming import CandidateName, parse_candidate_name

logger = logging.getLogger(__name__)

NO_BUILD = -1


def list_candidates(
    entries: Iterable[PackageEntry],
    target: str,
    expected_os_tag: str,
    expected_suffix: str,
) -> List[Tuple[PackageEntry, CandidateName]]:
    """
    Filter directory entries down to conforming installer archives.

    Directories and names that do not follow the naming convention, belong
    to another target or OS, or carry the wrong suffix are skipped.

    Args:
        entries: Directory entries in listing order
        target: Analysis target (e.g. 'arm')
        expected_os_tag: Archive OS tag (e.g. 'win64')
        expected_suffix: Required ending of the release suffix (e.g. '.zip')

    Returns:
        (entry, parsed name) pairs, in the order the entries were given
    """
    candidates = []
    for entry in entries:
        if entry.is_directory:
            continue
        name = parse_candidate_name(entry.name, target)
        if name is None:
            continue
        if name.os_tag != expected_os_tag:
            continue
        if not name.release_suffix.endswith(expected_suffix):
            continue
        candidates.append((entry, name))
    return candidates


def select_best(
    entries: Iterable[PackageEntry],
    target: str,
    expected_os_tag: str,
    expected_suffix: str,
) -> Tuple[Optional[PackageEntry], int]:
    """
    Select the installer archive with the highest build number.

    A candidate only replaces the current best if its build number is
    strictly greater, so among entries sharing the highest build number
    the first one in listing order wins.

    Returns:
        (entry, build), or (None, -1) if no entry matches

    Example:
        >>> entry, build = select_best(entries, "arm", "win64", ".zip")
        >>> build
        277911
    """
    best_entry = None
    best_build = NO_BUILD

    for entry, name in list_candidates(
        entries, target, expected_os_tag, expected_suffix
    ):
        if name.build > best_build:
            best_build = name.build
            best_entry = entry
        else:
            logger.debug(f"Skipping {entry.name}: build {name.build} <= {best_build}")

    return best_entry, best_build
