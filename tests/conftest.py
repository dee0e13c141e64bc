"""
Pytest configuration and shared fixtures for a3kit tests.
"""

import stat
import tempfile
import zipfile
from pathlib import Path
from typing import Generator, List, Tuple

import pytest

from a3kit.core.interfaces import LogSink


class RecordingSink(LogSink):
    """Log sink that keeps every emitted line."""

    def __init__(self):
        self.lines: List[Tuple[int, str]] = []

    def emit(self, level: int, message: str) -> None:
        self.lines.append((level, message))

    def messages(self, level: int = None) -> List[str]:
        return [m for lvl, m in self.lines if level is None or lvl == level]


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def workspace(temp_dir: Path) -> Path:
    """Empty build workspace."""
    ws = temp_dir / "workspace"
    ws.mkdir()
    return ws


@pytest.fixture
def package_dir(temp_dir: Path) -> Path:
    """Empty shared installer package directory."""
    packages = temp_dir / "packages"
    packages.mkdir()
    return packages


@pytest.fixture
def sink() -> RecordingSink:
    """Log sink recording all lines."""
    return RecordingSink()


def write_installer_zip(package_dir: Path, archive_name: str, binary_relpath: str) -> Path:
    """
    Create an installer archive containing one executable.

    Args:
        package_dir: Directory to create the archive in
        archive_name: File name of the archive
        binary_relpath: Path of the binary inside the archive

    Returns:
        Path to the created archive
    """
    archive = package_dir / archive_name
    with zipfile.ZipFile(archive, "w") as zf:
        info = zipfile.ZipInfo(binary_relpath)
        info.external_attr = (stat.S_IFREG | 0o755) << 16
        zf.writestr(info, "#!/bin/sh\necho a3\n")
    return archive


@pytest.fixture
def make_installer():
    """Factory fixture for installer archives."""
    return write_installer_zip
