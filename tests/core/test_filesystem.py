"""
Unit tests for filesystem utilities.

Tests cover:
- Non-recursive directory listing
- ZIP extraction, permission restoring and traversal protection
- LocalPackageStore
"""

import os
import stat
import sys
import zipfile
import pytest
from pathlib import Path

from a3kit.core.filesystem import (
    ArchiveExtractionError,
    UnsupportedArchiveFormat,
    InsecureArchiveError,
    list_directory,
    extract_archive,
    LocalPackageStore,
)
from a3kit.core.interfaces import PackageEntry


class TestListDirectory:
    """Tests for list_directory()."""

    def test_lists_files_and_directories(self, temp_dir):
        (temp_dir / "a.zip").write_text("x")
        (temp_dir / "sub").mkdir()
        (temp_dir / "sub" / "nested.zip").write_text("x")

        entries = {e.name: e for e in list_directory(temp_dir)}

        assert set(entries) == {"a.zip", "sub"}
        assert entries["a.zip"].is_directory is False
        assert entries["sub"].is_directory is True
        assert entries["a.zip"].path == temp_dir / "a.zip"

    def test_empty_directory(self, temp_dir):
        assert list_directory(temp_dir) == []

    def test_missing_directory_raises(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            list_directory(temp_dir / "missing")


class TestExtractArchive:
    """Tests for extract_archive()."""

    def test_extracts_zip(self, temp_dir, make_installer):
        archive = make_installer(temp_dir, "pkg.zip", "root/bin/tool")
        dest = temp_dir / "out"

        extract_archive(archive, dest)

        assert (dest / "root" / "bin" / "tool").is_file()

    @pytest.mark.skipif(sys.platform == "win32", reason="Unix permissions")
    def test_restores_executable_bit(self, temp_dir, make_installer):
        archive = make_installer(temp_dir, "pkg.zip", "root/bin/tool")
        dest = temp_dir / "out"

        extract_archive(archive, dest)

        mode = os.stat(dest / "root" / "bin" / "tool").st_mode
        assert mode & stat.S_IXUSR

    def test_progress_callback(self, temp_dir, make_installer):
        archive = make_installer(temp_dir, "pkg.zip", "root/bin/tool")
        calls = []

        extract_archive(archive, temp_dir / "out", lambda c, t: calls.append((c, t)))

        assert calls == [(1, 1)]

    def test_rejects_non_zip(self, temp_dir):
        archive = temp_dir / "pkg.tar.gz"
        archive.write_bytes(b"")

        with pytest.raises(UnsupportedArchiveFormat):
            extract_archive(archive, temp_dir / "out")

    def test_missing_archive(self, temp_dir):
        with pytest.raises(ArchiveExtractionError, match="not found"):
            extract_archive(temp_dir / "missing.zip", temp_dir / "out")

    def test_corrupt_archive(self, temp_dir):
        archive = temp_dir / "broken.zip"
        archive.write_bytes(b"not a zip file")

        with pytest.raises(ArchiveExtractionError, match="Failed to extract"):
            extract_archive(archive, temp_dir / "out")

    def test_blocks_directory_traversal(self, temp_dir):
        archive = temp_dir / "evil.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            zf.writestr("../escaped.txt", "x")

        with pytest.raises(InsecureArchiveError):
            extract_archive(archive, temp_dir / "out")

        assert not (temp_dir / "escaped.txt").exists()

    @pytest.mark.skipif(sys.platform == "win32", reason="Unix permissions")
    def test_reextract_over_read_only_file(self, temp_dir):
        archive = temp_dir / "pkg.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            info = zipfile.ZipInfo("root/bin/tool")
            info.external_attr = (stat.S_IFREG | 0o555) << 16
            zf.writestr(info, "#!/bin/sh\necho a3\n")
        dest = temp_dir / "out"

        extract_archive(archive, dest)
        extract_archive(archive, dest)

        tool = dest / "root" / "bin" / "tool"
        assert stat.S_IMODE(os.stat(tool).st_mode) == 0o555
        assert tool.read_text() == "#!/bin/sh\necho a3\n"


class TestLocalPackageStore:
    """Tests for LocalPackageStore."""

    def test_list_and_extract(self, temp_dir, make_installer):
        packages = temp_dir / "packages"
        packages.mkdir()
        make_installer(packages, "pkg.zip", "root/tool")
        store = LocalPackageStore()

        entries = store.list_entries(packages)
        store.extract(entries[0], temp_dir / "ws")

        assert entries == [PackageEntry("pkg.zip", packages / "pkg.zip", False)]
        assert (temp_dir / "ws" / "root" / "tool").exists()

    def test_is_directory(self, temp_dir):
        (temp_dir / "file").write_text("x")
        store = LocalPackageStore()

        assert store.is_directory(temp_dir)
        assert not store.is_directory(temp_dir / "file")
        assert not store.is_directory(temp_dir / "missing")

    def test_extract_accepts_path_objects(self, temp_dir, make_installer):
        archive = make_installer(temp_dir, "pkg.zip", "x/y")
        entry = PackageEntry(archive.name, Path(archive))

        LocalPackageStore().extract(entry, temp_dir / "dest")

        assert (temp_dir / "dest" / "x" / "y").exists()
