"""
Tests for archive-mode resolution.

Uses real zip packages in a temporary directory, plus a stub store for
failure injection.
"""

import logging
from pathlib import Path
from unittest.mock import Mock

import pytest

from a3kit.core.filesystem import ArchiveExtractionError
from a3kit.core.interfaces import PackageEntry, PackageStore
from a3kit.core.platform import OSClass
from a3kit.installer.archive import ArchiveInstaller
from a3kit.installer.result import ResolutionOutcome


class TestArchiveInstaller:
    """Tests for ArchiveInstaller.resolve()."""

    def test_selects_and_unpacks_newest_windows_package(
        self, workspace, package_dir, make_installer, sink
    ):
        make_installer(
            package_dir, "a3_arm_win64_b100_release.zip", "a3_arm_win64_b100_release/bin/a3arm.exe"
        )
        make_installer(
            package_dir,
            "a3_arm_win64_b277911_release.zip",
            "a3_arm_win64_b277911_release/bin/a3arm.exe",
        )
        make_installer(
            package_dir, "a3_arm_linux64_b999_release.zip", "a3_arm_linux64_b999_release/bin/a3arm"
        )

        result = ArchiveInstaller(sink=sink).resolve(
            workspace, package_dir, "arm", OSClass.WINDOWS
        )

        assert result.outcome is ResolutionOutcome.RESOLVED
        assert result.selected_build == 277911
        assert result.target == "arm"
        assert result.os_class is OSClass.WINDOWS
        assert result.tool_path == (
            workspace / "a3_arm_win64_b277911_release" / "bin" / "a3arm.exe"
        )
        assert result.tool_path.is_file()
        # Only the selected package is unpacked
        assert not (workspace / "a3_arm_win64_b100_release").exists()

    def test_macos_app_bundle_layout(self, workspace, package_dir, make_installer, sink):
        make_installer(
            package_dir,
            "a3_tricore_macos64_b42_release.zip",
            "a3_tricore_macos64_b42_release.app/Contents/MacOS/a3tricore",
        )

        result = ArchiveInstaller(sink=sink).resolve(
            workspace, package_dir, "tricore", OSClass.MACOS
        )

        assert result.ok
        assert result.tool_path.as_posix().endswith(
            "a3_tricore_macos64_b42_release.app/Contents/MacOS/a3tricore"
        )
        assert result.tool_path.exists()

    def test_unix_layout(self, workspace, package_dir, make_installer, sink):
        make_installer(
            package_dir, "a3_ppc_linux64_b7_release.zip", "a3_ppc_linux64_b7_release/bin/a3ppc"
        )

        result = ArchiveInstaller(sink=sink).resolve(
            workspace, package_dir, "ppc", OSClass.UNIX
        )

        assert result.tool_path == workspace / "a3_ppc_linux64_b7_release" / "bin" / "a3ppc"

    def test_empty_directory(self, workspace, package_dir, sink):
        result = ArchiveInstaller(sink=sink).resolve(
            workspace, package_dir, "arm", OSClass.UNIX
        )

        assert result.outcome is ResolutionOutcome.NOT_FOUND
        assert result.tool_path is None
        assert result.selected_build == -1
        assert any("alauncher" in m for m in sink.messages(logging.INFO))

    def test_missing_directory_degrades_to_not_found(self, workspace, temp_dir, sink):
        result = ArchiveInstaller(sink=sink).resolve(
            workspace, temp_dir / "does-not-exist", "arm", OSClass.UNIX
        )

        assert result.outcome is ResolutionOutcome.NOT_FOUND
        assert result.tool_path is None
        assert result.selected_build == -1
        assert sink.messages(logging.WARNING)

    def test_corrupt_archive_degrades_to_not_found(self, workspace, package_dir, sink):
        (package_dir / "a3_arm_linux64_b5_release.zip").write_bytes(b"garbage")

        result = ArchiveInstaller(sink=sink).resolve(
            workspace, package_dir, "arm", OSClass.UNIX
        )

        assert result.outcome is ResolutionOutcome.NOT_FOUND
        assert result.tool_path is None
        assert result.selected_build == -1

    def test_relative_package_dir_is_workspace_relative(
        self, workspace, make_installer, sink
    ):
        packages = workspace / "pkgs"
        packages.mkdir()
        make_installer(packages, "a3_arm_linux64_b3_release.zip", "a3_arm_linux64_b3_release/bin/a3arm")

        result = ArchiveInstaller(sink=sink).resolve(workspace, "pkgs", "arm", OSClass.UNIX)

        assert result.selected_build == 3

    def test_idempotent(self, workspace, package_dir, make_installer, sink):
        make_installer(
            package_dir, "a3_arm_linux64_b8_release.zip", "a3_arm_linux64_b8_release/bin/a3arm"
        )
        installer = ArchiveInstaller(sink=sink)

        first = installer.resolve(workspace, package_dir, "arm", OSClass.UNIX)
        second = installer.resolve(workspace, package_dir, "arm", OSClass.UNIX)

        assert first == second

    def test_logs_progress(self, workspace, package_dir, make_installer, sink):
        make_installer(
            package_dir, "a3_arm_linux64_b8_release.zip", "a3_arm_linux64_b8_release/bin/a3arm"
        )

        ArchiveInstaller(sink=sink).resolve(workspace, package_dir, "arm", OSClass.UNIX)

        messages = sink.messages(logging.INFO)
        assert any("Scanning" in m for m in messages)
        assert any("a3_arm_linux64_b8_release.zip" in m for m in messages)
        assert any("Setting tool path to" in m for m in messages)


class TestArchiveInstallerWithStore:
    """Tests using a stub PackageStore."""

    def _store(self, entries):
        store = Mock(spec=PackageStore)
        store.list_entries.return_value = entries
        return store

    def test_extracts_selected_entry_into_workspace(self, sink):
        entries = [
            PackageEntry("a3_arm_win64_b1_release.zip", Path("/p/a3_arm_win64_b1_release.zip")),
            PackageEntry("a3_arm_win64_b2_release.zip", Path("/p/a3_arm_win64_b2_release.zip")),
        ]
        store = self._store(entries)

        result = ArchiveInstaller(store, sink).resolve(
            Path("/ws"), Path("/p"), "arm", OSClass.WINDOWS
        )

        store.list_entries.assert_called_once_with(Path("/p"))
        store.extract.assert_called_once_with(entries[1], Path("/ws"))
        assert result.selected_build == 2

    def test_no_extraction_without_candidate(self, sink):
        store = self._store([PackageEntry("notes.txt", Path("/p/notes.txt"))])

        ArchiveInstaller(store, sink).resolve(Path("/ws"), Path("/p"), "arm", OSClass.UNIX)

        store.extract.assert_not_called()

    @pytest.mark.parametrize(
        "error", [PermissionError("denied"), InterruptedError("interrupted")]
    )
    def test_listing_failure_swallowed(self, sink, error):
        store = Mock(spec=PackageStore)
        store.list_entries.side_effect = error

        result = ArchiveInstaller(store, sink).resolve(
            Path("/ws"), Path("/p"), "arm", OSClass.UNIX
        )

        assert result.outcome is ResolutionOutcome.NOT_FOUND
        assert result.selected_build == -1

    def test_extraction_failure_swallowed(self, sink):
        store = self._store(
            [PackageEntry("a3_arm_linux64_b9_release.zip", Path("/p/a3_arm_linux64_b9_release.zip"))]
        )
        store.extract.side_effect = ArchiveExtractionError("disk full")

        result = ArchiveInstaller(store, sink).resolve(
            Path("/ws"), Path("/p"), "arm", OSClass.UNIX
        )

        assert result.outcome is ResolutionOutcome.NOT_FOUND
        assert result.tool_path is None
        assert result.selected_build == -1
        assert any("disk full" in m for m in sink.messages(logging.WARNING))
