"""Tests for the platform directory probes."""

import os
import stat
from pathlib import Path
from types import SimpleNamespace

import pytest

from hostkit.infrastructure import probe as probe_mod
from hostkit.infrastructure.probe import (
    FILE_ATTRIBUTE_REPARSE_POINT,
    PosixDirectoryProbe,
    WindowsDirectoryProbe,
    default_probe,
)


def _fake_lstat(monkeypatch: pytest.MonkeyPatch, mode: int, attributes: int = 0) -> None:
    result = SimpleNamespace(st_mode=mode, st_file_attributes=attributes)
    monkeypatch.setattr(probe_mod.os, "lstat", lambda _path: result)


class TestPosixDirectoryProbe:
    def test_directory(self, tmp_path: Path) -> None:
        assert PosixDirectoryProbe().is_real_directory(str(tmp_path))

    def test_missing(self, tmp_path: Path) -> None:
        assert not PosixDirectoryProbe().is_real_directory(str(tmp_path / "gone"))

    def test_symlink_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _fake_lstat(monkeypatch, stat.S_IFLNK | 0o777)
        assert not PosixDirectoryProbe().is_real_directory("link")


class TestWindowsDirectoryProbe:
    def test_plain_directory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _fake_lstat(monkeypatch, stat.S_IFDIR | 0o755)
        assert WindowsDirectoryProbe().is_real_directory(r"C:\Users")

    def test_junction_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Junctions look like directories to lstat but carry a reparse point."""
        _fake_lstat(monkeypatch, stat.S_IFDIR | 0o755, FILE_ATTRIBUTE_REPARSE_POINT)
        assert not WindowsDirectoryProbe().is_real_directory(r"C:\Users\Default User")

    def test_file_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _fake_lstat(monkeypatch, stat.S_IFREG | 0o644)
        assert not WindowsDirectoryProbe().is_real_directory(r"C:\pagefile.sys")

    def test_stat_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def boom(_path: str) -> None:
            raise PermissionError("denied")

        monkeypatch.setattr(probe_mod.os, "lstat", boom)
        assert not WindowsDirectoryProbe().is_real_directory(r"C:\System Volume Information")

    def test_attribute_value_matches_stdlib(self) -> None:
        expected = getattr(stat, "FILE_ATTRIBUTE_REPARSE_POINT", FILE_ATTRIBUTE_REPARSE_POINT)
        assert expected == FILE_ATTRIBUTE_REPARSE_POINT


class TestDefaultProbe:
    def test_selects_windows(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(probe_mod.os, "name", "nt")
        assert isinstance(default_probe(), WindowsDirectoryProbe)

    def test_selects_posix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(probe_mod.os, "name", "posix")
        assert isinstance(default_probe(), PosixDirectoryProbe)

    def test_platform_probe_matches_host(self) -> None:
        expected = WindowsDirectoryProbe if os.name == "nt" else PosixDirectoryProbe
        assert isinstance(probe_mod.PLATFORM_PROBE, expected)
