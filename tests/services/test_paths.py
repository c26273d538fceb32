"""Tests for PathService."""

import os
import stat
from pathlib import Path

import pytest

from hostkit.config.settings import HostSettings
from hostkit.services.paths import PathService


class TestDirectoryExists:
    def test_directory(self, settings: HostSettings, tmp_path: Path) -> None:
        result = PathService(settings).directory_exists(str(tmp_path))
        assert result.ok
        assert result.data == {"directory": True, "path": str(tmp_path)}

    def test_missing_is_still_ok(self, settings: HostSettings, tmp_path: Path) -> None:
        result = PathService(settings).directory_exists(str(tmp_path / "nope"))
        assert result.ok
        assert result.data["directory"] is False


class TestMkdirs:
    def test_success(self, settings: HostSettings, tmp_path: Path) -> None:
        result = PathService(settings).mkdirs(str(tmp_path / "a" / "file"))
        assert result.ok
        assert (tmp_path / "a").is_dir()

    def test_failure(self, settings: HostSettings, tmp_path: Path) -> None:
        (tmp_path / "file").write_text("x")
        result = PathService(settings).mkdirs(str(tmp_path / "file" / "x" / "y"))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MKDIRS_FAILED"

    @pytest.mark.skipif(os.name != "posix", reason="POSIX permissions")
    def test_configured_dir_mode(self, tmp_path: Path) -> None:
        (tmp_path / "hostkit.toml").write_text("[files]\ndir_mode = 0o700\n")
        settings = HostSettings.from_cli(start=tmp_path)
        assert PathService(settings).mkdirs(str(tmp_path / "private" / "f")).ok
        assert stat.S_IMODE((tmp_path / "private").stat().st_mode) == 0o700


class TestBasename:
    def test_basename(self, settings: HostSettings) -> None:
        result = PathService(settings).basename("/system/bin/sh")
        assert result.data == {"name": "sh"}


class TestPrepareFile:
    def test_creates(self, settings: HostSettings, tmp_path: Path) -> None:
        target = tmp_path / "pulled" / "data.bin"
        result = PathService(settings).prepare_file(str(target))
        assert result.ok
        assert result.op == "touch"
        assert target.is_file()

    def test_failure(self, settings: HostSettings, tmp_path: Path) -> None:
        (tmp_path / "file").write_text("x")
        result = PathService(settings).prepare_file(str(tmp_path / "file" / "child"))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "CREATE_FAILED"
