"""Shared pytest fixtures for hostkit tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from hostkit.config.settings import HostSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's HOSTKIT_* variables out of every test."""
    for name in list(os.environ):
        if name.startswith("HOSTKIT_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging(), which the CLI root group calls."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    host = logging.getLogger("hostkit")
    host_level = host.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    host.setLevel(host_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> HostSettings:
    """Settings on code defaults (no hostkit.toml above tmp_path)."""
    return HostSettings.from_cli(start=tmp_path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory so relative paths and config discovery are isolated.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)
