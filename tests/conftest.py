"""Shared pytest fixtures for exclctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from exclctl.domain.interval import Interval


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the user's config and EXCLCTL_* variables out of every test."""
    monkeypatch.delenv("EXCLCTL_CONFIG", raising=False)
    monkeypatch.delenv("EXCLCTL_EXCLUSIONS__MONDAY", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler changes made by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    excl = logging.getLogger("exclctl")
    excl_level = excl.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    excl.setLevel(excl_level)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no exclctl.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


@pytest.fixture
def december() -> Interval:
    """Four full weeks, Monday 2024-12-02 through Sunday 2024-12-29."""
    return Interval(datetime(2024, 12, 2), datetime(2024, 12, 30))
