"""Shared pytest fixtures for minmax tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from minmax.config.settings import MinmaxSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's MINMAX_* environment out of every test."""
    for name in (
        "MINMAX_CONFIG",
        "MINMAX_JSON_OUTPUT",
        "MINMAX_QUIET",
        "MINMAX_VERBOSE",
        "MINMAX_LOG_JSON",
        "MINMAX_OPERANDS__ALLOW_STRINGS",
        "MINMAX_CLAMP__WARN_INVERTED_BOUNDS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("minmax")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change CWD to an empty temp directory so no stray minmax.toml is found."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(isolated_dir: Path) -> MinmaxSettings:
    """Default settings with no TOML file in reach."""
    return MinmaxSettings.from_cli(start=isolated_dir)
