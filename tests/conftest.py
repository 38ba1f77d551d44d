"""Shared pytest fixtures and configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from grid_iteration import settings
from grid_iteration.grid import Grid

_SETTINGS_ENV = (
    "GRID_ITERATION_CHECK_ZERO_COLUMNS",
    "GRID_ITERATION_VALIDATE_SHAPE",
    "GRID_ITERATION_ENFORCE_BORROWS",
)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Run every test against default settings, unaffected by the host env."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    blank_env = tmp_path / "blank.env"
    blank_env.write_text("")
    monkeypatch.setenv("GRID_ITERATION_DOTENV_PATH", str(blank_env))
    settings.get_settings(force_reload=True)
    yield
    monkeypatch.undo()
    settings.get_settings(force_reload=True)


@pytest.fixture
def sample_grid() -> Grid[int]:
    """A 3x3 grid holding 1..9 in row-major order."""
    return Grid([1, 2, 3, 4, 5, 6, 7, 8, 9], rows=3, cols=3)
