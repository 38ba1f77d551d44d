"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from grid_iteration import settings


def test_get_settings_defaults_and_memoizes() -> None:
    """Unset variables fall back to defaults and the result is cached."""
    cfg_a = settings.get_settings(force_reload=True)
    cfg_b = settings.get_settings()
    assert cfg_a.check_zero_columns is True
    assert cfg_a.validate_shape is True
    assert cfg_a.enforce_borrows is True
    assert cfg_a is cfg_b


def test_get_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Textual booleans in the environment should be honoured."""
    monkeypatch.setenv("GRID_ITERATION_CHECK_ZERO_COLUMNS", "off")
    monkeypatch.setenv("GRID_ITERATION_VALIDATE_SHAPE", "No")
    monkeypatch.setenv("GRID_ITERATION_ENFORCE_BORROWS", " 0 ")
    cfg = settings.get_settings(force_reload=True)
    assert cfg.check_zero_columns is False
    assert cfg.validate_shape is False
    assert cfg.enforce_borrows is False


def test_unrecognised_boolean_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Values outside the known vocabulary keep the default."""
    monkeypatch.setenv("GRID_ITERATION_ENFORCE_BORROWS", "maybe")
    cfg = settings.get_settings(force_reload=True)
    assert cfg.enforce_borrows is True


def test_dotenv_override_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """A dotenv file named by GRID_ITERATION_DOTENV_PATH should be loaded."""
    monkeypatch.setenv("GRID_ITERATION_VALIDATE_SHAPE", "true")
    env_file = tmp_path / "custom.env"
    env_file.write_text("GRID_ITERATION_VALIDATE_SHAPE=false\n")
    monkeypatch.setenv("GRID_ITERATION_DOTENV_PATH", str(env_file))
    cfg = settings.get_settings(force_reload=True)
    assert cfg.validate_shape is False


def test_dotenv_in_working_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Without an override, a ``.env`` in the working directory is used."""
    monkeypatch.delenv("GRID_ITERATION_DOTENV_PATH", raising=False)
    (tmp_path / ".env").write_text("GRID_ITERATION_CHECK_ZERO_COLUMNS=no\n")
    monkeypatch.chdir(tmp_path)
    # placeholder so the value loaded from .env is removed again on teardown
    monkeypatch.setenv("GRID_ITERATION_CHECK_ZERO_COLUMNS", "")
    monkeypatch.delenv("GRID_ITERATION_CHECK_ZERO_COLUMNS")
    cfg = settings.get_settings(force_reload=True)
    assert cfg.check_zero_columns is False
