"""Library configuration loading."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

_DEFAULT_CHECK_ZERO_COLUMNS: Final[bool] = True
_DEFAULT_VALIDATE_SHAPE: Final[bool] = True
_DEFAULT_ENFORCE_BORROWS: Final[bool] = True

_CACHED_SETTINGS: Settings | None = None


@dataclass(frozen=True)
class Settings:
    """Runtime configuration derived from environment variables."""

    check_zero_columns: bool
    validate_shape: bool
    enforce_borrows: bool


_TRUE_VALUES: Final[set[str]] = {"1", "true", "yes", "on"}
_FALSE_VALUES: Final[set[str]] = {"0", "false", "no", "off"}


def _coerce_bool(value: str | None, *, default: bool) -> bool:
    """Convert common textual boolean representations to bool."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def get_settings(*, force_reload: bool = False) -> Settings:
    """Load configuration, optionally reloading from the environment."""
    global _CACHED_SETTINGS  # noqa: PLW0603
    if not force_reload and _CACHED_SETTINGS is not None:
        return _CACHED_SETTINGS

    dotenv_override = os.getenv("GRID_ITERATION_DOTENV_PATH")
    if dotenv_override:
        load_dotenv(dotenv_override, override=True)
    else:
        dotenv_path = Path.cwd() / ".env"
        if dotenv_path.exists():
            load_dotenv(dotenv_path=dotenv_path)

    _CACHED_SETTINGS = Settings(
        check_zero_columns=_coerce_bool(
            os.getenv("GRID_ITERATION_CHECK_ZERO_COLUMNS"),
            default=_DEFAULT_CHECK_ZERO_COLUMNS,
        ),
        validate_shape=_coerce_bool(
            os.getenv("GRID_ITERATION_VALIDATE_SHAPE"),
            default=_DEFAULT_VALIDATE_SHAPE,
        ),
        enforce_borrows=_coerce_bool(
            os.getenv("GRID_ITERATION_ENFORCE_BORROWS"),
            default=_DEFAULT_ENFORCE_BORROWS,
        ),
    )
    return _CACHED_SETTINGS
