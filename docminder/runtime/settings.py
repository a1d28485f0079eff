"""Runtime settings for docminder.

Settings come from environment variables plus an optional TOML file:

    DOCMINDER_OCR_URL   OCR service base URL (default: http://localhost:8001)
    DOCMINDER_CONFIG    Path to the TOML config file
                        (default: ~/.config/docminder/config.toml)

Example config.toml:

    [dates]
    month_first = false

    [reminders]
    notify_before_days = { high = 14, medium = 7, low = 3 }
    upcoming_window_days = 30
    overdue_grace_days = 7
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from functools import lru_cache
from pathlib import Path
from typing import Any

from docminder.runtime.logging import get_logger

logger = get_logger(__name__)

DEFAULT_OCR_URL = "http://localhost:8001"
DEFAULT_CONFIG_PATH = Path("~/.config/docminder/config.toml")
DEFAULT_NOTIFY_BEFORE_DAYS = {"high": 14, "medium": 7, "low": 3}


class ConfigError(ValueError):
    """Raised when the config file exists but holds invalid values."""


@dataclass(frozen=True)
class Settings:
    """Resolved docminder settings."""

    ocr_url: str = DEFAULT_OCR_URL
    # Opt-in: read ambiguous numeric dates as MM/DD/YYYY before DD/MM/YYYY.
    month_first: bool = False
    notify_before_days: dict[str, int] = field(default_factory=lambda: dict(DEFAULT_NOTIFY_BEFORE_DAYS))
    upcoming_window_days: int = 30
    overdue_grace_days: int = 7
    config_path: Path | None = None


def _config_path_from_env() -> Path:
    raw = os.environ.get("DOCMINDER_CONFIG")
    path = Path(raw) if raw else DEFAULT_CONFIG_PATH
    return path.expanduser()


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _expect(value: Any, kind: type, key: str) -> Any:
    # bool is an int subclass; keep them apart
    if kind is int and isinstance(value, bool):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    if not isinstance(value, kind):
        raise ConfigError(f"{key} must be {kind.__name__}, got {value!r}")
    return value


def settings_from_mapping(data: dict[str, Any], *, ocr_url: str = DEFAULT_OCR_URL) -> Settings:
    """Build Settings from a parsed config mapping, validating value types."""
    dates = _expect(data.get("dates", {}), dict, "dates")
    reminders = _expect(data.get("reminders", {}), dict, "reminders")

    month_first = _expect(dates.get("month_first", False), bool, "dates.month_first")

    notify = dict(DEFAULT_NOTIFY_BEFORE_DAYS)
    overrides = _expect(reminders.get("notify_before_days", {}), dict, "reminders.notify_before_days")
    for priority, days in overrides.items():
        if priority not in DEFAULT_NOTIFY_BEFORE_DAYS:
            raise ConfigError(f"Unknown reminder priority in notify_before_days: {priority!r}")
        if _expect(days, int, f"reminders.notify_before_days.{priority}") < 0:
            raise ConfigError(f"reminders.notify_before_days.{priority} must not be negative")
        notify[priority] = days

    window = _expect(reminders.get("upcoming_window_days", 30), int, "reminders.upcoming_window_days")
    grace = _expect(reminders.get("overdue_grace_days", 7), int, "reminders.overdue_grace_days")

    return Settings(
        ocr_url=ocr_url,
        month_first=month_first,
        notify_before_days=notify,
        upcoming_window_days=window,
        overdue_grace_days=grace,
    )


@lru_cache(maxsize=4)
def load_settings(config_path: str | None = None) -> Settings:
    """
    Load settings from the environment and the TOML config file.

    Args:
        config_path: Optional TOML path override. If None, uses DOCMINDER_CONFIG
                     or the default location.

    Returns:
        Settings; defaults are used when the config file does not exist.
    """
    path = Path(config_path).expanduser() if config_path is not None else _config_path_from_env()
    ocr_url = os.environ.get("DOCMINDER_OCR_URL", DEFAULT_OCR_URL)

    if not path.exists():
        logger.debug("Config file not found, using defaults: %s", path)
        return Settings(ocr_url=ocr_url)

    settings = settings_from_mapping(_load_toml(path), ocr_url=ocr_url)
    logger.debug("Loaded settings from %s", path)
    return replace(settings, config_path=path)


def reset_settings() -> None:
    """Clear cached settings (used by tests and after config edits)."""
    load_settings.cache_clear()
