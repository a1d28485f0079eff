"""Runtime infrastructure for docminder.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Settings from environment and TOML via load_settings()

The OCR client (runtime.ocr_pipeline) and HTTP server (runtime.server)
are imported directly so their third-party dependencies stay optional
for pure extraction use.

Usage:
    from docminder.runtime import get_logger, load_settings

    logger = get_logger(__name__)
    settings = load_settings()
"""

from docminder.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    parse_log_level,
    set_log_level,
)
from docminder.runtime.settings import (
    ConfigError,
    Settings,
    load_settings,
    reset_settings,
)

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "parse_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Settings
    "ConfigError",
    "Settings",
    "load_settings",
    "reset_settings",
]
