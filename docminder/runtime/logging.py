"""Centralized logging configuration for docminder.

Usage:
    from docminder.runtime import get_logger
    logger = get_logger(__name__)

    logger.debug("Detailed debug info")
    logger.info("General info")

Environment variables:
    DOCMINDER_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR). Default: INFO

OCR text can hold personal data (addresses, phone numbers), so extraction
code logs field names and counts, never document contents.
"""

import logging
import os
import sys

DEFAULT_LOG_LEVEL = logging.INFO

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

ROOT_LOGGER_NAME = "docminder"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_logging_configured = False


def parse_log_level(name: str | None, default: int = DEFAULT_LOG_LEVEL) -> int:
    """Map a level name such as "debug" to its logging constant; unknown names give default."""
    if not name:
        return default
    return _LEVELS.get(name.strip().upper(), default)


def _formatter_for(level: int) -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT)


def configure_logging(level: int | None = None) -> None:
    """Attach a stderr handler to the docminder logger namespace, once per process.

    Args:
        level: Log level to use. If None, reads DOCMINDER_LOG_LEVEL
               or uses DEFAULT_LOG_LEVEL.
    """
    global _logging_configured

    if _logging_configured:
        return

    if level is None:
        level = parse_log_level(os.environ.get("DOCMINDER_LOG_LEVEL"))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter_for(level))

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.addHandler(handler)
    package_logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    Module names already inside the docminder package are used as-is;
    anything else is nested under the docminder namespace.
    """
    configure_logging()

    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def set_log_level(level: int | str) -> None:
    """Change the log level at runtime (e.g. from a --log-level flag)."""
    if isinstance(level, str):
        level = parse_log_level(level)

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setFormatter(_formatter_for(level))
