"""Shared helpers for document entity extraction."""

from typing import Any


class InvalidInputError(TypeError):
    """Raised when extraction is handed something other than OCR text."""


def _require_text(text: Any) -> str:
    """Fail fast on non-string input; strings (including empty) pass through."""
    if not isinstance(text, str):
        raise InvalidInputError(f"Expected OCR text as str, got {type(text).__name__}")
    return text


def _non_empty_lines(text: str) -> list[str]:
    """Return stripped lines, dropping blank ones."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def _dedupe(values: list[str]) -> list[str]:
    """De-duplicate while keeping first-seen order."""
    return list(dict.fromkeys(values))
