"""Date normalization for raw date strings found in documents."""

import re
from datetime import date, datetime

from dateutil import parser as date_parser

NUMERIC_DATE_PATTERN = re.compile(r"^(\d{1,2})[./\-](\d{1,2})[./\-](\d{4})$")


def _from_iso(value: str) -> date | None:
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def _from_numeric(value: str, *, month_first: bool) -> date | None:
    match = NUMERIC_DATE_PATTERN.match(value)
    if not match:
        return None
    first, second, year = (int(group) for group in match.groups())
    month, day = (first, second) if month_first else (second, first)
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _from_lenient(value: str) -> date | None:
    try:
        return date_parser.parse(value).date()
    except (ValueError, OverflowError):
        return None


def parse_date(value: str | None, *, month_first: bool = False) -> str | None:
    """
    Normalize a raw date string to YYYY-MM-DD.

    Attempts, in order: ISO, DD.MM.YYYY, MM.DD.YYYY, lenient parse. The two
    numeric attempts share one pattern, so "03/04/2025" is always read as
    3 April unless the day-first reading is invalid. Pass month_first=True to
    try MM.DD.YYYY first instead.

    Returns None when nothing parses.
    """
    if not value or not value.strip():
        return None
    value = value.strip()

    parsed = _from_iso(value)
    if parsed is None:
        parsed = _from_numeric(value, month_first=month_first)
    if parsed is None:
        parsed = _from_numeric(value, month_first=not month_first)
    if parsed is None:
        parsed = _from_lenient(value)
    return parsed.isoformat() if parsed is not None else None
