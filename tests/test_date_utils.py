from docminder.extraction import parse_date


def test_iso_dates_pass_through() -> None:
    assert parse_date("2025-09-01") == "2025-09-01"


def test_numeric_dates_are_day_first() -> None:
    assert parse_date("03/04/2025") == "2025-04-03"
    assert parse_date("15.03.2024") == "2024-03-15"
    assert parse_date("31.12.2025") == "2025-12-31"
    assert parse_date("1-6-2025") == "2025-06-01"


def test_month_first_opt_in() -> None:
    assert parse_date("03/04/2025", month_first=True) == "2025-03-04"


def test_falls_back_to_month_first_when_day_first_is_invalid() -> None:
    assert parse_date("12/31/2025") == "2025-12-31"


def test_lenient_formats() -> None:
    assert parse_date("March 15, 2026") == "2026-03-15"
    assert parse_date("1 June 2025") == "2025-06-01"
    assert parse_date("2025/03/01") == "2025-03-01"


def test_unparseable_values() -> None:
    assert parse_date("not-a-date") is None
    assert parse_date("") is None
    assert parse_date("   ") is None
    assert parse_date(None) is None
