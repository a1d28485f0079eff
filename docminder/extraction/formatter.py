"""Format DocumentExtraction results for JSON output and terminal display."""

from dataclasses import asdict
from decimal import Decimal
from typing import Any

from docminder.domain.document import DocumentExtraction
from docminder.domain.reminder import ReminderDraft


def _json_ready(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, dict):
        return {key: _json_ready(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_json_ready(item) for item in value]
    return value


def extraction_to_dict(extraction: DocumentExtraction, include_raw_text: bool = True) -> dict[str, Any]:
    """Convert an extraction into plain JSON-serializable data (Decimals become floats)."""
    data = _json_ready(asdict(extraction))
    if not include_raw_text:
        data.pop("raw_text", None)
    return data


def _format_rows(rows: list[tuple[str, str]], indent: str = "  ") -> list[str]:
    """Format label/value rows with aligned values."""
    if not rows:
        return []
    width = max(len(label) for label, _ in rows)
    return [f"{indent}{label.ljust(width)}  {value}" for label, value in rows]


def _filled_rows(fields: dict[str, Any]) -> list[tuple[str, str]]:
    return [(name.replace("_", " "), str(value)) for name, value in fields.items() if value is not None]


def format_extraction(extraction: DocumentExtraction) -> str:
    """Render a human-readable summary; empty sections are omitted."""
    classification = extraction.classification
    lines = [
        extraction.title,
        f"Type: {classification.type} ({classification.confidence:.2f})",
        f"Extraction confidence: {extraction.confidence:.2f}",
    ]

    sections = (
        ("Vendor", _filled_rows(asdict(extraction.vendor))),
        ("Product", _filled_rows(asdict(extraction.product))),
        ("Dates", _filled_rows(asdict(extraction.dates))),
        ("Amounts", [(amount.currency, f"{amount.value} ({amount.raw})") for amount in extraction.amounts]),
    )
    for heading, rows in sections:
        if rows:
            lines.append("")
            lines.append(f"{heading}:")
            lines.extend(_format_rows(rows))

    lines.append("")
    if extraction.reminders:
        lines.append("Suggested reminders:")
        for reminder in extraction.reminders:
            lines.append(f"  [{reminder.priority}] {reminder.type} on {reminder.date}: {reminder.description}")
    else:
        lines.append("No reminders suggested.")

    return "\n".join(lines)


def reminder_draft_to_dict(draft: ReminderDraft) -> dict[str, Any]:
    """Convert a reminder draft into JSON-serializable data."""
    data = asdict(draft)
    data["reminder_date"] = draft.reminder_date.isoformat()
    data["notify_on"] = draft.notify_on.isoformat()
    return data
