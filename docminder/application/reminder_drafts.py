"""Turn reminder suggestions into storable reminder drafts."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from docminder.domain.document import Priority, ReminderSuggestion
from docminder.domain.reminder import ReminderDraft
from docminder.extraction.date_utils import parse_date
from docminder.runtime import get_logger, load_settings
from docminder.runtime.settings import Settings

logger = get_logger(__name__)


def notify_before_days(priority: Priority, settings: Settings | None = None) -> int:
    """Days of advance notice for a priority (default: high 14, medium 7, low 3)."""
    settings = settings or load_settings()
    return settings.notify_before_days[priority]


def build_reminder_drafts(
    suggestions: Iterable[ReminderSuggestion],
    settings: Settings | None = None,
) -> list[ReminderDraft]:
    """
    Normalize suggestions into drafts.

    Suggestions without a date or title, or whose date does not normalize,
    are dropped.
    """
    settings = settings or load_settings()
    drafts: list[ReminderDraft] = []
    for suggestion in suggestions:
        if not suggestion.date or not suggestion.title:
            continue
        normalized = parse_date(suggestion.date, month_first=settings.month_first)
        if normalized is None:
            logger.warning("Dropping %s reminder with unparseable date %r", suggestion.type, suggestion.date)
            continue
        drafts.append(
            ReminderDraft(
                title=suggestion.title,
                description=suggestion.description,
                reminder_type=suggestion.type,
                reminder_date=date.fromisoformat(normalized),
                priority=suggestion.priority,
                notify_before_days=notify_before_days(suggestion.priority, settings),
            )
        )
    return drafts


def upcoming_reminders(
    drafts: Iterable[ReminderDraft],
    today: date,
    window_days: int | None = None,
    grace_days: int | None = None,
) -> list[ReminderDraft]:
    """Return drafts due within window_days, including ones up to grace_days overdue."""
    if window_days is None or grace_days is None:
        settings = load_settings()
        if window_days is None:
            window_days = settings.upcoming_window_days
        if grace_days is None:
            grace_days = settings.overdue_grace_days

    earliest = today - timedelta(days=grace_days)
    latest = today + timedelta(days=window_days)
    return [draft for draft in drafts if earliest <= draft.reminder_date <= latest]


def due_for_notification(draft: ReminderDraft, today: date) -> bool:
    """True once the notice period before the reminder date has started."""
    return today >= draft.notify_on
