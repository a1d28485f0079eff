"""Reminder draft model handed to the persistence layer."""

from dataclasses import dataclass
from datetime import date, timedelta

from docminder.domain.document import Priority, ReminderType


@dataclass(frozen=True)
class ReminderDraft:
    """A reminder row ready to be stored, with a normalized date."""

    title: str
    description: str
    reminder_type: ReminderType
    reminder_date: date
    priority: Priority
    notify_before_days: int

    @property
    def notify_on(self) -> date:
        """Date from which the user should be notified."""
        return self.reminder_date - timedelta(days=self.notify_before_days)
