"""Document workflows."""

from docminder.application.reminder_drafts import (
    build_reminder_drafts,
    due_for_notification,
    notify_before_days,
    upcoming_reminders,
)
from docminder.application.scan import DocumentScanRequest, DocumentScanResult, run_document_scan

__all__ = [
    "DocumentScanRequest",
    "DocumentScanResult",
    "build_reminder_drafts",
    "due_for_notification",
    "notify_before_days",
    "run_document_scan",
    "upcoming_reminders",
]
