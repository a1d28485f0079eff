"""Derive reminder suggestions from document dates and type."""

from docminder.domain.document import DateDetails, DocumentType, ReminderSuggestion


def generate_reminder_suggestions(dates: DateDetails, document_type: DocumentType) -> list[ReminderSuggestion]:
    """
    Build reminder suggestions in a fixed order: warranty, service, payment.

    Payment reminders are only raised for bills. An invoice or receipt that
    carries nothing but an invoice date yields no reminders at all.
    """
    reminders: list[ReminderSuggestion] = []

    if dates.warranty_expiry:
        reminders.append(
            ReminderSuggestion(
                type="warranty_expiry",
                date=dates.warranty_expiry,
                title="Warranty Expiring Soon",
                description=(
                    f"Warranty is about to expire on {dates.warranty_expiry}. "
                    "Consider extending the warranty or making any pending claims."
                ),
                priority="high",
            )
        )

    if dates.next_service_due:
        description = f"Scheduled service is due on {dates.next_service_due}."
        if dates.service_interval:
            description += f" (Service interval: {dates.service_interval})"
        reminders.append(
            ReminderSuggestion(
                type="service_due",
                date=dates.next_service_due,
                title="Service Scheduled",
                description=f"{description} Book an appointment.",
                priority="medium",
            )
        )

    # TODO: decide with product whether invoices/receipts with an invoice date should also get payment_due.
    if document_type == "bill" and dates.invoice_date:
        reminders.append(
            ReminderSuggestion(
                type="payment_due",
                date=dates.invoice_date,
                title="Bill Payment Due",
                description="Bill payment is due.",
                priority="high",
            )
        )

    return reminders
