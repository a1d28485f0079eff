"""Parse raw OCR text into a structured DocumentExtraction."""

from docminder.domain.document import DocumentExtraction
from docminder.runtime.logging import get_logger

from .classifier import classify_document
from .common import _require_text
from .confidence import calculate_confidence
from .date_context import extract_date_details
from .fields_parser import (
    extract_amounts,
    extract_document_title,
    extract_emails,
    extract_phone_numbers,
    extract_product_details,
    extract_serial_numbers,
    extract_vendor_details,
)
from .reminders import generate_reminder_suggestions

logger = get_logger(__name__)


def parse_document(text: str, file_name: str | None = None) -> DocumentExtraction:
    """
    Run every extractor over one document's OCR text.

    Args:
        text: Full OCR transcript; may be empty.
        file_name: Source file name, used only as a title fallback.

    Returns:
        DocumentExtraction with fields, classification, reminders and confidence.

    Raises:
        InvalidInputError: if text is not a string.
    """
    text = _require_text(text)

    vendor = extract_vendor_details(text)
    product = extract_product_details(text)
    dates = extract_date_details(text)
    classification = classify_document(text)
    reminders = generate_reminder_suggestions(dates, classification.type)
    confidence = calculate_confidence(vendor, product, dates)

    logger.debug(
        "Parsed document: type=%s, %d reminder(s), confidence=%.2f",
        classification.type,
        len(reminders),
        confidence,
    )

    return DocumentExtraction(
        title=extract_document_title(text, file_name),
        vendor=vendor,
        product=product,
        dates=dates,
        classification=classification,
        confidence=confidence,
        amounts=extract_amounts(text),
        serial_numbers=extract_serial_numbers(text),
        phones=extract_phone_numbers(text),
        emails=extract_emails(text),
        reminders=reminders,
        raw_text=text,
    )
