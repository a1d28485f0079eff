"""Rule-based entity extraction from document OCR text."""

from .classifier import classify_document, score_document_types
from .common import InvalidInputError
from .confidence import calculate_confidence
from .date_context import extract_date_details
from .date_utils import parse_date
from .document_parser import parse_document
from .fields_parser import (
    extract_amounts,
    extract_dates,
    extract_document_title,
    extract_emails,
    extract_gstin,
    extract_pan,
    extract_phone_numbers,
    extract_product_details,
    extract_serial_numbers,
    extract_vendor_details,
)
from .formatter import extraction_to_dict, format_extraction, reminder_draft_to_dict
from .reminders import generate_reminder_suggestions

__all__ = [
    "InvalidInputError",
    "calculate_confidence",
    "classify_document",
    "extract_amounts",
    "extract_date_details",
    "extract_dates",
    "extract_document_title",
    "extract_emails",
    "extract_gstin",
    "extract_pan",
    "extract_phone_numbers",
    "extract_product_details",
    "extract_serial_numbers",
    "extract_vendor_details",
    "extraction_to_dict",
    "format_extraction",
    "generate_reminder_suggestions",
    "parse_date",
    "parse_document",
    "reminder_draft_to_dict",
    "score_document_types",
]
