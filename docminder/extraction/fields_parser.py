"""Vendor/product/date/amount field extraction helpers.

Every extractor is total over strings: a missing field comes back as None
(scalars) or [] (lists), never as an exception.
"""

import re
from decimal import Decimal

from docminder.domain.document import MonetaryAmount, ProductDetails, SerialNumber, VendorDetails

from .classifier import classify_document
from .common import _dedupe, _non_empty_lines, _require_text
from .patterns import (
    ADDRESS_PATTERN,
    CURRENCY_PATTERNS,
    DATE_PATTERNS,
    DIGIT_RUN_PATTERN,
    EMAIL_PATTERN,
    GSTIN_PATTERN,
    LEADING_DATE_PATTERN,
    PAN_PATTERN,
    PHONE_PATTERNS,
    PRODUCT_CATEGORY_KEYWORDS,
    PRODUCT_NAME_PATTERNS,
    QUANTITY_PATTERN,
    SERIAL_PATTERNS,
    UNIT_PRICE_PATTERN,
    VENDOR_NAME_EXCLUDED,
)

TITLE_EXCLUDED = ("invoice", "receipt", "bill", "warranty")


def extract_dates(text: str) -> list[str]:
    """Return every date-like substring, de-duplicated in first-seen order."""
    text = _require_text(text)
    dates: list[str] = []
    for pattern in DATE_PATTERNS:
        dates.extend(match.group(0) for match in pattern.finditer(text))
    return _dedupe(dates)


def extract_phone_numbers(text: str) -> list[str]:
    """Return phone numbers with spaces and hyphens removed."""
    text = _require_text(text)
    phones: list[str] = []
    for pattern in PHONE_PATTERNS:
        phones.extend(re.sub(r"[\s\-]", "", match) for match in pattern.findall(text))
    return _dedupe(phones)


def extract_emails(text: str) -> list[str]:
    text = _require_text(text)
    return _dedupe([email.lower() for email in EMAIL_PATTERN.findall(text)])


def extract_gstin(text: str) -> str | None:
    match = GSTIN_PATTERN.search(_require_text(text))
    return match.group(0) if match else None


def extract_pan(text: str) -> str | None:
    match = PAN_PATTERN.search(_require_text(text))
    return match.group(0) if match else None


def extract_amounts(text: str) -> list[MonetaryAmount]:
    """
    Extract currency amounts.

    Patterns run per currency (INR, USD, EUR), so the result is grouped by
    currency rather than ordered by position. Duplicates are kept.
    """
    text = _require_text(text)
    amounts: list[MonetaryAmount] = []
    for currency, pattern in CURRENCY_PATTERNS:
        for match in pattern.finditer(text):
            value = Decimal(match.group(1).replace(",", ""))
            amounts.append(MonetaryAmount(value=value, currency=currency, raw=match.group(0)))
    return amounts


def extract_serial_numbers(text: str) -> list[SerialNumber]:
    """Extract serial, model and IMEI numbers, grouped by kind."""
    text = _require_text(text)
    serials: list[SerialNumber] = []
    for kind, pattern in SERIAL_PATTERNS:
        serials.extend(SerialNumber(kind=kind, value=match.group(1)) for match in pattern.finditer(text))
    return serials


def _extract_vendor_name(lines: list[str]) -> str | None:
    # Vendor letterheads sit at the top of the page.
    for line in lines[:5]:
        if not 5 < len(line) < 100:
            continue
        if DIGIT_RUN_PATTERN.search(line):
            continue
        line_lower = line.lower()
        if any(word in line_lower for word in VENDOR_NAME_EXCLUDED):
            continue
        return line
    return None


def _extract_address(text: str) -> str | None:
    match = ADDRESS_PATTERN.search(text)
    if not match:
        return None
    return re.sub(r"\s*\n\s*", ", ", match.group(0).strip())


def extract_vendor_details(text: str) -> VendorDetails:
    text = _require_text(text)
    phones = extract_phone_numbers(text)
    emails = extract_emails(text)
    return VendorDetails(
        name=_extract_vendor_name(_non_empty_lines(text)),
        address=_extract_address(text),
        phone=phones[0] if phones else None,
        email=emails[0] if emails else None,
        gstin=extract_gstin(text),
        pan=extract_pan(text),
    )


def _extract_product_name(lines: list[str]) -> str | None:
    for pattern in PRODUCT_NAME_PATTERNS:
        for line in lines:
            match = pattern.search(line)
            if match and match.group(2).strip():
                return match.group(2).strip()
    return None


def _extract_quantity(text: str) -> int | None:
    match = QUANTITY_PATTERN.search(text)
    return int(match.group(1)) if match else None


def _extract_unit_price(lines: list[str]) -> Decimal | None:
    for line in lines:
        if UNIT_PRICE_PATTERN.search(line):
            amounts = extract_amounts(line)
            if amounts:
                return amounts[0].value
    return None


def _extract_category(text: str) -> str | None:
    text_lower = text.lower()
    for category, keywords in PRODUCT_CATEGORY_KEYWORDS:
        for keyword in keywords:
            if re.search(r"\b" + re.escape(keyword) + r"\b", text_lower):
                return category
    return None


def extract_product_details(text: str) -> ProductDetails:
    """
    Extract product fields.

    The total price is the largest amount on the document: receipts and
    invoices end with a grand total that dominates every line amount.
    """
    text = _require_text(text)
    lines = _non_empty_lines(text)
    amounts = extract_amounts(text)
    serials = extract_serial_numbers(text)

    model = next((s.value for s in serials if s.kind == "model"), None)
    serial_number = next((s.value for s in serials if s.kind == "serial"), None)
    if serial_number is None:
        serial_number = next((s.value for s in serials if s.kind == "imei"), None)

    return ProductDetails(
        name=_extract_product_name(lines),
        model=model,
        serial_number=serial_number,
        category=_extract_category(text),
        quantity=_extract_quantity(text),
        unit_price=_extract_unit_price(lines),
        total_price=max((a.value for a in amounts), default=None),
    )


def extract_document_title(text: str, file_name: str | None = None) -> str:
    """
    Pick a display title for the document.

    Strategy order:
    1. First meaningful line near the top (not a date, not a document label)
    2. File name without extension, separators turned into spaces
    3. The classified document type, title-cased
    """
    text = _require_text(text)
    for line in _non_empty_lines(text)[:5]:
        if not 5 < len(line) < 100:
            continue
        if DIGIT_RUN_PATTERN.search(line) or LEADING_DATE_PATTERN.match(line):
            continue
        line_lower = line.lower()
        if any(word in line_lower for word in TITLE_EXCLUDED):
            continue
        return line

    if file_name:
        return re.sub(r"[-_]", " ", re.sub(r"\.[^/.]+$", "", file_name))

    document_type = classify_document(text).type
    return document_type.replace("_", " ").title()
