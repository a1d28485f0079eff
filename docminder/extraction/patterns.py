"""Static pattern and keyword tables for document entity extraction."""

import re

_MONTHS = r"(January|February|March|April|May|June|July|August|September|October|November|December)"

# Every pattern is tried; matches are collected and de-duplicated.
DATE_PATTERNS = (
    # DD/MM/YYYY, DD-MM-YYYY, DD.MM.YYYY
    re.compile(r"(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{4})", re.IGNORECASE),
    # YYYY-MM-DD, YYYY/MM/DD, YYYY.MM.DD
    re.compile(r"(\d{4})[/\-.](\d{1,2})[/\-.](\d{1,2})", re.IGNORECASE),
    # Month DD, YYYY
    re.compile(_MONTHS + r"\s+(\d{1,2}),?\s+(\d{4})", re.IGNORECASE),
    # DD Month YYYY
    re.compile(r"(\d{1,2})\s+" + _MONTHS + r"\s+(\d{4})", re.IGNORECASE),
)

PHONE_PATTERNS = (
    # Indian mobile, optional +91 prefix
    re.compile(r"(?:\+91[\-\s]?)?[6-9]\d{9}"),
    # Landline with optional STD code
    re.compile(r"(?:0\d{2,4}[\-\s]?)?\d{6,8}"),
)

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

GSTIN_PATTERN = re.compile(r"\d{2}[A-Z]{5}\d{4}[A-Z][A-Z\d]Z[A-Z\d]")
PAN_PATTERN = re.compile(r"[A-Z]{5}\d{4}[A-Z]")

_AMOUNT_NUMBER = r"\s*(\d(?:[\d,]*\d)?(?:\.\d{2})?)"

# (currency, pattern) in evaluation order; group 1 is the numeric literal.
CURRENCY_PATTERNS = (
    ("INR", re.compile(r"(?:\bRs\.?|\bINR|₹)" + _AMOUNT_NUMBER, re.IGNORECASE)),
    ("USD", re.compile(r"(?:\$|\bUSD)" + _AMOUNT_NUMBER, re.IGNORECASE)),
    ("EUR", re.compile(r"(?:€|\bEUR)" + _AMOUNT_NUMBER, re.IGNORECASE)),
)
DEFAULT_CURRENCY = "INR"

# (kind, pattern); group 1 is the captured identifier.
SERIAL_PATTERNS = (
    ("serial", re.compile(r"(?:serial\s*(?:no\.?|number)?|s/n|sn)\s*[:.]?\s*([A-Z0-9\-]+)", re.IGNORECASE)),
    ("model", re.compile(r"(?:model\s*(?:no\.?|number)?|m/n)\s*[:.]?\s*([A-Z0-9\-]+)", re.IGNORECASE)),
    ("imei", re.compile(r"imei\s*[:.]?\s*(\d{15})", re.IGNORECASE)),
)

WARRANTY_KEYWORDS = (
    "warranty",
    "guarantee",
    "valid until",
    "expires",
    "expiry",
    "coverage",
    "protection plan",
    "extended warranty",
)

SERVICE_KEYWORDS = (
    "service",
    "maintenance",
    "next service",
    "service due",
    "service interval",
    "annual service",
    "periodic",
)

SERVICE_INTERVAL_PATTERN = re.compile(r"(\d+)\s*(month|year|km|mile)", re.IGNORECASE)

# Address keyword followed eventually by a 6-digit PIN code.
ADDRESS_PATTERN = re.compile(
    r"[^\n]*?(?:\b(?:road|street|lane|colony|sector)|nagar)\b.{0,150}?\b\d{6}\b",
    re.IGNORECASE | re.DOTALL,
)

VENDOR_NAME_EXCLUDED = ("invoice", "receipt")
DIGIT_RUN_PATTERN = re.compile(r"\d{5,}")
LEADING_DATE_PATTERN = re.compile(r"^\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4}")

# Tried in order; the first pattern with a match on any line wins.
PRODUCT_NAME_PATTERNS = (
    re.compile(r"(product|item|description)\s*[:.]?\s*(.+)", re.IGNORECASE),
    re.compile(r"(name)\s*[:.]?\s*(.+)", re.IGNORECASE),
)

QUANTITY_PATTERN = re.compile(r"\b(?:qty|quantity)\s*[:.]?\s*(\d+)\b", re.IGNORECASE)
UNIT_PRICE_PATTERN = re.compile(r"\b(?:unit price|rate|mrp)\b", re.IGNORECASE)

# First category with a keyword present in the text wins.
PRODUCT_CATEGORY_KEYWORDS = (
    ("electronics", ("laptop", "mobile", "smartphone", "television", "headphone", "camera", "tablet")),
    ("appliance", ("refrigerator", "washing machine", "air conditioner", "microwave", "water purifier", "geyser")),
    ("vehicle", ("car", "bike", "scooter", "motorcycle", "vehicle")),
    ("furniture", ("sofa", "mattress", "wardrobe", "table", "chair")),
    ("utility", ("electricity", "water supply", "gas connection", "broadband")),
)
