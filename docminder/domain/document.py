"""Data models for document entity extraction."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal

DocumentType = Literal[
    "invoice",
    "bill",
    "warranty_card",
    "receipt",
    "product_manual",
    "service_document",
    "unknown",
]
Currency = Literal["INR", "USD", "EUR"]
SerialKind = Literal["serial", "model", "imei"]
ReminderType = Literal["warranty_expiry", "service_due", "payment_due"]
Priority = Literal["low", "medium", "high"]


@dataclass(frozen=True)
class VendorDetails:
    """Seller/issuer details found on a document."""

    name: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    gstin: str | None = None  # Indian GST number
    pan: str | None = None


@dataclass(frozen=True)
class ProductDetails:
    """Product details found on a document."""

    name: str | None = None
    model: str | None = None
    serial_number: str | None = None
    category: str | None = None
    quantity: int | None = None
    unit_price: Decimal | None = None
    total_price: Decimal | None = None


@dataclass(frozen=True)
class DateDetails:
    """Dates by role, kept as the raw substrings matched in the text."""

    purchase_date: str | None = None
    warranty_expiry: str | None = None
    service_interval: str | None = None
    next_service_due: str | None = None
    invoice_date: str | None = None


@dataclass(frozen=True)
class MonetaryAmount:
    """A currency amount matched in the text."""

    value: Decimal
    currency: Currency
    raw: str


@dataclass(frozen=True)
class SerialNumber:
    """A serial, model or IMEI number matched in the text."""

    kind: SerialKind
    value: str


@dataclass(frozen=True)
class DocumentClassification:
    type: DocumentType
    confidence: float


@dataclass(frozen=True)
class ReminderSuggestion:
    """A reminder derived from document dates; persisted by the caller or discarded."""

    type: ReminderType
    date: str
    title: str
    description: str
    priority: Priority


@dataclass(frozen=True)
class DocumentExtraction:
    """Everything extracted from one document's OCR text."""

    title: str
    vendor: VendorDetails
    product: ProductDetails
    dates: DateDetails
    classification: DocumentClassification
    confidence: float
    amounts: list[MonetaryAmount] = field(default_factory=list)
    serial_numbers: list[SerialNumber] = field(default_factory=list)
    phones: list[str] = field(default_factory=list)
    emails: list[str] = field(default_factory=list)
    reminders: list[ReminderSuggestion] = field(default_factory=list)
    raw_text: str = ""  # Original OCR text for reference
