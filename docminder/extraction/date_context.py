"""Assign dates found in OCR text to semantic roles using same-line keywords."""

from docminder.domain.document import DateDetails
from docminder.runtime.logging import get_logger

from .common import _require_text
from .fields_parser import extract_dates
from .patterns import SERVICE_INTERVAL_PATTERN, SERVICE_KEYWORDS

logger = get_logger(__name__)


def _date_role(line_lower: str) -> str | None:
    """Return the role of a dated line; the first matching rule wins."""
    if "purchase" in line_lower or "bought" in line_lower:
        return "purchase_date"
    if "warranty" in line_lower and ("expir" in line_lower or "until" in line_lower or "valid" in line_lower):
        return "warranty_expiry"
    if "next service" in line_lower or "service due" in line_lower:
        return "next_service_due"
    if "invoice date" in line_lower or "date of invoice" in line_lower:
        return "invoice_date"
    return None


def extract_date_details(text: str) -> DateDetails:
    """
    Walk the text line by line and assign each line's first date to a role.

    Roles are single-valued and a later line overwrites an earlier one.
    The service interval ("<number> <unit>") is read from any line that
    mentions service, independent of dates. A missing purchase date falls
    back to the invoice date, then to the first date anywhere in the text.
    """
    text = _require_text(text)
    roles: dict[str, str | None] = {
        "purchase_date": None,
        "warranty_expiry": None,
        "next_service_due": None,
        "invoice_date": None,
    }
    service_interval: str | None = None

    for line in text.split("\n"):
        line_lower = line.lower()

        dates = extract_dates(line)
        if dates:
            role = _date_role(line_lower)
            if role is not None:
                if roles[role] is not None:
                    logger.debug("Later line overwrites %s", role)
                roles[role] = dates[0]

        if any(kw in line_lower for kw in SERVICE_KEYWORDS):
            interval = SERVICE_INTERVAL_PATTERN.search(line)
            if interval:
                service_interval = f"{interval.group(1)} {interval.group(2)}"

    purchase_date = roles["purchase_date"]
    if purchase_date is None:
        if roles["invoice_date"] is not None:
            purchase_date = roles["invoice_date"]
        else:
            all_dates = extract_dates(text)
            purchase_date = all_dates[0] if all_dates else None

    return DateDetails(
        purchase_date=purchase_date,
        warranty_expiry=roles["warranty_expiry"],
        service_interval=service_interval,
        next_service_due=roles["next_service_due"],
        invoice_date=roles["invoice_date"],
    )
