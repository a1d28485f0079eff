from docminder.domain import DateDetails
from docminder.extraction import extract_date_details


def test_assigns_roles_from_line_keywords() -> None:
    text = "\n".join(
        [
            "Purchase date: 01/01/2024",
            "Next service due on 01/07/2024",
            "Service every 6 months",
            "Invoice Date: 02/01/2024",
        ]
    )

    assert extract_date_details(text) == DateDetails(
        purchase_date="01/01/2024",
        warranty_expiry=None,
        service_interval="6 month",
        next_service_due="01/07/2024",
        invoice_date="02/01/2024",
    )


def test_later_line_overwrites_earlier_role() -> None:
    text = "Warranty valid until 01/01/2025\nWarranty expires 01/01/2026"

    details = extract_date_details(text)

    assert details.warranty_expiry == "01/01/2026"


def test_repeated_warranty_line_keeps_last_date() -> None:
    text = "Warranty valid until 01/01/2025\nWarranty valid until 01/01/2026"

    assert extract_date_details(text).warranty_expiry == "01/01/2026"


def test_purchase_keyword_wins_over_warranty_on_same_line() -> None:
    details = extract_date_details("Purchase 01/01/2024, warranty until 01/01/2026")

    assert details.purchase_date == "01/01/2024"
    assert details.warranty_expiry is None


def test_purchase_date_falls_back_to_invoice_date(warranty_invoice_text: str) -> None:
    details = extract_date_details(warranty_invoice_text)

    assert details.invoice_date == "10/01/2025"
    assert details.purchase_date == "10/01/2025"
    assert details.warranty_expiry == "10/01/2026"


def test_purchase_date_falls_back_to_first_date() -> None:
    details = extract_date_details("Warranty valid until 01/01/2025\nPrinted 05/05/2024")

    assert details.purchase_date == "01/01/2025"


def test_service_interval_in_kilometres() -> None:
    assert extract_date_details("Service every 10000 km").service_interval == "10000 km"


def test_interval_needs_service_keyword() -> None:
    assert extract_date_details("Battery lasts 12 months").service_interval is None


def test_empty_text() -> None:
    assert extract_date_details("") == DateDetails()
