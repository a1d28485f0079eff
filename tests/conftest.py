"""Shared pytest fixtures for docminder tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from _pytest.monkeypatch import MonkeyPatch
from docminder.runtime.settings import reset_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: MonkeyPatch) -> Iterator[None]:
    """Keep tests away from the user's config file and environment."""
    monkeypatch.setenv("DOCMINDER_CONFIG", str(tmp_path / "missing-config.toml"))
    monkeypatch.delenv("DOCMINDER_OCR_URL", raising=False)
    reset_settings()
    yield
    reset_settings()


WARRANTY_INVOICE_TEXT = """Croma Retail Store
Plot 5, Sector 18, Noida 201301
Tax Invoice No: CR-7781
Invoice Date: 10/01/2025
Product: LG Refrigerator 260L
Model No: GL-T292RPZY
Serial No: 412KWAB12345
Amount: Rs. 28,990.00
Warranty valid until 10/01/2026
"""

ELECTRICITY_BILL_TEXT = """BESCOM Electricity Bill
Consumer No: 1234567890
Invoice Date: 05/02/2025
Due Date: 20/02/2025
Amount Payable: Rs. 1,250.00
"""


@pytest.fixture
def warranty_invoice_text() -> str:
    return WARRANTY_INVOICE_TEXT


@pytest.fixture
def electricity_bill_text() -> str:
    return ELECTRICITY_BILL_TEXT
