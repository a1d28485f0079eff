from typing import Any

from _pytest.monkeypatch import MonkeyPatch
from docminder.ocr import OcrText
from docminder.runtime import server
from docminder.runtime.ocr_pipeline import OCRServiceUnavailable
from fastapi.testclient import TestClient


client = TestClient(server.app)


def test_health() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_extract_returns_extraction_and_drafts(warranty_invoice_text: str) -> None:
    response = client.post("/extract", json={"text": warranty_invoice_text, "file_name": "fridge.jpg"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert body["extraction"]["classification"]["type"] == "invoice"
    assert "raw_text" not in body["extraction"]
    assert body["reminder_drafts"] == [
        {
            "title": "Warranty Expiring Soon",
            "description": (
                "Warranty is about to expire on 10/01/2026. "
                "Consider extending the warranty or making any pending claims."
            ),
            "reminder_type": "warranty_expiry",
            "reminder_date": "2026-01-10",
            "priority": "high",
            "notify_before_days": 14,
            "notify_on": "2025-12-27",
        }
    ]


def test_extract_bill(electricity_bill_text: str) -> None:
    body = client.post("/extract", json={"text": electricity_bill_text}).json()

    assert body["extraction"]["classification"]["type"] == "bill"
    assert body["extraction"]["amounts"][0]["value"] == 1250.0
    assert [d["reminder_type"] for d in body["reminder_drafts"]] == ["payment_due"]
    assert body["reminder_drafts"][0]["reminder_date"] == "2025-02-05"


def test_extract_rejects_bad_bodies() -> None:
    not_json = client.post("/extract", content=b"{not json", headers={"content-type": "application/json"})
    not_object = client.post("/extract", json=["text"])
    missing_text = client.post("/extract", json={"file_name": "a.jpg"})
    wrong_type = client.post("/extract", json={"text": 42})

    assert not_json.status_code == 400
    assert not_object.status_code == 400
    assert missing_text.status_code == 400
    assert wrong_type.status_code == 400
    assert wrong_type.json()["status"] == "error"


def test_scan_uploaded_image(monkeypatch: MonkeyPatch, warranty_invoice_text: str) -> None:
    received: dict[str, Any] = {}

    async def fake_ocr(image_bytes: bytes, file_name: str, ocr_url: str, preprocess: bool = True) -> OcrText:
        received.update(image_bytes=image_bytes, file_name=file_name, ocr_url=ocr_url)
        return OcrText(text=warranty_invoice_text, confidence=0.9)

    monkeypatch.setattr(server, "call_ocr_service_async", fake_ocr)

    response = client.post("/scan", files={"file": ("fridge.jpg", b"image-bytes", "image/jpeg")})

    assert response.status_code == 200
    body = response.json()
    assert body["ocr_confidence"] == 0.9
    assert body["extraction"]["product"]["category"] == "appliance"
    assert received == {"image_bytes": b"image-bytes", "file_name": "fridge.jpg", "ocr_url": "http://localhost:8001"}


def test_scan_uses_configured_ocr_url(monkeypatch: MonkeyPatch, warranty_invoice_text: str) -> None:
    urls: list[str] = []

    async def fake_ocr(image_bytes: bytes, file_name: str, ocr_url: str, preprocess: bool = True) -> OcrText:
        urls.append(ocr_url)
        return OcrText(text=warranty_invoice_text, confidence=0.9)

    monkeypatch.setenv("DOCMINDER_OCR_URL", "http://ocr.internal:9000")
    monkeypatch.setattr(server, "call_ocr_service_async", fake_ocr)

    client.post("/scan", files={"file": ("fridge.jpg", b"image-bytes", "image/jpeg")})

    assert urls == ["http://ocr.internal:9000"]


def test_scan_without_file() -> None:
    response = client.post("/scan", data={"note": "no file here"})

    assert response.status_code == 400


def test_scan_ocr_unavailable(monkeypatch: MonkeyPatch) -> None:
    async def fake_ocr(*args: Any, **kwargs: Any) -> OcrText:
        raise OCRServiceUnavailable("OCR service error: 503")

    monkeypatch.setattr(server, "call_ocr_service_async", fake_ocr)

    response = client.post("/scan", files={"file": ("doc.jpg", b"x", "image/jpeg")})

    assert response.status_code == 502
    assert response.json()["message"] == "OCR service error: 503"


def test_scan_low_confidence(monkeypatch: MonkeyPatch) -> None:
    async def fake_ocr(*args: Any, **kwargs: Any) -> OcrText:
        return OcrText(text="", confidence=0.0)

    monkeypatch.setattr(server, "call_ocr_service_async", fake_ocr)

    response = client.post("/scan", files={"file": ("doc.jpg", b"x", "image/jpeg")})

    assert response.status_code == 422
    assert response.json()["ocr_confidence"] == 0.0


def test_scan_rejects_non_image_upload() -> None:
    response = client.post("/scan", files={"file": ("notes.jpg", b"not an image", "image/jpeg")})

    assert response.status_code == 400
    assert response.json()["status"] == "error"
    assert response.json()["message"].startswith("Not a readable image")
