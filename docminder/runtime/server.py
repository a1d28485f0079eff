"""FastAPI server exposing document extraction over HTTP."""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from docminder.application.reminder_drafts import build_reminder_drafts
from docminder.application.scan import MIN_OCR_CONFIDENCE
from docminder.domain.document import DocumentExtraction
from docminder.extraction import (
    InvalidInputError,
    extraction_to_dict,
    parse_document,
    reminder_draft_to_dict,
)
from docminder.ocr.image_helpers import InvalidImageError
from docminder.runtime.logging import get_logger
from docminder.runtime.ocr_pipeline import OCRServiceUnavailable, call_ocr_service_async
from docminder.runtime.settings import load_settings

logger = get_logger(__name__)

app = FastAPI(title="Document Reminder Extractor")


def _success_payload(extraction: DocumentExtraction, **extra: Any) -> dict[str, Any]:
    drafts = build_reminder_drafts(extraction.reminders)
    return {
        "status": "success",
        **extra,
        "extraction": extraction_to_dict(extraction, include_raw_text=False),
        "reminder_drafts": [reminder_draft_to_dict(draft) for draft in drafts],
    }


@app.post("/extract")
async def extract_text(request: Request) -> JSONResponse:
    """Extract fields and reminders from OCR text sent as JSON {"text": ..., "file_name": ...}."""
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse({"status": "error", "message": "Request body must be JSON"}, status_code=400)

    if not isinstance(body, dict):
        return JSONResponse({"status": "error", "message": "Request body must be a JSON object"}, status_code=400)

    file_name = body.get("file_name")
    try:
        extraction = parse_document(body.get("text"), file_name=file_name if isinstance(file_name, str) else None)
    except InvalidInputError as e:
        return JSONResponse({"status": "error", "message": str(e)}, status_code=400)

    return JSONResponse(_success_payload(extraction))


@app.post("/scan")
async def scan_document(request: Request) -> JSONResponse:
    """Receive a document image, run it through the OCR service and extract it."""
    form = await request.form()

    file = None
    for key, value in form.items():
        logger.debug("Form field: key=%r, type=%s", key, type(value))
        if hasattr(value, "read"):
            file = value
            break

    if not file:
        return JSONResponse({"status": "error", "message": "No file found in request"}, status_code=400)

    file_name = getattr(file, "filename", None) or "document.jpg"
    contents = await file.read()

    try:
        ocr_text = await call_ocr_service_async(contents, file_name, load_settings().ocr_url)
    except InvalidImageError as e:
        return JSONResponse({"status": "error", "message": str(e)}, status_code=400)
    except OCRServiceUnavailable as e:
        return JSONResponse({"status": "error", "message": str(e)}, status_code=502)

    if not ocr_text.text or ocr_text.confidence < MIN_OCR_CONFIDENCE:
        return JSONResponse(
            {
                "status": "error",
                "message": "No text detected in image or confidence too low",
                "ocr_confidence": ocr_text.confidence,
            },
            status_code=422,
        )

    extraction = parse_document(ocr_text.text, file_name=file_name)
    logger.info("Extracted %s from %s", extraction.classification.type, file_name)
    return JSONResponse(_success_payload(extraction, ocr_confidence=ocr_text.confidence))


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8080)
