"""Document scan workflow orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from docminder.domain.document import DocumentExtraction
from docminder.extraction import parse_document
from docminder.ocr.image_helpers import InvalidImageError
from docminder.runtime.ocr_pipeline import OCRServiceUnavailable, call_ocr_service

ScanStatus = Literal[
    "file_not_found",
    "invalid_image",
    "ocr_unavailable",
    "no_text",
    "extracted",
]

# Below this OCR confidence the transcript is treated as noise.
MIN_OCR_CONFIDENCE = 0.1


@dataclass(frozen=True)
class DocumentScanRequest:
    """Inputs for running the document scan workflow."""

    image_path: Path
    ocr_url: str
    preprocess: bool = True


@dataclass(frozen=True)
class DocumentScanResult:
    """Outcome from the document scan workflow."""

    status: ScanStatus
    extraction: DocumentExtraction | None = None
    ocr_confidence: float | None = None
    error: str | None = None


def run_document_scan(request: DocumentScanRequest) -> DocumentScanResult:
    """Run scan flow: read image -> OCR service -> extract fields and reminders."""
    if not request.image_path.exists():
        return DocumentScanResult(
            status="file_not_found",
            error=f"Document file not found: {request.image_path}",
        )

    try:
        ocr_text = call_ocr_service(
            request.image_path.read_bytes(),
            request.image_path.name,
            request.ocr_url,
            preprocess=request.preprocess,
        )
    except InvalidImageError as exc:
        return DocumentScanResult(status="invalid_image", error=f"{request.image_path.name}: {exc}")
    except OCRServiceUnavailable as exc:
        return DocumentScanResult(status="ocr_unavailable", error=str(exc))

    if not ocr_text.text or ocr_text.confidence < MIN_OCR_CONFIDENCE:
        return DocumentScanResult(
            status="no_text",
            ocr_confidence=ocr_text.confidence,
            error="No text detected in image or confidence too low",
        )

    return DocumentScanResult(
        status="extracted",
        extraction=parse_document(ocr_text.text, file_name=request.image_path.name),
        ocr_confidence=ocr_text.confidence,
    )
