"""Runtime helpers for sending document images to the OCR service."""

import time
from typing import Any

import httpx

from docminder.ocr.image_helpers import OCR_IMAGE_PADDING, preprocess_image_bytes
from docminder.ocr.ocr_helpers import OcrText, transform_ocr_result
from docminder.runtime.logging import get_logger

logger = get_logger(__name__)

OCR_TIMEOUT_SECONDS = 60.0


class OCRServiceUnavailable(RuntimeError):
    """Raised when the OCR service cannot be reached or returns an error."""


def prepare_upload(image_bytes: bytes, preprocess: bool = True) -> tuple[bytes, int]:
    """Return (bytes to upload, padding applied) for an image."""
    if not preprocess:
        return image_bytes, 0
    result = preprocess_image_bytes(image_bytes)
    logger.debug("Preprocessed image: %s", ", ".join(result.applied_operations))
    return result.image_bytes, OCR_IMAGE_PADDING


def _read_response(response: httpx.Response, padding: int) -> OcrText:
    if response.status_code != 200:
        # Body omitted: it may contain document text.
        logger.error("OCR service error: %s", response.status_code)
        raise OCRServiceUnavailable(f"OCR service error: {response.status_code}")
    try:
        payload: dict[str, Any] = response.json()
    except ValueError as e:
        raise OCRServiceUnavailable("OCR service returned invalid JSON") from e
    try:
        return transform_ocr_result(payload, padding=padding)
    except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
        logger.error("Unexpected OCR payload: %s", type(e).__name__)
        raise OCRServiceUnavailable("OCR service returned an unexpected payload") from e


def call_ocr_service(image_bytes: bytes, file_name: str, ocr_url: str, preprocess: bool = True) -> OcrText:
    """
    Send an image to the OCR service and return its text and confidence.

    Raises:
        OCRServiceUnavailable: on connection failure, a non-200 response or a
            payload that is not a detection list.
        InvalidImageError: if preprocessing is on and the bytes are not an image.
    """
    ocr_url = ocr_url.rstrip("/")
    logger.info("Sending %s to OCR service at %s...", file_name, ocr_url)
    upload, padding = prepare_upload(image_bytes, preprocess)

    try:
        start_time = time.time()
        response = httpx.post(
            f"{ocr_url}/ocr",
            files={"file": (file_name, upload, "image/jpeg")},
            timeout=OCR_TIMEOUT_SECONDS,
        )
        logger.info("OCR service returned in %.2f seconds", time.time() - start_time)
    except httpx.RequestError as e:
        logger.error("Failed to connect to OCR service: %s", e)
        raise OCRServiceUnavailable(f"Failed to connect to OCR service: {e}") from e

    return _read_response(response, padding)


async def call_ocr_service_async(
    image_bytes: bytes, file_name: str, ocr_url: str, preprocess: bool = True
) -> OcrText:
    """Async variant of call_ocr_service for the HTTP server."""
    ocr_url = ocr_url.rstrip("/")
    upload, padding = prepare_upload(image_bytes, preprocess)

    try:
        async with httpx.AsyncClient(timeout=OCR_TIMEOUT_SECONDS) as client:
            response = await client.post(
                f"{ocr_url}/ocr",
                files={"file": (file_name, upload, "image/jpeg")},
            )
    except httpx.RequestError as e:
        logger.error("OCR service unavailable: %s", e)
        raise OCRServiceUnavailable(f"Failed to connect to OCR service: {e}") from e

    return _read_response(response, padding)
