"""Helpers on the OCR side of extraction: image preparation and detection text."""

from .image_helpers import (
    MAX_IMAGE_DIMENSION,
    OCR_IMAGE_PADDING,
    ImageQuality,
    InvalidImageError,
    PreprocessingResult,
    analyze_image_quality,
    estimate_skew_angle,
    otsu_threshold,
    preprocess_image_bytes,
)
from .ocr_helpers import OcrText, transform_ocr_result

__all__ = [
    "MAX_IMAGE_DIMENSION",
    "OCR_IMAGE_PADDING",
    "ImageQuality",
    "InvalidImageError",
    "OcrText",
    "PreprocessingResult",
    "analyze_image_quality",
    "estimate_skew_angle",
    "otsu_threshold",
    "preprocess_image_bytes",
    "transform_ocr_result",
]
