"""Turn raw OCR service detections into plain document text."""

from dataclasses import dataclass
from typing import Any

from .image_helpers import OCR_IMAGE_PADDING

MIN_DETECTION_CONFIDENCE = 0.5
MIN_LINE_OVERLAP = 0.5  # Share of the smaller box height two words must share to be on one line


@dataclass(frozen=True)
class OcrText:
    """OCR output handed to extraction: the transcript and the engine's confidence."""

    text: str
    confidence: float


def _vertical_overlap_ratio(a: dict[str, float], b: dict[str, float]) -> float:
    overlap = min(a["y_max"], b["y_max"]) - max(a["y_min"], b["y_min"])
    if overlap <= 0:
        return 0.0
    smaller_height = min(a["y_max"] - a["y_min"], b["y_max"] - b["y_min"])
    if smaller_height <= 0:
        return 0.0
    return overlap / smaller_height


def _group_into_lines(detections: list[dict[str, Any]]) -> list[list[dict[str, Any]]]:
    """Group detections top to bottom; a word joins a line it overlaps vertically."""
    lines: list[list[dict[str, Any]]] = []
    for det in sorted(detections, key=lambda d: (d["y_min"], d["min_x"])):
        for line in lines:
            if _vertical_overlap_ratio(det, line[0]) >= MIN_LINE_OVERLAP:
                line.append(det)
                break
        else:
            lines.append([det])

    for line in lines:
        line.sort(key=lambda d: d["min_x"])
    return lines


def transform_ocr_result(raw_result: dict[str, Any], padding: int = OCR_IMAGE_PADDING) -> OcrText:
    """
    Convert an OCR service payload into text plus mean confidence.

    Expected payload: {"detections": [[bbox, [text, confidence]], ...]} where
    bbox is four [x, y] points in the padded image. Low-confidence and empty
    detections are dropped; the rest are grouped into lines.
    """
    kept: list[dict[str, Any]] = []
    for bbox, (text, confidence) in raw_result.get("detections", []):
        if confidence < MIN_DETECTION_CONFIDENCE or not text.strip():
            continue
        xs = [point[0] - padding for point in bbox]
        ys = [point[1] - padding for point in bbox]
        kept.append(
            {
                "text": text.strip(),
                "confidence": float(confidence),
                "min_x": min(xs),
                "y_min": min(ys),
                "y_max": max(ys),
            }
        )

    if not kept:
        return OcrText(text="", confidence=0.0)

    lines = _group_into_lines(kept)
    full_text = "\n".join(" ".join(det["text"] for det in line) for line in lines)
    mean_confidence = sum(det["confidence"] for det in kept) / len(kept)
    return OcrText(text=full_text, confidence=mean_confidence)
