"""Document type classification by weighted keyword votes."""

from docminder.domain.document import DocumentClassification, DocumentType
from docminder.runtime.logging import get_logger

from .common import _require_text
from .patterns import SERVICE_KEYWORDS, WARRANTY_KEYWORDS

logger = get_logger(__name__)

# Bucket order matters: on a tie the first bucket reaching the max score wins.
DOCUMENT_TYPES: tuple[DocumentType, ...] = (
    "invoice",
    "bill",
    "warranty_card",
    "receipt",
    "product_manual",
    "service_document",
)

MAX_CONFIDENCE = 0.95
CONFIDENCE_BIAS = 0.3
NO_SIGNAL_CONFIDENCE = 0.1


def _has_any(text_lower: str, *phrases: str) -> bool:
    return any(phrase in text_lower for phrase in phrases)


def score_document_types(text: str) -> dict[DocumentType, int]:
    """Return the keyword score of every document type, in bucket order."""
    text_lower = _require_text(text).lower()
    scores: dict[DocumentType, int] = dict.fromkeys(DOCUMENT_TYPES, 0)

    if "invoice" in text_lower:
        scores["invoice"] += 3
    if "invoice no" in text_lower:
        scores["invoice"] += 2
    if _has_any(text_lower, "bill to", "ship to"):
        scores["invoice"] += 2
    if _has_any(text_lower, "gstin", "gst"):
        scores["invoice"] += 1

    if _has_any(text_lower, "electricity bill", "water bill"):
        scores["bill"] += 3
    if _has_any(text_lower, "consumer no", "account no"):
        scores["bill"] += 2
    if _has_any(text_lower, "due date", "payment due"):
        scores["bill"] += 1

    scores["warranty_card"] += 2 * sum(1 for kw in WARRANTY_KEYWORDS if kw in text_lower)
    if "terms and conditions" in text_lower:
        scores["warranty_card"] += 1

    if "receipt" in text_lower:
        scores["receipt"] += 3
    if "thank you" in text_lower and "visit" in text_lower:
        scores["receipt"] += 2
    if _has_any(text_lower, "cash", "card"):
        scores["receipt"] += 1

    if _has_any(text_lower, "user manual", "user guide"):
        scores["product_manual"] += 3
    if _has_any(text_lower, "instructions", "how to"):
        scores["product_manual"] += 2
    if _has_any(text_lower, "safety", "caution"):
        scores["product_manual"] += 1

    scores["service_document"] += 2 * sum(1 for kw in SERVICE_KEYWORDS if kw in text_lower)
    if _has_any(text_lower, "technician", "engineer"):
        scores["service_document"] += 1

    return scores


def classify_document(text: str) -> DocumentClassification:
    """
    Classify a document from its OCR text.

    The confidence is a heuristic surrogate, not a probability:
    min(0.95, max_score / total_score + 0.3), or 0.1 when nothing scored.
    """
    scores = score_document_types(text)

    detected: DocumentType = "unknown"
    max_score = 0
    for document_type, score in scores.items():
        if score > max_score:
            max_score = score
            detected = document_type

    total_score = sum(scores.values())
    if total_score > 0:
        confidence = min(MAX_CONFIDENCE, max_score / total_score + CONFIDENCE_BIAS)
    else:
        confidence = NO_SIGNAL_CONFIDENCE

    logger.debug("Classified document as %s (confidence %.2f, scores %s)", detected, confidence, scores)
    return DocumentClassification(type=detected, confidence=confidence)
