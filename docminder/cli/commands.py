"""Document command handlers used by the unified CLI."""

import argparse
import json
import sys
from dataclasses import asdict
from datetime import date
from pathlib import Path

from docminder.extraction import (
    InvalidInputError,
    extraction_to_dict,
    format_extraction,
    parse_document,
    reminder_draft_to_dict,
)
from docminder.runtime import get_logger, load_settings

logger = get_logger(__name__)


def _read_text(source: str) -> str:
    """Read OCR text from a file path, or stdin when source is '-'."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def cmd_extract(args: argparse.Namespace) -> int:
    """Extract fields and reminder suggestions from an OCR text file."""
    try:
        text = _read_text(args.source)
    except OSError as exc:
        print(f"Error: cannot read {args.source}: {exc.strerror or exc}")
        return 1

    file_name = args.file_name or (None if args.source == "-" else Path(args.source).name)
    try:
        extraction = parse_document(text, file_name=file_name)
    except InvalidInputError as exc:
        print(f"Error: {exc}")
        return 1

    if args.json:
        print(json.dumps(extraction_to_dict(extraction, include_raw_text=False), indent=2))
    else:
        print(format_extraction(extraction))
    return 0


def cmd_scan(args: argparse.Namespace) -> int:
    """Send a document image to the OCR service and extract it."""
    from docminder.application.scan import DocumentScanRequest, run_document_scan

    result = run_document_scan(
        DocumentScanRequest(
            image_path=Path(args.image),
            ocr_url=args.ocr_url or load_settings().ocr_url,
            preprocess=not args.no_preprocess,
        )
    )

    if result.status in ("file_not_found", "invalid_image"):
        logger.error("%s", result.error)
        print(f"Error: {result.error}")
        return 1

    if result.status == "ocr_unavailable":
        logger.error("%s", result.error)
        print(f"OCR service unavailable: {result.error}")
        print("Make sure the OCR service is running before scanning documents.")
        return 1

    if result.status == "no_text" or result.extraction is None:
        print(f"Scan failed: {result.error}")
        return 1

    if args.json:
        payload = extraction_to_dict(result.extraction, include_raw_text=False)
        payload["ocr_confidence"] = result.ocr_confidence
        print(json.dumps(payload, indent=2))
    else:
        print(f"OCR confidence: {result.ocr_confidence:.2f}")
        print(format_extraction(result.extraction))
    return 0


def cmd_reminders(args: argparse.Namespace) -> int:
    """Show the reminder drafts an OCR text file would create."""
    from docminder.application.reminder_drafts import build_reminder_drafts, due_for_notification

    try:
        text = _read_text(args.source)
        today = date.fromisoformat(args.today) if args.today else date.today()
    except OSError as exc:
        print(f"Error: cannot read {args.source}: {exc.strerror or exc}")
        return 1
    except ValueError:
        print(f"Error: --today must be YYYY-MM-DD, got {args.today!r}")
        return 1

    drafts = build_reminder_drafts(parse_document(text).reminders)
    if args.json:
        print(json.dumps([reminder_draft_to_dict(draft) for draft in drafts], indent=2))
        return 0

    if not drafts:
        print("No reminders.")
        return 0

    for draft in drafts:
        marker = "NOTIFY" if due_for_notification(draft, today) else "later"
        print(
            f"{draft.reminder_date.isoformat()}  [{draft.priority}] {draft.title} "
            f"(notify {draft.notify_before_days}d before; {marker})"
        )
    return 0


def cmd_quality(args: argparse.Namespace) -> int:
    """Score a document image for OCR and suggest preprocessing steps."""
    from docminder.ocr.image_helpers import InvalidImageError, analyze_image_quality

    try:
        report = analyze_image_quality(Path(args.image).read_bytes())
    except OSError as exc:
        print(f"Error: cannot read {args.image}: {exc.strerror or exc}")
        return 1
    except InvalidImageError as exc:
        print(f"Error: {exc}")
        return 1

    if args.json:
        print(json.dumps(asdict(report), indent=2))
        return 0

    print(f"Quality: {report.quality}")
    print(f"  contrast   {report.contrast:.2f}")
    print(f"  sharpness  {report.sharpness:.2f}")
    print(f"  noise      {report.noise:.2f}")
    for recommendation in report.recommendations:
        print(f"- {recommendation}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI server for extraction requests."""
    import uvicorn

    from docminder.runtime import server

    print(f"Starting extraction server on {args.host}:{args.port}")
    print(f"Endpoints: http://{args.host}:{args.port}/extract | /scan | /health")
    print("Press Ctrl+C to stop")

    uvicorn.run(server.app, host=args.host, port=args.port)
    return 0
