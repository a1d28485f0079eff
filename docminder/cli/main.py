#!/usr/bin/env python3

import argparse
import sys
from collections.abc import Sequence

from docminder.cli import commands
from docminder.runtime import ConfigError, set_log_level


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Extract dates and reminders from scanned documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  extract <text-file|->      Extract fields from OCR text
  scan <image>               OCR a document image, then extract
  reminders <text-file|->    Show reminder drafts for OCR text
  quality <image>            Score an image for OCR
  serve [--host] [--port]    Start the extraction HTTP server

Environment:
  DOCMINDER_LOG_LEVEL, DOCMINDER_OCR_URL, DOCMINDER_CONFIG
""",
    )

    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Override DOCMINDER_LOG_LEVEL for this run",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    extract_parser = subparsers.add_parser("extract", help="Extract fields from OCR text")
    extract_parser.add_argument("source", help="OCR text file, or - for stdin")
    extract_parser.add_argument("--json", action="store_true", help="Print JSON instead of a summary")
    extract_parser.add_argument("--file-name", default=None, help="Source file name used as a title fallback")

    scan_parser = subparsers.add_parser("scan", help="OCR a document image, then extract")
    scan_parser.add_argument("image", help="Path to document image")
    scan_parser.add_argument("--ocr-url", default=None, help="OCR service URL (default: DOCMINDER_OCR_URL)")
    scan_parser.add_argument("--json", action="store_true", help="Print JSON instead of a summary")
    scan_parser.add_argument("--no-preprocess", action="store_true", help="Upload the image unchanged")

    reminders_parser = subparsers.add_parser("reminders", help="Show reminder drafts for OCR text")
    reminders_parser.add_argument("source", help="OCR text file, or - for stdin")
    reminders_parser.add_argument("--today", default=None, help="Reference date YYYY-MM-DD (default: today)")
    reminders_parser.add_argument("--json", action="store_true", help="Print JSON")

    quality_parser = subparsers.add_parser("quality", help="Score a document image for OCR")
    quality_parser.add_argument("image", help="Path to document image")
    quality_parser.add_argument("--json", action="store_true", help="Print JSON")

    serve_parser = subparsers.add_parser("serve", help="Start the extraction HTTP server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=8080, help="Port to bind to (default: 8080)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.log_level:
        set_log_level(args.log_level)

    handlers = {
        "extract": commands.cmd_extract,
        "scan": commands.cmd_scan,
        "reminders": commands.cmd_reminders,
        "quality": commands.cmd_quality,
        "serve": commands.cmd_serve,
    }
    try:
        return handlers[args.command](args)
    except ConfigError as exc:
        print(f"Config error: {exc}")
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
