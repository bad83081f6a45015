"""Command-line front end: extract one or more CV PDFs to JSON on stdout."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import settings
from .logging_config import setup_logging
from .pipelines.extraction import ExtractionOutcome, extract_many

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="talent-extract",
        description="Extract contact details, skills, experience and education from CV PDFs.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="PDF files to process")
    parser.add_argument(
        "--concurrency",
        type=positive_int,
        default=settings.pipeline.max_concurrency,
        help="Documents processed at the same time (default: %(default)s)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.pipeline.timeout_seconds,
        help="Per-document time limit in seconds (default: none)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL, or DEBUG when DEBUG=true)",
    )
    parser.add_argument("--compact", action="store_true", help="Print JSON on one line")
    parser.add_argument("--version", action="version", version=f"{settings.app_name} {settings.version}")
    return parser


def outcome_to_dict(outcome: ExtractionOutcome) -> dict:
    result: dict = {"file": str(outcome.source)}
    if outcome.ok:
        result["record"] = outcome.record.to_dict()
    else:
        result["error"] = str(outcome.error) or type(outcome.error).__name__
    return result


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    outcomes = asyncio.run(
        extract_many(args.files, concurrency=args.concurrency, timeout=args.timeout)
    )

    payload = [outcome_to_dict(o) for o in outcomes]
    indent = None if args.compact else 2
    print(json.dumps(payload, ensure_ascii=False, indent=indent))

    failed = sum(1 for o in outcomes if not o.ok)
    if failed:
        logger.warning(f"{failed} of {len(outcomes)} documents failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
