"""CV extraction pipeline.

Combines text acquisition, contact fields, skill matching and the two
section parsers into one ``ExtractedRecord`` per document.
"""
from __future__ import annotations

import asyncio
import logging
import os
import threading
from dataclasses import dataclass
from typing import Sequence

from extractors.education import parse_education
from extractors.experience import parse_experience
from extractors.fields import (
    extract_email,
    extract_linkedin_url,
    extract_name,
    extract_phone_number,
)
from extractors.skills import extract_skills
from talent.config import settings
from talent.models import ExtractedRecord
from talent.parsers import DocumentSource, acquire_text
from talent.pipelines.normalization import normalize_unicode
from talent.pipelines.sections import (
    EDUCATION,
    EXPERIENCE,
    HeadingVocabulary,
    segment_section,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionOutcome:
    """Result of one document in a batch: a record or the error it raised."""
    source: DocumentSource
    record: ExtractedRecord | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.record is not None


def parse_text(raw_text: str, *, headings: HeadingVocabulary | None = None) -> ExtractedRecord:
    """Build a record from already-acquired text. Never raises on content."""
    text = normalize_unicode(raw_text)
    vocabulary = headings or HeadingVocabulary.from_settings()

    experience = parse_experience(segment_section(text, EXPERIENCE, vocabulary))
    education = parse_education(segment_section(text, EDUCATION, vocabulary))

    record = ExtractedRecord(
        name=extract_name(text),
        email=extract_email(text),
        phone_number=extract_phone_number(text),
        linkedin_url=extract_linkedin_url(text),
        skills=extract_skills(text),
        experience=tuple(experience),
        education=tuple(education),
    )

    logger.info(
        f"Extracted {len(record.skills)} skills, {len(record.experience)} experience "
        f"and {len(record.education)} education entries"
    )
    return record


def extract_record(
    source: DocumentSource,
    *,
    headings: HeadingVocabulary | None = None,
    cancel_event: threading.Event | None = None,
) -> ExtractedRecord:
    """Run the full pipeline on one PDF.

    Args:
        source: Path, bytes or binary file object
        headings: Section vocabulary; defaults to the configured one
        cancel_event: Stops OCR between pages when set

    Returns:
        ExtractedRecord for the document

    Raises:
        ExtractionFailure: If no text could be recovered
        ExtractionCancelled: If ``cancel_event`` stopped OCR; no partial record
            is built
    """
    acquired = acquire_text(source, cancel_event=cancel_event)
    logger.debug(f"Acquired {len(acquired.text)} chars via {acquired.method}")
    return parse_text(acquired.text, headings=headings)


async def extract_record_async(
    source: DocumentSource,
    *,
    headings: HeadingVocabulary | None = None,
) -> ExtractedRecord:
    """Run ``extract_record`` in a worker thread.

    Cancelling the awaiting task signals the worker, which stops OCR at the
    next page boundary. The worker then raises ``ExtractionCancelled``, which
    nobody awaits any more.
    """
    cancel_event = threading.Event()
    try:
        return await asyncio.to_thread(
            extract_record,
            source,
            headings=headings,
            cancel_event=cancel_event,
        )
    except asyncio.CancelledError:
        cancel_event.set()
        raise


def _describe(source: DocumentSource) -> str:
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return f"<{type(source).__name__}>"


async def extract_many(
    sources: Sequence[DocumentSource],
    *,
    concurrency: int | None = None,
    timeout: float | None = None,
    headings: HeadingVocabulary | None = None,
) -> list[ExtractionOutcome]:
    """Extract several documents concurrently.

    Args:
        sources: Documents to process
        concurrency: Maximum documents in flight (defaults to settings)
        timeout: Per-document limit in seconds; None waits indefinitely

    Returns:
        One ExtractionOutcome per source, in input order

    Raises:
        ValueError: If ``concurrency`` is less than 1
    """
    limit = concurrency if concurrency is not None else settings.pipeline.max_concurrency
    if limit < 1:
        raise ValueError(f"concurrency must be at least 1, got {limit}")
    per_doc_timeout = timeout if timeout is not None else settings.pipeline.timeout_seconds
    semaphore = asyncio.Semaphore(limit)

    async def run_one(source: DocumentSource) -> ExtractionOutcome:
        async with semaphore:
            try:
                record = await asyncio.wait_for(
                    extract_record_async(source, headings=headings),
                    timeout=per_doc_timeout,
                )
                return ExtractionOutcome(source=source, record=record)
            except asyncio.TimeoutError as e:
                logger.error(f"Extraction timed out after {per_doc_timeout}s: {_describe(source)}")
                return ExtractionOutcome(source=source, error=e)
            except Exception as e:
                logger.error(f"Extraction failed for {_describe(source)}: {e}")
                return ExtractionOutcome(source=source, error=e)

    logger.info(f"Extracting {len(sources)} documents with concurrency {limit}")
    return list(await asyncio.gather(*(run_one(s) for s in sources)))
