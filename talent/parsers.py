"""PDF text acquisition: embedded text first, OCR fallback.

Native extraction goes through pdfplumber (pypdf as a second reader); when
that yields too little text the pages are rendered with pdf2image and run
through Tesseract with both recognition languages at once.
"""
from __future__ import annotations

import io
import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union

import pdfplumber
import pytesseract
from pdf2image import convert_from_bytes, pdfinfo_from_bytes
from PIL import Image
from pypdf import PdfReader

from .config import settings

logger = logging.getLogger(__name__)

DocumentSource = Union[str, os.PathLike, bytes, bytearray, BinaryIO]

NO_TEXT_REASON = "no text recoverable"


class ExtractionFailure(Exception):
    """Raised when neither native extraction nor OCR recovers any text."""

    def __init__(self, reason: str = NO_TEXT_REASON) -> None:
        super().__init__(reason)
        self.reason = reason


class ExtractionCancelled(Exception):
    """Raised when OCR is stopped through its cancel event before the last page."""

    def __init__(self, pages_done: int = 0, page_count: int = 0) -> None:
        super().__init__(f"cancelled after {pages_done} of {page_count} pages")
        self.pages_done = pages_done
        self.page_count = page_count


@dataclass(frozen=True)
class AcquiredText:
    """Raw text of a document and how it was obtained."""
    text: str
    method: str  # native | ocr
    page_count: int = 0


def read_document(source: DocumentSource) -> bytes:
    """Load the document bytes from a path, a buffer or a binary file object.

    Unreadable paths produce empty content, which acquisition then reports
    as ``ExtractionFailure``.
    """
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if isinstance(source, (str, os.PathLike)):
        try:
            return Path(source).read_bytes()
        except OSError as e:
            logger.error(f"Cannot read document {source}: {e}")
            return b""
    if hasattr(source, "seek"):
        source.seek(0)
    return source.read()


def extract_text_from_pdf_native(file_obj: BinaryIO) -> tuple[str, int]:
    """Extract embedded text from a PDF.

    Args:
        file_obj: Binary file object positioned anywhere

    Returns:
        Tuple of (extracted_text, page_count); ("", 0) when both readers fail
    """
    try:
        file_obj.seek(0)
        with pdfplumber.open(file_obj) as pdf:
            text_parts = []
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text_parts.append(page_text)
            return "\n\n".join(text_parts), len(pdf.pages)

    except Exception as e:
        logger.warning(f"pdfplumber extraction failed: {e}, trying pypdf")

        try:
            file_obj.seek(0)
            reader = PdfReader(file_obj)
            text_parts = []
            for page in reader.pages:
                page_text = page.extract_text()
                if page_text:
                    text_parts.append(page_text)
            return "\n\n".join(text_parts), len(reader.pages)

        except Exception as e2:
            logger.error(f"pypdf extraction also failed: {e2}")
            return "", 0


def _ocr_image(image: Image.Image) -> str:
    return pytesseract.image_to_string(
        image.convert("L"),
        lang=settings.ocr.tesseract_lang,
    )


def extract_text_from_pdf_ocr(
    file_content: bytes,
    *,
    cancel_event: threading.Event | None = None,
) -> str:
    """Extract text from a PDF by rendering each page and running Tesseract.

    Pages are rendered one at a time so that ``cancel_event`` can stop the
    work between pages.

    Args:
        file_content: PDF file content as bytes
        cancel_event: When set, rendering stops before the next page

    Returns:
        Recognised text of all pages, "" if the PDF cannot be rendered

    Raises:
        ExtractionCancelled: If ``cancel_event`` is set before the last page;
            pages read so far are discarded
    """
    if settings.ocr.tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = settings.ocr.tesseract_cmd

    try:
        info = pdfinfo_from_bytes(file_content, poppler_path=settings.ocr.poppler_path)
        page_count = int(info.get("Pages", 0))
    except Exception as e:
        logger.error(f"Cannot render PDF for OCR: {e}")
        return ""

    logger.info(f"Running OCR ({settings.ocr.tesseract_lang}) on {page_count} pages")

    text_parts = []
    for page_no in range(1, page_count + 1):
        if cancel_event is not None and cancel_event.is_set():
            logger.info(f"OCR cancelled after {page_no - 1} of {page_count} pages")
            raise ExtractionCancelled(page_no - 1, page_count)
        try:
            images = convert_from_bytes(
                file_content,
                dpi=settings.ocr.dpi,
                first_page=page_no,
                last_page=page_no,
                poppler_path=settings.ocr.poppler_path,
            )
            for image in images:
                page_text = _ocr_image(image)
                if page_text.strip():
                    text_parts.append(page_text)
        except Exception as e:
            logger.error(f"OCR failed for page {page_no}: {e}")
            continue

    text = "\n\n".join(text_parts)
    logger.info(f"OCR completed. Extracted {len(text)} chars")
    return text


def acquire_text(
    source: DocumentSource,
    *,
    cancel_event: threading.Event | None = None,
) -> AcquiredText:
    """Produce the raw text of a PDF, falling back to OCR when needed.

    Args:
        source: Path, bytes or binary file object of the PDF
        cancel_event: Forwarded to the OCR step

    Returns:
        AcquiredText with the text and the path that produced it

    Raises:
        ExtractionFailure: If neither path yields any text
        ExtractionCancelled: If OCR was cancelled through ``cancel_event``
    """
    content = read_document(source)
    text, page_count = extract_text_from_pdf_native(io.BytesIO(content))
    method = "native"

    if len(text.strip()) < settings.ocr.min_native_chars:
        logger.info(
            f"Embedded text too short ({len(text.strip())} chars), falling back to OCR"
        )
        text_ocr = extract_text_from_pdf_ocr(content, cancel_event=cancel_event)
        if text_ocr.strip():
            text = text_ocr
            method = "ocr"
    else:
        logger.info(f"Embedded text extraction succeeded ({len(text)} chars)")

    if not text.strip():
        raise ExtractionFailure(NO_TEXT_REASON)

    return AcquiredText(text=text, method=method, page_count=page_count)
