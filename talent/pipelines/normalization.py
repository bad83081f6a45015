"""Text normalization helpers for en/id CV text.

Raw text is only NFC-normalized before extraction; the stronger helpers
below are applied to individual lines where a comparison needs them.
"""
from __future__ import annotations

import re
import unicodedata

# Decoration OCR and PDF exports leave around headings
_HEADING_DECORATION = " \t:;.-–—_|•*#=~>"


def normalize_unicode(text: str) -> str:
    """Compose Unicode so visually identical text compares equal."""
    return unicodedata.normalize("NFC", text)


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace and trim."""
    return re.sub(r"\s+", " ", text).strip()


def normalize_heading(line: str) -> str:
    """Lower-case a candidate heading line and strip surrounding decoration."""
    return normalize_whitespace(line).strip(_HEADING_DECORATION).lower()


def split_lines(text: str) -> list[str]:
    """Split text into lines, dropping form feeds PDF readers emit."""
    return text.replace("\f", "\n").splitlines()
