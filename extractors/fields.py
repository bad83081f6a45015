"""Contact field heuristics over raw CV text.

Every extractor is total: a field that cannot be found comes back as None
(or the name sentinel), never as an exception.
"""
from __future__ import annotations

import re

NAME_NOT_FOUND = "Nama Tidak Ditemukan"

EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

# Indonesian mobile numbers: +62/62/0, then 8, operator digit, subscriber digits
PHONE_RE = re.compile(r"(?:\+62|62|0)8[1-9][0-9]{7,10}")
_PHONE_NOISE_RE = re.compile(r"[\s()\-]")

LINKEDIN_RE = re.compile(
    r"(?:https?://)?(?:[a-z]{2,3}\.)?linkedin\.com/in/[A-Za-z0-9_%-]+/?",
    re.IGNORECASE,
)

# Header-style name: 5-30 chars of capitals, spaces and name punctuation
UPPERCASE_NAME_RE = re.compile(r"^[A-Z][A-Z .,'-]{3,28}[A-Z.]$")


def extract_email(text: str) -> str | None:
    match = EMAIL_RE.search(text)
    return match.group(0) if match else None


def extract_phone_number(text: str) -> str | None:
    """First Indonesian mobile number, with separators removed."""
    match = PHONE_RE.search(_PHONE_NOISE_RE.sub("", text))
    return match.group(0) if match else None


def extract_linkedin_url(text: str) -> str | None:
    match = LINKEDIN_RE.search(text)
    return match.group(0) if match else None


def extract_name(text: str) -> str:
    """Best-effort candidate name.

    Prefers the first line styled as an all-caps header, then the first
    non-empty line, then ``NAME_NOT_FOUND``. No confidence is attached;
    on unusual layouts this can return a heading or other noise.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    for line in lines:
        if UPPERCASE_NAME_RE.match(line):
            return line
    return lines[0] if lines else NAME_NOT_FOUND
