"""Date tokens that anchor experience and education entries (en/id)."""
from __future__ import annotations

import re

MONTH = (
    r"(?:jan(?:uary|uari)?|feb(?:ruary|ruari)?|mar(?:ch|et)?|apr(?:il)?|"
    r"may|mei|jun(?:e|i)?|jul(?:y|i)?|aug(?:ust)?|agu(?:stus)?|agt|"
    r"sep(?:t(?:ember)?)?|oct(?:ober)?|okt(?:ober)?|nov(?:ember)?|"
    r"dec(?:ember)?|des(?:ember)?)"
)
PRESENT = r"(?:present|now|current|currently|sekarang|saat\s+ini|kini)"
YEAR = r"(?:19|20)\d{2}"
DASH = r"\s*(?:--|[-–—]|\b(?:to|until|s/d|sampai|hingga)\b)\s*"

MONTH_YEAR = rf"\b{MONTH}\.?,?\s+{YEAR}\b"
RANGE_END = rf"(?:{MONTH_YEAR}|\b{YEAR}\b|\b{PRESENT}\b)"

# "Jan 2020 – Present", "2019 - 2021", "Mar – Des 2020", or a lone "Jan 2020"
DATE_TOKEN_RE = re.compile(
    rf"(?:{MONTH_YEAR}|\b{YEAR}\b|\b{MONTH}\.?){DASH}{RANGE_END}|{MONTH_YEAR}",
    re.IGNORECASE,
)

# Both ends must carry a year, except an open "Present" end
YEAR_RANGE_RE = re.compile(
    rf"(?:{MONTH_YEAR}|\b{YEAR}\b){DASH}{RANGE_END}",
    re.IGNORECASE,
)

_EMPTY_BRACKETS_RE = re.compile(r"\(\s*\)|\[\s*\]")
_DANGLING = " \t|,;:-–—@·•"


def remove_span(line: str, match: re.Match) -> str:
    """Cut a matched date out of ``line`` and tidy the separators left behind."""
    rest = line[:match.start()] + " " + line[match.end():]
    rest = _EMPTY_BRACKETS_RE.sub(" ", rest)
    return re.sub(r"\s+", " ", rest).strip(_DANGLING)
