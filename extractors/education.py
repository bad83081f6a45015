"""Education parser: a year-range line names the school, the next line the degree."""
from __future__ import annotations

from typing import Iterable

from talent.models import EducationEntry

from .dates import YEAR_RANGE_RE, remove_span


def parse_education(lines: Iterable[str]) -> list[EducationEntry]:
    entries: list[EducationEntry] = []
    rows = [line.strip() for line in lines if line.strip()]

    i = 0
    while i < len(rows):
        match = YEAR_RANGE_RE.search(rows[i])
        if not match:
            i += 1
            continue

        school = remove_span(rows[i], match)
        degree = ""
        # A following range line starts its own entry instead of being the degree
        if i + 1 < len(rows) and not YEAR_RANGE_RE.search(rows[i + 1]):
            degree = rows[i + 1]
            i += 1
        i += 1

        if school and degree:
            entries.append(EducationEntry(school=school, degree=degree, date_range=match.group(0)))

    return entries
