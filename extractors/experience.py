"""Work-experience parser.

Turns the lines of a work-experience section into ``ExperienceEntry`` items.
Date-bearing lines that are not bullets delimit entries:

    Acme Corp Jan 2020 – Present      <- company + date range
    Software Engineer                 <- job title (next line)
    • built stuff                     <- description until the next date line

The scan is an explicit two-state machine so the "line after the date line"
and "until the next date line" rules are handled in one place.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from talent.models import ExperienceEntry

from .dates import DATE_TOKEN_RE, remove_span

BULLET_MARKERS = ("•", "▪", "◦", "●", "○", "■", "➢", "►", "✓", "·", "-", "*")


class ScanState(str, Enum):
    """Experience scanner states."""
    SCANNING = "scanning"
    INSIDE_ENTRY = "inside_entry"


def is_bullet(line: str) -> bool:
    return line.startswith(BULLET_MARKERS)


@dataclass
class _EntryBuilder:
    """Mutable accumulator for the entry currently being scanned."""
    company: str
    date_range: str
    job_title: str | None = None
    description_parts: list[str] = field(default_factory=list)

    def add_description(self, line: str) -> None:
        if is_bullet(line) or not self.description_parts:
            self.description_parts.append(line)
        else:
            self.description_parts[-1] = f"{self.description_parts[-1]} {line}"

    def finalize(self) -> ExperienceEntry | None:
        company = self.company.strip()
        job_title = (self.job_title or "").strip()
        if not company or not job_title:
            return None
        return ExperienceEntry(
            company=company,
            job_title=job_title,
            date_range=self.date_range.strip(),
            description="\n".join(self.description_parts).strip(),
        )


def parse_experience(lines: Iterable[str]) -> list[ExperienceEntry]:
    """Parse segmented work-experience lines into entries, in document order.

    Entries missing a company or a job title are dropped.
    """
    entries: list[ExperienceEntry] = []
    state = ScanState.SCANNING
    current: _EntryBuilder | None = None

    def flush() -> None:
        nonlocal current
        if current is not None:
            entry = current.finalize()
            if entry is not None:
                entries.append(entry)
            current = None

    for raw in lines:
        line = raw.strip()
        if not line:
            continue

        # Dates inside bullets belong to the description
        match = None if is_bullet(line) else DATE_TOKEN_RE.search(line)
        if match:
            flush()
            current = _EntryBuilder(
                company=remove_span(line, match),
                date_range=match.group(0),
            )
            state = ScanState.INSIDE_ENTRY
            continue

        if state is ScanState.SCANNING:
            continue

        if current.job_title is None:
            current.job_title = line
        else:
            current.add_description(line)

    flush()
    return entries
