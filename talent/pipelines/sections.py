"""Section segmentation by heading markers.

A section is the run of lines strictly between its heading and the next
heading of any other group. Missing headings are not errors: the caller just
gets an empty segment.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from rapidfuzz import fuzz, process

from talent.config import SectionSettings, settings
from talent.pipelines.normalization import normalize_heading, split_lines

logger = logging.getLogger(__name__)

EXPERIENCE = "experience"
EDUCATION = "education"
SKILLS = "skills"
CERTIFICATES = "certificates"
OTHER = "other"

HEADING_GROUPS = (EXPERIENCE, EDUCATION, SKILLS, CERTIFICATES, OTHER)

# Phrases shorter than this fuzzy-match only lines of equal length
MIN_FREE_FUZZY_LENGTH = 12


@dataclass(frozen=True)
class HeadingVocabulary:
    """Heading phrases per group plus the fuzzy tolerance used to match them."""
    groups: Mapping[str, tuple[str, ...]]
    fuzzy_threshold: int = 90

    @classmethod
    def from_settings(cls, section_settings: SectionSettings | None = None) -> HeadingVocabulary:
        cfg = section_settings or settings.sections
        return cls(
            groups=MappingProxyType({g: tuple(getattr(cfg, g)) for g in HEADING_GROUPS}),
            fuzzy_threshold=cfg.fuzzy_threshold,
        )

    def markers(self, group: str) -> tuple[str, ...]:
        return self.groups.get(group, ())

    def end_markers_for(self, group: str) -> tuple[str, ...]:
        """Every heading phrase that belongs to a group other than ``group``."""
        return tuple(
            phrase
            for name, phrases in self.groups.items()
            if name != group
            for phrase in phrases
        )


def is_heading(line: str, phrases: Sequence[str], fuzzy_threshold: int = 90) -> bool:
    """True if ``line`` is one of ``phrases``, allowing small OCR distortions."""
    normalized = normalize_heading(line)
    if not normalized or not phrases:
        return False
    if normalized in phrases:
        return True
    if fuzzy_threshold >= 100:
        return False
    candidates = [
        p for p in phrases
        if len(p) >= MIN_FREE_FUZZY_LENGTH or len(p) == len(normalized)
    ]
    if not candidates:
        return False
    return process.extractOne(
        normalized,
        candidates,
        scorer=fuzz.ratio,
        score_cutoff=fuzzy_threshold,
    ) is not None


def find_section(
    lines: Iterable[str],
    start_markers: Sequence[str],
    end_markers: Sequence[str],
    *,
    fuzzy_threshold: int = 90,
) -> list[str]:
    """Return the lines between the first start heading and the next end heading.

    Both headings are excluded. Without an end heading the segment runs to
    the end of the document; without a start heading it is empty.
    """
    segment: list[str] = []
    inside = False
    for line in lines:
        if not inside:
            inside = is_heading(line, start_markers, fuzzy_threshold)
            continue
        if is_heading(line, end_markers, fuzzy_threshold):
            break
        segment.append(line)
    return segment


def segment_section(
    text: str,
    group: str,
    vocabulary: HeadingVocabulary | None = None,
) -> list[str]:
    """Segment ``text`` for one heading group, bounded by all other groups."""
    vocab = vocabulary or HeadingVocabulary.from_settings()
    segment = find_section(
        split_lines(text),
        vocab.markers(group),
        vocab.end_markers_for(group),
        fuzzy_threshold=vocab.fuzzy_threshold,
    )
    logger.debug(f"Section '{group}': {len(segment)} lines")
    return segment
