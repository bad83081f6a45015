"""CV extraction core: text acquisition, heuristics and the record pipeline.

Callers hand in one PDF and get back one ``ExtractedRecord``; persistence of
that record is left to the caller.
"""
from .models import EducationEntry, ExperienceEntry, ExtractedRecord
from .parsers import ExtractionCancelled, ExtractionFailure

__all__ = [
    "EducationEntry",
    "ExperienceEntry",
    "ExtractedRecord",
    "ExtractionCancelled",
    "ExtractionFailure",
]
