"""Structured output of the extraction pipeline.

One ``ExtractedRecord`` is built per document and handed to the caller as is;
nothing in this package mutates it afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ExperienceEntry:
    """One work-history entry."""
    company: str
    job_title: str
    date_range: str
    description: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "company": self.company,
            "jobTitle": self.job_title,
            "dateRange": self.date_range,
            "description": self.description,
        }


@dataclass(frozen=True)
class EducationEntry:
    """One education entry."""
    school: str
    degree: str
    date_range: str

    def to_dict(self) -> dict[str, str]:
        return {
            "school": self.school,
            "degree": self.degree,
            "dateRange": self.date_range,
        }


@dataclass(frozen=True)
class ExtractedRecord:
    """Everything recovered from a single CV."""
    name: str
    email: str | None = None
    phone_number: str | None = None
    linkedin_url: str | None = None
    skills: frozenset[str] = field(default_factory=frozenset)
    experience: tuple[ExperienceEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form using the keys the persistence layer expects."""
        return {
            "name": self.name,
            "email": self.email,
            "phoneNumber": self.phone_number,
            "linkedinUrl": self.linkedin_url,
            "skills": sorted(self.skills),
            "experience": [e.to_dict() for e in self.experience],
            "education": [e.to_dict() for e in self.education],
        }
