import asyncio
import threading

import pytest

from talent import ExtractionFailure
from talent.models import EducationEntry, ExperienceEntry
from talent.pipelines import extraction
from talent.pipelines.extraction import (
    extract_many,
    extract_record,
    extract_record_async,
    parse_text,
)


def test_parse_text_builds_full_record(sample_cv_text):
    record = parse_text(sample_cv_text)

    assert record.name == "BUDI SANTOSO"
    assert record.email == "budi.santoso@gmail.com"
    assert record.phone_number == "+6281234567890"
    assert record.linkedin_url == "linkedin.com/in/budi-santoso"
    assert record.skills == frozenset(
        {"react", "node.js", "postgresql", "docker", "python", "javascript", "git", "scrum"}
    )
    assert record.experience == (
        ExperienceEntry(
            company="Acme Corp",
            job_title="Software Engineer",
            date_range="Jan 2020 – Present",
            description="• Built React dashboards\n• Maintained Docker images",
        ),
        ExperienceEntry(
            company="PT Maju Jaya",
            job_title="Backend Developer",
            date_range="Mar 2018 - Des 2019",
            description="Built payment APIs in Python.",
        ),
    )
    assert record.education == (
        EducationEntry(
            school="Universitas Indonesia",
            degree="Sarjana Ilmu Komputer",
            date_range="2014 – 2018",
        ),
    )


def test_parse_text_without_sections_is_total():
    record = parse_text("just a line of text")
    assert record.name == "just a line of text"
    assert record.email is None
    assert record.phone_number is None
    assert record.linkedin_url is None
    assert record.skills == frozenset()
    assert record.experience == ()
    assert record.education == ()


def test_record_is_immutable(sample_cv_text):
    record = parse_text(sample_cv_text)
    with pytest.raises(AttributeError):
        record.email = "other@example.com"


def test_record_to_dict_uses_collaborator_keys(sample_cv_text):
    data = parse_text(sample_cv_text).to_dict()
    assert set(data) == {
        "name", "email", "phoneNumber", "linkedinUrl", "skills", "experience", "education",
    }
    assert data["skills"] == sorted(data["skills"])
    assert data["experience"][0]["jobTitle"] == "Software Engineer"
    assert data["education"][0]["dateRange"] == "2014 – 2018"


def test_extract_record_from_pdf_bytes(stub_readers, sample_cv_text):
    ocr_calls = stub_readers(native=sample_cv_text)
    record = extract_record(b"%PDF-fake")
    assert ocr_calls == []
    assert record.email == "budi.santoso@gmail.com"
    assert len(record.experience) == 2


def test_extract_record_propagates_failure(stub_readers):
    stub_readers(native="", ocr="")
    with pytest.raises(ExtractionFailure):
        extract_record(b"")


def test_extract_record_async(stub_readers, sample_cv_text):
    stub_readers(native="short", ocr=sample_cv_text)
    record = asyncio.run(extract_record_async(b"%PDF-scanned"))
    assert record.name == "BUDI SANTOSO"


def test_extract_many_reports_each_document(stub_readers, sample_cv_text):
    def native(content):
        return sample_cv_text if content == b"good" else ""

    stub_readers(native=native, ocr="")
    outcomes = asyncio.run(extract_many([b"good", b"bad", b"good"], concurrency=2))

    assert [o.ok for o in outcomes] == [True, False, True]
    assert isinstance(outcomes[1].error, ExtractionFailure)
    assert outcomes[0].record == outcomes[2].record


def test_extract_many_timeout_cancels_worker(monkeypatch):
    events = []

    def slow_extract(source, *, headings=None, cancel_event=None):
        events.append(cancel_event)
        cancel_event.wait(5)
        return None

    monkeypatch.setattr(extraction, "extract_record", slow_extract)
    outcomes = asyncio.run(extract_many([b"slow"], timeout=0.05))

    assert not outcomes[0].ok
    assert isinstance(outcomes[0].error, asyncio.TimeoutError)
    assert isinstance(events[0], threading.Event)
    assert events[0].is_set()


def test_extract_many_rejects_zero_concurrency():
    with pytest.raises(ValueError, match="at least 1"):
        asyncio.run(extract_many([b"good"], concurrency=0))
