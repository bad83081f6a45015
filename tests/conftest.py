import io
import sys
from pathlib import Path

import pytest
from pypdf import PdfWriter


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from talent import parsers  # noqa: E402


SAMPLE_CV = """BUDI SANTOSO
Jakarta | budi.santoso@gmail.com | +62 812-3456-7890
linkedin.com/in/budi-santoso

Ringkasan
Software engineer berpengalaman dengan ReactJS, Node.js dan PostgreSQL.

WORK EXPERIENCE
Acme Corp Jan 2020 – Present
Software Engineer
• Built React dashboards
• Maintained Docker images
PT Maju Jaya Mar 2018 - Des 2019
Backend Developer
Built payment APIs in Python.

EDUCATION
Universitas Indonesia 2014 – 2018
Sarjana Ilmu Komputer

SKILLS
Python, JavaScript, Git, Scrum
"""


@pytest.fixture
def sample_cv_text() -> str:
    return SAMPLE_CV


@pytest.fixture
def blank_pdf_bytes() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=595, height=842)
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


@pytest.fixture
def stub_readers(monkeypatch):
    """Replace both text readers; returns the list of OCR calls made.

    ``native`` and ``ocr`` are either strings or callables taking the
    document bytes.
    """
    ocr_calls = []

    def _install(native="", ocr=""):
        def fake_native(file_obj):
            content = file_obj.read()
            text = native(content) if callable(native) else native
            return text, 1

        def fake_ocr(content, *, cancel_event=None):
            ocr_calls.append(content)
            return ocr(content) if callable(ocr) else ocr

        monkeypatch.setattr(parsers, "extract_text_from_pdf_native", fake_native)
        monkeypatch.setattr(parsers, "extract_text_from_pdf_ocr", fake_ocr)
        return ocr_calls

    return _install
