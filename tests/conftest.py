import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.lib.pdfencrypt import StandardEncryption
from reportlab.pdfgen import canvas

MEDICAL_REPORT_LINES = [
    "CITY GENERAL HOSPITAL LABORATORY",
    "Patient: Jane Doe",
    "Age: 42",
    "Report Date: 2025-03-14",
    "COMPLETE BLOOD COUNT",
    "Hemoglobin: 13.5 g/dL Normal",
    "White Blood Cells: 7.2 K/uL Normal",
    "Platelets: 250 K/uL Normal",
    "LIPID PROFILE",
    "Total Cholesterol: 240 mg/dL High",
    "Physician: Dr. Alan Smith",
]


def _build_pdf(pages: list[list[str]], encrypt: StandardEncryption | None = None) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter, encrypt=encrypt)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _build_pdf([["Hello PDF World"]])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _build_pdf([["Page one content"], ["Page two content"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _build_pdf([[]])


@pytest.fixture()
def medical_report_pdf_bytes() -> bytes:
    """Generate a one-page lab report with enough text to analyze."""
    return _build_pdf([MEDICAL_REPORT_LINES])


@pytest.fixture()
def short_report_pdf_bytes() -> bytes:
    """Generate a report whose text is below the minimum analyzable length."""
    return _build_pdf([["Hemoglobin: 13.5 g/dL Normal"]])


@pytest.fixture()
def encrypted_pdf_bytes() -> bytes:
    """Generate a lab report that needs a user password to open."""
    return _build_pdf([MEDICAL_REPORT_LINES], encrypt=StandardEncryption("userpw"))


@pytest.fixture()
def truncated_pdf_bytes() -> bytes:
    """A PDF with no xref table whose only object is cut off mid-dictionary."""
    return b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog /Pages 2 0 R"
