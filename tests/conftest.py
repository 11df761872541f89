import io
from datetime import datetime, timezone

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from docmeta.analysis.assembler import MetadataAssembler


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Quarterly Business Review")
    c.drawString(72, 700, "Contact jane.doe@example.com before 2024-03-01.")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def report_text() -> str:
    """A short business report with headers, a list and contact details."""
    return (
        "EXECUTIVE SUMMARY\n"
        "\n"
        "This report analyzes the market and the business strategy for the coming "
        "quarter. Growth in revenue was significant and the results are excellent.\n"
        "\n"
        "Key Findings:\n"
        "- Revenue increased by 15% year over year\n"
        "- Customer satisfaction improved across all segments\n"
        "- Management planning remains a key concern\n"
        "\n"
        "Prepared by Jane Smith\n"
        "Contact: jane.smith@example.com or (555) 123-4567 before March 20, 2024.\n"
    )


@pytest.fixture()
def fixed_assembler() -> MetadataAssembler:
    """Assembler with a fixed id and clock."""
    return MetadataAssembler(
        id_factory=lambda: "doc-1",
        clock=lambda: datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc),
    )
