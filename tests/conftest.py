import io

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from docintel.ocr.models import DocumentFile

SAFETY_NOTICE = (
    "URGENT: Platform 3 signal failure reported. Safety inspection required "
    "immediately. Contact Engineering department by 2024-03-01."
)


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 760, "Track maintenance bulletin for Aluva Depot")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 760, "Page one: platform inspection schedule")
    c.showPage()
    c.drawString(72, 760, "Page two: signal maintenance log")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def safety_notice_file() -> DocumentFile:
    return DocumentFile(
        name="signal-failure.txt",
        content=SAFETY_NOTICE.encode("utf-8"),
        mime_type="text/plain",
    )
