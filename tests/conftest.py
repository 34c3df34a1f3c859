import io
import zipfile
from collections.abc import Callable

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def _pdf_with_pages(page_count: int) -> bytes:
    """Generate a PDF whose page N carries the text 'Page N content'."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for number in range(1, page_count + 1):
        c.drawString(72, 720, f"Page {number} content")
        c.showPage()
    c.save()
    return buf.getvalue()


def _zip_with_parts(*part_names: str) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as archive:
        archive.writestr("[Content_Types].xml", "<Types/>")
        for name in part_names:
            archive.writestr(name, "<xml/>")
    return buf.getvalue()


@pytest.fixture()
def make_pdf_bytes() -> Callable[[int], bytes]:
    """Factory for PDFs with a given page count."""
    return _pdf_with_pages


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _pdf_with_pages(1)


@pytest.fixture()
def long_pdf_bytes() -> bytes:
    """Generate a twelve-page PDF, above the default ten-page limit."""
    return _pdf_with_pages(12)


@pytest.fixture()
def pptx_bytes() -> bytes:
    """A ZIP laid out like a PowerPoint package (enough for content sniffing)."""
    return _zip_with_parts("ppt/presentation.xml", "ppt/slides/slide1.xml")


@pytest.fixture()
def docx_bytes() -> bytes:
    return _zip_with_parts("word/document.xml")


@pytest.fixture()
def xlsx_bytes() -> bytes:
    return _zip_with_parts("xl/workbook.xml")


@pytest.fixture()
def plain_zip_bytes() -> bytes:
    return _zip_with_parts("readme.txt")
