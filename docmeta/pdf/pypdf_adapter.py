import io

from pypdf import PdfReader, PdfWriter

from docmeta.pdf.base import BasePdfSlicer
from docmeta.pdf.exceptions import SliceError


class PyPdfAdapter(BasePdfSlicer):
    """Slices PDF pages using pypdf."""

    def page_count(self, pdf_bytes: bytes) -> int:
        try:
            return len(PdfReader(io.BytesIO(pdf_bytes)).pages)
        except Exception as exc:
            raise SliceError(f"pypdf could not open document: {exc}") from exc

    def first_pages(self, pdf_bytes: bytes, count: int) -> bytes:
        try:
            reader = PdfReader(io.BytesIO(pdf_bytes))
            writer = PdfWriter()
            for index in range(count):
                writer.add_page(reader.pages[index])
            buf = io.BytesIO()
            writer.write(buf)
            return buf.getvalue()
        except Exception as exc:
            raise SliceError(f"pypdf slicing failed: {exc}") from exc
