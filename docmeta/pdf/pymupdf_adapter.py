import pymupdf

from docmeta.pdf.base import BasePdfSlicer
from docmeta.pdf.exceptions import SliceError


class PyMuPdfAdapter(BasePdfSlicer):
    """Slices PDF pages using PyMuPDF."""

    def page_count(self, pdf_bytes: bytes) -> int:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return int(doc.page_count)
        except Exception as exc:
            raise SliceError(f"pymupdf could not open document: {exc}") from exc

    def first_pages(self, pdf_bytes: bytes, count: int) -> bytes:
        try:
            with (
                pymupdf.open(stream=pdf_bytes, filetype="pdf") as source,  # type: ignore[no-untyped-call]
                pymupdf.open() as target,  # type: ignore[no-untyped-call]
            ):
                target.insert_pdf(source, from_page=0, to_page=count - 1)
                return bytes(target.tobytes(garbage=3, deflate=True))
        except Exception as exc:
            raise SliceError(f"pymupdf slicing failed: {exc}") from exc
