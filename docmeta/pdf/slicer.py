"""Bounds oversized PDFs to a maximum page count.

Slicing is fail-soft: when the document cannot be read or rewritten the
original bytes are returned unchanged, so one malformed PDF in a batch is
uploaded whole instead of aborting its extraction.
"""

from docmeta.logging.logger import Log
from docmeta.pdf.base import BasePdfSlicer
from docmeta.pdf.exceptions import SliceError

DEFAULT_MAX_PAGES = 10


class PageSlicer:
    """Keeps the first N pages of a PDF using a library adapter."""

    def __init__(self, adapter: BasePdfSlicer, max_pages: int = DEFAULT_MAX_PAGES) -> None:
        self._adapter = adapter
        self._max_pages = self._check_limit(max_pages)

    @property
    def max_pages(self) -> int:
        return self._max_pages

    def slice(self, pdf_bytes: bytes, max_pages: int | None = None) -> bytes:
        """Return ``pdf_bytes`` limited to the first ``max_pages`` pages.

        A document already within the limit is returned as the same object,
        without re-encoding.
        """
        limit = self._max_pages if max_pages is None else self._check_limit(max_pages)
        try:
            total_pages = self._adapter.page_count(pdf_bytes)
            Log.info(
                f"Original PDF has {total_pages} pages, "
                f"slicing to first {min(limit, total_pages)} pages"
            )
            if total_pages <= limit:
                Log.info("PDF already within page limit, keeping original")
                return pdf_bytes
            sliced = self._adapter.first_pages(pdf_bytes, limit)
        except SliceError as exc:
            Log.warning(f"Failed to slice PDF, returning original as fallback: {exc}")
            return pdf_bytes
        Log.info(f"PDF sliced successfully to {limit} pages")
        return sliced

    @staticmethod
    def _check_limit(max_pages: int) -> int:
        if max_pages < 1:
            raise ValueError(f"max_pages must be positive, got {max_pages}")
        return max_pages
