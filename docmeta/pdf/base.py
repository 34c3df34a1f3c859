from abc import ABC, abstractmethod


class BasePdfSlicer(ABC):
    """Contract for all PDF page-slicing adapters."""

    @abstractmethod
    def page_count(self, pdf_bytes: bytes) -> int:
        """Return the number of pages in the document.

        Raises:
            SliceError: if the document cannot be opened.
        """

    @abstractmethod
    def first_pages(self, pdf_bytes: bytes, count: int) -> bytes:
        """Build a new document holding the first ``count`` pages, in order.

        Args:
            pdf_bytes: Raw PDF file content.
            count: Number of leading pages to keep; must not exceed the
                document's page count.

        Returns:
            The serialized new document.

        Raises:
            SliceError: if the document cannot be read or written.
        """
