from abc import ABC, abstractmethod

from docmeta.conversion.exceptions import ConversionError


class BaseOfficeConverter(ABC):
    """Contract for all office-to-PDF conversion adapters."""

    @abstractmethod
    def convert(self, source_bytes: bytes, source_suffix: str = ".pptx") -> bytes:
        """Convert an office document into PDF bytes.

        Args:
            source_bytes: Raw content of the office document.
            source_suffix: File extension the converter should assume for the
                input, including the leading dot.

        Returns:
            The converted PDF content.

        Raises:
            ConversionError: on any failure. Conversion has no fallback.
        """


def ensure_pdf(data: bytes, engine: str) -> bytes:
    """Reject converter output that is empty or not a PDF."""
    if not data:
        raise ConversionError(f"{engine} produced an empty document")
    if not data.startswith(b"%PDF"):
        raise ConversionError(f"{engine} output is not a PDF document")
    return data
