from abc import ABC, abstractmethod
from pathlib import Path

from docmeta.processor.models import ProcessedFile


class BaseFileProcessor(ABC):
    """Contract for format-specific preprocessing strategies."""

    @abstractmethod
    def can_handle(self, mime_type: str) -> bool:
        """Return True if this processor accepts files of ``mime_type``."""

    @abstractmethod
    def process(self, file_path: Path) -> ProcessedFile:
        """Turn a source file into the artifact to upload.

        Raises:
            FileProcessingError: if no usable artifact can be produced.
        """
