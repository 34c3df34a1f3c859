from abc import ABC, abstractmethod
from pathlib import Path

from docmeta.extraction.models import UploadedFile


class BaseExtractionClient(ABC):
    """Contract for provider-specific document-understanding clients."""

    @abstractmethod
    def upload_file(
        self,
        file_path: Path,
        *,
        display_name: str,
        mime_type: str | None,
    ) -> UploadedFile:
        """Upload a file; ``mime_type=None`` leaves type detection to the provider."""

    @abstractmethod
    def get_file(self, name: str) -> UploadedFile:
        """Fetch the current state of an uploaded file by its handle name."""

    @abstractmethod
    def generate_json(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        uploaded_file: UploadedFile,
        json_schema: dict[str, object],
    ) -> str:
        """Return the schema-constrained response for ``prompt`` over the file, as text.

        Raises:
            TransientServiceError: if the provider is temporarily unavailable.
            ExtractionNetworkError: on any other transport or API failure.
        """
