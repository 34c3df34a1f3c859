from pathlib import Path
from typing import ClassVar

import httpx
import openai
from openai.types import FileObject

from docmeta.extraction.client_base import BaseExtractionClient
from docmeta.extraction.exceptions import (
    ExtractionError,
    ExtractionNetworkError,
    TransientServiceError,
)
from docmeta.extraction.models import (
    FILE_STATE_ACTIVE,
    FILE_STATE_FAILED,
    FILE_STATE_PROCESSING,
    UploadedFile,
)

SERVICE_UNAVAILABLE = 503


class OpenAIClientAdapter(BaseExtractionClient):
    """Extraction client built on the OpenAI Files and Responses APIs."""

    STATES: ClassVar[dict[str, str]] = {
        "uploaded": FILE_STATE_PROCESSING,
        "processed": FILE_STATE_ACTIVE,
        "error": FILE_STATE_FAILED,
    }

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        # Retries are owned by MetadataExtractor, not the SDK.
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def upload_file(
        self,
        file_path: Path,
        *,
        display_name: str,
        mime_type: str | None,
    ) -> UploadedFile:
        try:
            with file_path.open("rb") as fh:
                payload = (display_name, fh, mime_type) if mime_type else (display_name, fh)
                created = self._client.files.create(file=payload, purpose="user_data")
        except (openai.APIError, httpx.HTTPError) as exc:
            raise self._translate(exc, "upload") from exc
        return self._to_uploaded_file(created, mime_type or "")

    def get_file(self, name: str) -> UploadedFile:
        try:
            current = self._client.files.retrieve(name)
        except (openai.APIError, httpx.HTTPError) as exc:
            raise self._translate(exc, "status check") from exc
        return self._to_uploaded_file(current, "")

    def generate_json(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        uploaded_file: UploadedFile,
        json_schema: dict[str, object],
    ) -> str:
        try:
            response = self._client.responses.create(
                model=model,
                temperature=temperature,
                input=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "input_text", "text": prompt},
                            {"type": "input_file", "file_id": uploaded_file.name},
                        ],
                    }
                ],
                text={
                    "format": {
                        "type": "json_schema",
                        "name": "document_metadata",
                        "strict": True,
                        "schema": json_schema,
                    }
                },
            )
        except (openai.APIError, httpx.HTTPError) as exc:
            raise self._translate(exc, "generation") from exc

        content = response.output_text
        if not content:
            raise ExtractionError("AI returned empty response")
        return content

    @staticmethod
    def _translate(exc: Exception, action: str) -> ExtractionError:
        if isinstance(exc, openai.APIStatusError) and exc.status_code == SERVICE_UNAVAILABLE:
            return TransientServiceError(f"AI provider unavailable during {action}: {exc}")
        if isinstance(exc, openai.APIStatusError):
            return ExtractionNetworkError(f"AI provider API error during {action}: {exc}")
        return ExtractionNetworkError(f"AI provider network error during {action}: {exc}")

    @classmethod
    def _to_uploaded_file(cls, file: FileObject, mime_type: str) -> UploadedFile:
        status = file.status or "processed"
        return UploadedFile(
            name=file.id,
            uri=file.id,
            mime_type=mime_type,
            state=cls.STATES.get(status, FILE_STATE_ACTIVE),
        )
