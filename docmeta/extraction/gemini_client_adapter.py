from pathlib import Path

import httpx
from google import genai
from google.genai import errors, types

from docmeta.extraction.client_base import BaseExtractionClient
from docmeta.extraction.exceptions import (
    ExtractionError,
    ExtractionNetworkError,
    TransientServiceError,
)
from docmeta.extraction.models import FILE_STATE_UNSPECIFIED, UploadedFile

SERVICE_UNAVAILABLE = 503


class GeminiClientAdapter(BaseExtractionClient):
    """Extraction client built on the Gemini Files and generate_content APIs."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        client: genai.Client | None = None,
    ) -> None:
        self._client = client or genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=timeout_seconds * 1000),
        )

    def upload_file(
        self,
        file_path: Path,
        *,
        display_name: str,
        mime_type: str | None,
    ) -> UploadedFile:
        config = types.UploadFileConfig(display_name=display_name, mime_type=mime_type)
        try:
            uploaded = self._client.files.upload(file=file_path, config=config)
        except ValueError as exc:
            # Raised by the SDK when no mime_type is given and none can be guessed.
            raise ExtractionError(f"Gemini upload rejected {display_name}: {exc}") from exc
        except (errors.APIError, httpx.HTTPError) as exc:
            raise self._translate(exc, "upload") from exc
        return self._to_uploaded_file(uploaded)

    def get_file(self, name: str) -> UploadedFile:
        try:
            current = self._client.files.get(name=name)
        except (errors.APIError, httpx.HTTPError) as exc:
            raise self._translate(exc, "status check") from exc
        return self._to_uploaded_file(current)

    def generate_json(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        uploaded_file: UploadedFile,
        json_schema: dict[str, object],
    ) -> str:
        contents = [
            types.Content(
                role="user",
                parts=[
                    types.Part.from_text(text=prompt),
                    types.Part.from_uri(
                        file_uri=uploaded_file.uri,
                        mime_type=uploaded_file.mime_type or None,
                    ),
                ],
            )
        ]
        config = types.GenerateContentConfig(
            temperature=temperature,
            response_mime_type="application/json",
            response_json_schema=json_schema,
            thinking_config=types.ThinkingConfig(thinking_budget=0),
        )
        try:
            response = self._client.models.generate_content(
                model=model,
                contents=contents,
                config=config,
            )
        except (errors.APIError, httpx.HTTPError) as exc:
            raise self._translate(exc, "generation") from exc

        text = response.text
        if not text:
            raise ExtractionError("Gemini returned empty response")
        return text

    @staticmethod
    def _translate(exc: Exception, action: str) -> ExtractionError:
        if isinstance(exc, errors.APIError):
            if exc.code == SERVICE_UNAVAILABLE:
                return TransientServiceError(f"Gemini unavailable during {action}: {exc}")
            return ExtractionNetworkError(f"Gemini API error during {action}: {exc}")
        return ExtractionNetworkError(f"Gemini network error during {action}: {exc}")

    @staticmethod
    def _to_uploaded_file(file: types.File) -> UploadedFile:
        state = file.state.value if file.state is not None else FILE_STATE_UNSPECIFIED
        return UploadedFile(
            name=file.name or "",
            uri=file.uri or "",
            mime_type=file.mime_type or "",
            state=state,
        )
