"""Schema-constrained metadata extraction over an uploaded document."""

import json
import time
from pathlib import Path

from docmeta.extraction.client_base import BaseExtractionClient
from docmeta.extraction.exceptions import SchemaValidationError, TransientServiceError
from docmeta.extraction.models import Metadata, UploadedFile
from docmeta.extraction.prompt_loader import load_json_schema, load_prompt
from docmeta.extraction.validator import validate_and_build
from docmeta.logging.logger import Log

DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY_SECONDS = 10.0


class MetadataExtractor:
    """Asks the remote model for document metadata and validates the answer.

    Only TransientServiceError is retried, ``max_retries`` times beyond the
    first attempt with a fixed delay; every other error propagates at once.
    """

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.0,
        max_retries: int = DEFAULT_MAX_RETRIES,
        retry_delay_seconds: float = DEFAULT_RETRY_DELAY_SECONDS,
        prompt_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, temperature)
        self._max_retries = max(0, max_retries)
        self._retry_delay_seconds = retry_delay_seconds
        self._prompt = load_prompt(prompt_path)
        self._json_schema = load_json_schema(json_schema_path)

    def extract(self, uploaded_file: UploadedFile) -> Metadata:
        """Extract validated metadata for an uploaded, fully processed file."""
        Log.debug(f"Metadata prompt:\n{self._prompt}")

        raw_response = self._generate_with_retry(uploaded_file)
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        metadata = validate_and_build(parsed, raw_response=raw_response)

        Log.info(
            f"Metadata extracted for {uploaded_file.name}: "
            f"{metadata.title!r}, {len(metadata.topics)} topics"
        )
        return metadata

    def _generate_with_retry(self, uploaded_file: UploadedFile) -> str:
        retries = 0
        while True:
            try:
                return self._client.generate_json(
                    model=self._model,
                    temperature=self._temperature,
                    prompt=self._prompt,
                    uploaded_file=uploaded_file,
                    json_schema=self._json_schema,
                )
            except TransientServiceError as exc:
                if retries >= self._max_retries:
                    Log.error(f"Service still unavailable after {retries} retries: {exc}")
                    raise
                retries += 1
                Log.warning(
                    f"Service unavailable, retrying in {self._retry_delay_seconds} seconds "
                    f"(retry {retries}/{self._max_retries})"
                )
                time.sleep(self._retry_delay_seconds)

    @staticmethod
    def _parse_json(raw: str) -> object:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()[1:]
            cleaned = "\n".join(lines).strip().removesuffix("```")

        try:
            return json.loads(cleaned, parse_constant=_reject_constant)
        except ValueError as exc:
            raise SchemaValidationError(
                f"Invalid JSON response: {exc}", raw_response=raw
            ) from exc


def _reject_constant(token: str) -> float:
    # NaN and Infinity are accepted by json.loads but are not JSON.
    raise ValueError(f"{token} is not a valid JSON value")
