"""Example extraction client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseExtractionClient and register the provider in
ExtractionClientFactory.
"""

import json
from pathlib import Path
from typing import ClassVar

from docmeta.extraction.client_base import BaseExtractionClient
from docmeta.extraction.models import FILE_STATE_ACTIVE, UploadedFile


class ExampleClientAdapter(BaseExtractionClient):
    """Example adapter that accepts every upload and returns fixed metadata.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "title": "Example Document",
        "agency": None,
        "year": None,
        "topics": [],
    }

    def __init__(self) -> None:
        self._files: dict[str, UploadedFile] = {}

    def upload_file(
        self,
        file_path: Path,
        *,
        display_name: str,
        mime_type: str | None,
    ) -> UploadedFile:
        name = f"files/{display_name}"
        uploaded = UploadedFile(
            name=name,
            uri=f"example://{name}",
            mime_type=mime_type or "application/octet-stream",
            state=FILE_STATE_ACTIVE,
        )
        self._files[name] = uploaded
        return uploaded

    def get_file(self, name: str) -> UploadedFile:
        return self._files.get(name, UploadedFile(name=name, state=FILE_STATE_ACTIVE))

    def generate_json(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        uploaded_file: UploadedFile,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, prompt, uploaded_file, json_schema
        return json.dumps(self.DEFAULT_RESPONSE)
