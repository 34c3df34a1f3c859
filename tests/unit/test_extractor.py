import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from docmeta.extraction.client_base import BaseExtractionClient
from docmeta.extraction.exceptions import (
    ExtractionError,
    ExtractionNetworkError,
    SchemaValidationError,
    TransientServiceError,
)
from docmeta.extraction.extractor import MetadataExtractor
from docmeta.extraction.models import FILE_STATE_ACTIVE, UploadedFile

UPLOADED = UploadedFile(
    name="files/abc",
    uri="https://files/abc",
    mime_type="application/pdf",
    state=FILE_STATE_ACTIVE,
)

VALID_RESPONSE = json.dumps({
    "title": "Q3 Report",
    "agency": None,
    "year": None,
    "topics": [],
})


@pytest.fixture()
def client() -> MagicMock:
    mock = MagicMock(spec=BaseExtractionClient)
    mock.generate_json.return_value = VALID_RESPONSE
    return mock


def _extractor(client: MagicMock, **kwargs: object) -> MetadataExtractor:
    return MetadataExtractor(client=client, model="gemini-2.5-flash", **kwargs)  # type: ignore[arg-type]


class TestMetadataExtractor:
    def test_returns_validated_metadata(self, client: MagicMock) -> None:
        result = _extractor(client).extract(UPLOADED)

        assert result.title == "Q3 Report"
        assert result.agency is None
        assert result.year is None
        assert result.topics == []

    def test_sends_prompt_schema_and_settings(self, client: MagicMock) -> None:
        _extractor(client, temperature=0.0).extract(UPLOADED)

        kwargs = client.generate_json.call_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash"
        assert kwargs["temperature"] == 0.0
        assert kwargs["uploaded_file"] == UPLOADED
        assert kwargs["prompt"].startswith("Extract metadata from this file.")
        assert kwargs["json_schema"]["required"] == ["title", "agency", "year", "topics"]

    def test_negative_temperature_is_clamped(self, client: MagicMock) -> None:
        _extractor(client, temperature=-1.0).extract(UPLOADED)
        assert client.generate_json.call_args.kwargs["temperature"] == 0.0

    def test_strips_markdown_fences(self, client: MagicMock) -> None:
        client.generate_json.return_value = f"```json\n{VALID_RESPONSE}\n```"
        result = _extractor(client).extract(UPLOADED)
        assert result.title == "Q3 Report"

    def test_retries_transient_errors_then_succeeds(self, client: MagicMock) -> None:
        client.generate_json.side_effect = [
            TransientServiceError("503"),
            TransientServiceError("503"),
            TransientServiceError("503"),
            VALID_RESPONSE,
        ]

        with patch("docmeta.extraction.extractor.time.sleep") as mock_sleep:
            result = _extractor(client).extract(UPLOADED)

        assert result.title == "Q3 Report"
        assert client.generate_json.call_count == 4
        assert mock_sleep.call_count == 3
        mock_sleep.assert_called_with(10.0)

    def test_gives_up_after_max_retries(self, client: MagicMock) -> None:
        errors = [TransientServiceError(f"503 #{i}") for i in range(1, 5)]
        client.generate_json.side_effect = errors

        with (
            patch("docmeta.extraction.extractor.time.sleep") as mock_sleep,
            pytest.raises(TransientServiceError) as exc_info,
        ):
            _extractor(client).extract(UPLOADED)

        assert exc_info.value is errors[3]
        assert client.generate_json.call_count == 4
        assert mock_sleep.call_count == 3

    def test_zero_retries_fails_on_first_transient_error(self, client: MagicMock) -> None:
        client.generate_json.side_effect = TransientServiceError("503")

        with (
            patch("docmeta.extraction.extractor.time.sleep") as mock_sleep,
            pytest.raises(TransientServiceError),
        ):
            _extractor(client, max_retries=0).extract(UPLOADED)

        mock_sleep.assert_not_called()

    def test_uses_configured_retry_delay(self, client: MagicMock) -> None:
        client.generate_json.side_effect = [TransientServiceError("503"), VALID_RESPONSE]

        with patch("docmeta.extraction.extractor.time.sleep") as mock_sleep:
            _extractor(client, retry_delay_seconds=0.5).extract(UPLOADED)

        mock_sleep.assert_called_once_with(0.5)

    def test_does_not_retry_other_errors(self, client: MagicMock) -> None:
        client.generate_json.side_effect = ExtractionNetworkError("HTTP 500")

        with (
            patch("docmeta.extraction.extractor.time.sleep") as mock_sleep,
            pytest.raises(ExtractionNetworkError),
        ):
            _extractor(client).extract(UPLOADED)

        assert client.generate_json.call_count == 1
        mock_sleep.assert_not_called()

    def test_topics_as_string_fails_validation(self, client: MagicMock) -> None:
        client.generate_json.return_value = json.dumps({
            "title": "Q3 Report",
            "agency": None,
            "year": None,
            "topics": "finance",
        })

        with pytest.raises(SchemaValidationError, match="topics"):
            _extractor(client).extract(UPLOADED)

    def test_invalid_json_keeps_raw_response(self, client: MagicMock) -> None:
        client.generate_json.return_value = "not json at all"

        with pytest.raises(SchemaValidationError, match="Invalid JSON response") as exc_info:
            _extractor(client).extract(UPLOADED)

        assert exc_info.value.raw_response == "not json at all"

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_non_json_number_tokens_are_rejected(self, client: MagicMock, token: str) -> None:
        raw = f'{{"title": "T", "agency": null, "year": {token}, "topics": []}}'
        client.generate_json.return_value = raw

        with pytest.raises(SchemaValidationError, match="Invalid JSON response") as exc_info:
            _extractor(client).extract(UPLOADED)

        assert exc_info.value.raw_response == raw

    def test_overflowing_year_is_rejected(self, client: MagicMock) -> None:
        client.generate_json.return_value = '{"title": "T", "year": 1e999, "topics": []}'

        with pytest.raises(SchemaValidationError, match="finite"):
            _extractor(client).extract(UPLOADED)

    def test_strips_closing_fence_on_same_line(self, client: MagicMock) -> None:
        client.generate_json.return_value = f"```json\n{VALID_RESPONSE}```"
        result = _extractor(client).extract(UPLOADED)
        assert result.title == "Q3 Report"

    def test_validation_errors_are_not_retried(self, client: MagicMock) -> None:
        client.generate_json.return_value = "{}"

        with pytest.raises(SchemaValidationError):
            _extractor(client).extract(UPLOADED)

        assert client.generate_json.call_count == 1

    def test_custom_prompt_path(self, client: MagicMock, tmp_path: Path) -> None:
        prompt = tmp_path / "prompt.txt"
        prompt.write_text("  Describe the deck.  \n", encoding="utf-8")

        _extractor(client, prompt_path=prompt).extract(UPLOADED)

        assert client.generate_json.call_args.kwargs["prompt"] == "Describe the deck."

    def test_missing_prompt_file_fails_at_construction(
        self, client: MagicMock, tmp_path: Path
    ) -> None:
        with pytest.raises(ExtractionError, match="Failed to load prompt"):
            _extractor(client, prompt_path=tmp_path / "absent.txt")
