"""Validates parsed generation output against the metadata schema.

Values are never coerced: a string where a list is expected, or a numeric
string where a number is expected, is a validation failure.
"""

import math
from typing import Any

from docmeta.extraction.exceptions import SchemaValidationError
from docmeta.extraction.models import Metadata


class _InvalidField(ValueError):
    pass


def validate_and_build(data: Any, raw_response: str = "") -> Metadata:
    """Validate raw parsed JSON and build a Metadata.

    Missing ``agency`` and ``year`` default to None; ``title`` and ``topics``
    are required.

    Raises:
        SchemaValidationError: on any validation failure, carrying
            ``raw_response`` for diagnosis.
    """
    try:
        if not isinstance(data, dict):
            raise _InvalidField("Metadata response must be a JSON object")
        return Metadata(
            title=_build_title(data),
            agency=_build_agency(data.get("agency")),
            year=_build_year(data.get("year")),
            topics=_build_topics(data),
        )
    except _InvalidField as exc:
        raise SchemaValidationError(str(exc), raw_response=raw_response) from exc


def _build_title(data: dict[str, Any]) -> str:
    if "title" not in data:
        raise _InvalidField("Missing required field: title")
    title = data["title"]
    if not isinstance(title, str):
        raise _InvalidField("'title' must be a string")
    return title


def _build_agency(raw: Any) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise _InvalidField("'agency' must be a string or null")
    return raw


def _build_year(raw: Any) -> int | float | None:
    if raw is None:
        return None
    # bool is an int subclass but never a valid year
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise _InvalidField("'year' must be a number or null")
    if isinstance(raw, float) and not math.isfinite(raw):
        raise _InvalidField("'year' must be a finite number")
    return raw


def _build_topics(data: dict[str, Any]) -> list[str]:
    if "topics" not in data:
        raise _InvalidField("Missing required field: topics")
    raw = data["topics"]
    if not isinstance(raw, list):
        raise _InvalidField("'topics' must be a list of strings")
    for i, topic in enumerate(raw):
        if not isinstance(topic, str):
            raise _InvalidField(f"Topic at index {i} must be a string")
    return list(raw)
