import json
from pathlib import Path

from docmeta.extraction.exceptions import ExtractionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt(path: Path | None = None) -> str:
    """Load the metadata extraction instruction from a file.

    Args:
        path: Path to the prompt file.
              Defaults to the bundled metadata_prompt.txt.

    Returns:
        The instruction text, stripped of surrounding whitespace.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "metadata_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ExtractionError(f"Failed to load prompt: {exc}") from exc


def load_json_schema(path: Path | None = None) -> dict[str, object]:
    """Load the response JSON schema from a file.

    Args:
        path: Path to the JSON schema file.
              Defaults to the bundled metadata_schema.json.

    Raises:
        ExtractionError: if the file cannot be read or is not a JSON object.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "metadata_schema.json"
    try:
        schema = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ExtractionError(f"Failed to load JSON schema: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ExtractionError(f"Invalid JSON schema file {path.name}: {exc}") from exc
    if not isinstance(schema, dict):
        raise ExtractionError(f"JSON schema in {path.name} must be an object")
    return schema
