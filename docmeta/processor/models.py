from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ProcessedFile:
    """The artifact actually handed to the upload step.

    ``mime_type`` is None when the remote service should infer the type from
    the content. ``temp_file_path`` is set only when preprocessing wrote a
    new file, and that file is owned (and later deleted) by the pipeline.
    """

    file_path: Path
    display_name: str
    mime_type: str | None = None
    temp_file_path: Path | None = None
