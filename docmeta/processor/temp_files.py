"""Naming, writing and removal of the pipeline's intermediate files.

Temp files live beside their source as ``<basename>_<suffix>.<ext>``; names
are derived from the source path alone, so two concurrent runs on the same
source would collide.
"""

from dataclasses import dataclass
from pathlib import Path

from docmeta.logging.logger import Log

SLICED_SUFFIX = "sliced"
CONVERTED_SLICED_SUFFIX = "converted_sliced"


@dataclass(frozen=True)
class TempFileInfo:
    temp_file_path: Path
    display_name: str


def create_temp_file_path(original_path: Path, suffix: str, extension: str) -> TempFileInfo:
    """Derive the temp file location for ``original_path``."""
    temp_file_name = f"{original_path.stem}_{suffix}.{extension}"
    return TempFileInfo(
        temp_file_path=original_path.parent / temp_file_name,
        display_name=temp_file_name,
    )


def write_temp_file(path: Path, content: bytes) -> None:
    path.write_bytes(content)


def cleanup_temp_file(temp_file_path: Path | None) -> None:
    """Delete a pipeline temp file; a missing path or file is a no-op."""
    if temp_file_path is None:
        return
    try:
        temp_file_path.unlink()
    except FileNotFoundError:
        return
    Log.info(f"Temporary file cleaned up: {temp_file_path.name}")


def temp_source_stem(file_name: str) -> str | None:
    """Stem of the source a PDF temp file name was derived from, or None."""
    for suffix in (CONVERTED_SLICED_SUFFIX, SLICED_SUFFIX):
        marker = f"_{suffix}.pdf"
        if file_name.endswith(marker) and len(file_name) > len(marker):
            return file_name.removesuffix(marker)
    return None
