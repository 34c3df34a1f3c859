from collections.abc import Iterable
from pathlib import Path

from docmeta.processor.temp_files import temp_source_stem


def discover_files(directory: Path, extensions: Iterable[str] | None = None) -> list[Path]:
    """List the documents directly inside ``directory``, sorted by name.

    Hidden files are skipped, and so are pipeline temp files left beside
    their source (``report_sliced.pdf`` next to ``report.pdf``). When
    ``extensions`` is given only files with those suffixes are returned
    (case-insensitive, with or without the leading dot).

    Raises:
        FileNotFoundError: if ``directory`` does not exist or is not a directory.
    """
    if not directory.is_dir():
        raise FileNotFoundError(f"Documents directory not found: {directory}")
    allowed = _normalize_extensions(extensions)
    files = [p for p in directory.iterdir() if p.is_file() and not p.name.startswith(".")]
    stems = {p.stem for p in files}
    return sorted(
        path
        for path in files
        if not _is_leftover_temp_file(path, stems)
        and (allowed is None or path.suffix.lower() in allowed)
    )


def _is_leftover_temp_file(path: Path, stems: set[str]) -> bool:
    source_stem = temp_source_stem(path.name)
    return source_stem is not None and source_stem in stems


def _normalize_extensions(extensions: Iterable[str] | None) -> set[str] | None:
    if extensions is None:
        return None
    normalized = {f".{ext.lower().lstrip('.')}" for ext in extensions if ext.strip(". ")}
    return normalized or None
