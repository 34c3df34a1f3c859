import json
from collections.abc import Iterable
from dataclasses import asdict
from pathlib import Path
from typing import TextIO

from docmeta.worker.models import DocumentResult


class ResultWriter:
    """Serializes batch results as JSON lines, one object per document."""

    def to_dict(self, result: DocumentResult) -> dict[str, object]:
        return {
            "source": str(result.source_path),
            "metadata": asdict(result.metadata) if result.metadata is not None else None,
            "error": result.error or None,
        }

    def write(self, results: Iterable[DocumentResult], stream: TextIO) -> int:
        """Write ``results`` to ``stream``; returns the number of lines written."""
        count = 0
        for result in results:
            stream.write(json.dumps(self.to_dict(result), ensure_ascii=False) + "\n")
            count += 1
        return count

    def write_file(self, results: Iterable[DocumentResult], path: Path) -> int:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fh:
            return self.write(results, fh)
