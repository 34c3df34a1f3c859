from dataclasses import dataclass
from pathlib import Path

from docmeta.extraction.models import Metadata


@dataclass(frozen=True)
class DocumentResult:
    """Outcome of running the pipeline over one source document."""

    source_path: Path
    metadata: Metadata | None = None
    error: str = ""

    @property
    def succeeded(self) -> bool:
        return self.metadata is not None
