from pathlib import Path

from docmeta.conversion.exceptions import ConversionError
from docmeta.extraction.exceptions import ExtractionError
from docmeta.logging.logger import Log
from docmeta.processor.exceptions import ProcessorError
from docmeta.processor.processor import Processor
from docmeta.worker.models import DocumentResult

# Failures the pipeline raises on purpose; anything else is logged with a traceback.
_EXPECTED_ERRORS = (ProcessorError, ConversionError, ExtractionError, FileNotFoundError)


class JobRunner:
    """Run the pipeline for one document and turn failures into results."""

    def __init__(self, processor: Processor) -> None:
        self._processor = processor

    def run(self, source_path: Path) -> DocumentResult:
        """Execute a single document with error handling."""
        Log.info(f"Running document {source_path.name}")
        try:
            metadata = self._processor.process(source_path)
        except Exception as exc:
            return self._handle_failure(source_path, exc)
        Log.info(f"Document {source_path.name} completed successfully")
        return DocumentResult(source_path=source_path, metadata=metadata)

    def _handle_failure(self, source_path: Path, exc: Exception) -> DocumentResult:
        message = f"Document {source_path.name} failed: {exc}"
        if isinstance(exc, _EXPECTED_ERRORS):
            Log.error(message, error=type(exc).__name__)
        else:
            Log.exception(message, error=type(exc).__name__)
        return DocumentResult(source_path=source_path, error=str(exc))
