from pathlib import Path

from docmeta.conversion.base import BaseOfficeConverter
from docmeta.logging.logger import Log
from docmeta.pdf.slicer import PageSlicer
from docmeta.processor.base import BaseFileProcessor
from docmeta.processor.exceptions import UnsupportedTypeError
from docmeta.processor.models import ProcessedFile
from docmeta.processor.processors import DefaultProcessor, PdfProcessor, PowerPointProcessor


class FileProcessorRegistry:
    """Dispatches a file to the first processor that accepts its MIME type.

    The last processor must be a DefaultProcessor, so every type finds a
    match.
    """

    def __init__(self, processors: list[BaseFileProcessor]) -> None:
        if not processors or not isinstance(processors[-1], DefaultProcessor):
            raise ValueError("The last registered processor must be a DefaultProcessor")
        self._processors = list(processors)

    @classmethod
    def create(cls, converter: BaseOfficeConverter, slicer: PageSlicer) -> "FileProcessorRegistry":
        """Build the standard PowerPoint -> PDF -> default chain."""
        return cls([
            PowerPointProcessor(converter, slicer),
            PdfProcessor(slicer),
            DefaultProcessor(),
        ])

    def process_file(self, file_path: Path, mime_type: str) -> ProcessedFile:
        processor = next((p for p in self._processors if p.can_handle(mime_type)), None)
        if processor is None:
            raise UnsupportedTypeError(f"No processor found for MIME type: {mime_type}")
        Log.debug(f"Dispatching {file_path.name} ({mime_type}) to {type(processor).__name__}")
        return processor.process(file_path)
