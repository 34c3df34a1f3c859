from pathlib import Path

from docmeta.conversion.base import BaseOfficeConverter
from docmeta.conversion.exceptions import ConversionError
from docmeta.logging.logger import Log
from docmeta.mime.sniffer import PDF_MIME_TYPE, POWERPOINT_MIME_TYPE
from docmeta.pdf.slicer import PageSlicer
from docmeta.processor.base import BaseFileProcessor
from docmeta.processor.exceptions import FileProcessingError
from docmeta.processor.models import ProcessedFile
from docmeta.processor.temp_files import (
    CONVERTED_SLICED_SUFFIX,
    SLICED_SUFFIX,
    TempFileInfo,
    cleanup_temp_file,
    create_temp_file_path,
    write_temp_file,
)


def _ensure_unclaimed(temp_info: TempFileInfo, file_path: Path) -> None:
    # An existing file at the temp path is not ours to overwrite or delete.
    if temp_info.temp_file_path.exists():
        raise FileProcessingError(
            f"Cannot process {file_path.name}: {temp_info.display_name} already exists"
        )


class PowerPointProcessor(BaseFileProcessor):
    """Converts a slide deck to PDF, then bounds its page count."""

    def __init__(self, converter: BaseOfficeConverter, slicer: PageSlicer) -> None:
        self._converter = converter
        self._slicer = slicer

    def can_handle(self, mime_type: str) -> bool:
        return mime_type == POWERPOINT_MIME_TYPE

    def process(self, file_path: Path) -> ProcessedFile:
        Log.info(f"Processing PowerPoint file {file_path.name}")
        temp_info = create_temp_file_path(file_path, CONVERTED_SLICED_SUFFIX, "pdf")
        _ensure_unclaimed(temp_info, file_path)
        try:
            Log.info("Converting PowerPoint to PDF")
            pdf_bytes = self._converter.convert(file_path.read_bytes(), source_suffix=".pptx")
            write_temp_file(temp_info.temp_file_path, self._slicer.slice(pdf_bytes))
        except ConversionError as exc:
            Log.error(f"Failed to convert PowerPoint file {file_path.name}: {exc}")
            raise ConversionError(
                f"Failed to process PowerPoint file {file_path.name}: {exc}"
            ) from exc
        except OSError as exc:
            cleanup_temp_file(temp_info.temp_file_path)
            raise FileProcessingError(
                f"Failed to process PowerPoint file {file_path.name}: {exc}"
            ) from exc

        Log.info("PowerPoint converted to PDF, sliced, and saved")
        return ProcessedFile(
            file_path=temp_info.temp_file_path,
            display_name=temp_info.display_name,
            mime_type=PDF_MIME_TYPE,
            temp_file_path=temp_info.temp_file_path,
        )


class PdfProcessor(BaseFileProcessor):
    """Bounds a PDF's page count and stages it as a temp file."""

    def __init__(self, slicer: PageSlicer) -> None:
        self._slicer = slicer

    def can_handle(self, mime_type: str) -> bool:
        return mime_type == PDF_MIME_TYPE

    def process(self, file_path: Path) -> ProcessedFile:
        Log.info(f"Processing PDF file {file_path.name}")
        temp_info = create_temp_file_path(file_path, SLICED_SUFFIX, "pdf")
        _ensure_unclaimed(temp_info, file_path)
        try:
            write_temp_file(temp_info.temp_file_path, self._slicer.slice(file_path.read_bytes()))
        except OSError as exc:
            cleanup_temp_file(temp_info.temp_file_path)
            raise FileProcessingError(
                f"Failed to process PDF file {file_path.name}: {exc}"
            ) from exc

        Log.info("PDF sliced and saved")
        return ProcessedFile(
            file_path=temp_info.temp_file_path,
            display_name=temp_info.display_name,
            mime_type=PDF_MIME_TYPE,
            temp_file_path=temp_info.temp_file_path,
        )


class DefaultProcessor(BaseFileProcessor):
    """Catch-all: uploads the original file and lets the service infer its type."""

    def can_handle(self, mime_type: str) -> bool:
        return True

    def process(self, file_path: Path) -> ProcessedFile:
        return ProcessedFile(file_path=file_path, display_name=file_path.name)
