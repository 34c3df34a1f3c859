from pathlib import Path

from docmeta.config.settings import Settings
from docmeta.conversion.factory import ConverterFactory
from docmeta.extraction.extractor import MetadataExtractor
from docmeta.extraction.factory import ExtractionClientFactory
from docmeta.extraction.models import Metadata
from docmeta.extraction.uploader import Uploader
from docmeta.logging.logger import Log
from docmeta.mime.sniffer import sniff_mime_type
from docmeta.pdf.factory import PdfSlicerFactory
from docmeta.processor.exceptions import UnsupportedTypeError
from docmeta.processor.registry import FileProcessorRegistry
from docmeta.processor.temp_files import cleanup_temp_file


class Processor:
    """Orchestrates metadata extraction for a single source document.

    Pipeline: read -> sniff -> preprocess -> upload/poll -> extract.
    Any temp file produced by preprocessing is removed once the
    upload/extract span ends, whether it succeeded or not.
    """

    def __init__(
        self,
        registry: FileProcessorRegistry,
        uploader: Uploader,
        extractor: MetadataExtractor,
    ) -> None:
        self._registry = registry
        self._uploader = uploader
        self._extractor = extractor

    def process(self, source_path: Path) -> Metadata:
        """Run the full pipeline for ``source_path`` and return its metadata."""
        Log.info(f"Processing document {source_path.name}")

        # Step 1: Read and sniff
        if not source_path.is_file():
            raise FileNotFoundError(f"File not found: {source_path}")
        raw_bytes = source_path.read_bytes()
        try:
            mime_type = sniff_mime_type(raw_bytes)
        except UnsupportedTypeError as exc:
            Log.error(f"Unable to resolve MIME type for file: {source_path}")
            raise UnsupportedTypeError(f"Unsupported file type: {source_path}") from exc
        Log.info(f"Detected {mime_type} for {source_path.name} ({len(raw_bytes)} bytes)")

        # Step 2: Preprocess
        processed = self._registry.process_file(source_path, mime_type)

        # Steps 3-4: Upload, wait, extract; the temp file never outlives them
        try:
            uploaded = self._uploader.upload(processed)
            return self._extractor.extract(uploaded)
        finally:
            cleanup_temp_file(processed.temp_file_path)


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    slicer = PdfSlicerFactory.create(settings)
    converter = ConverterFactory.create(settings)
    client = ExtractionClientFactory.create_client(settings)
    return Processor(
        registry=FileProcessorRegistry.create(converter, slicer),
        uploader=ExtractionClientFactory.create_uploader(client, settings),
        extractor=ExtractionClientFactory.create_extractor(client, settings),
    )


def extract_metadata(source_path: str | Path, settings: Settings | None = None) -> Metadata:
    """Extract metadata from one document using configuration from ``settings``.

    Not safe to call concurrently for the same path: temp file names are
    derived from it.
    """
    return build_processor(settings or Settings()).process(Path(source_path))
