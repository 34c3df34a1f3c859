from docmeta.extraction.exceptions import ExtractionError, SchemaValidationError
from docmeta.extraction.extractor import MetadataExtractor
from docmeta.extraction.factory import ExtractionClientFactory
from docmeta.extraction.models import Metadata, UploadedFile
from docmeta.extraction.uploader import Uploader

__all__ = [
    "ExtractionClientFactory",
    "ExtractionError",
    "Metadata",
    "MetadataExtractor",
    "SchemaValidationError",
    "UploadedFile",
    "Uploader",
]
