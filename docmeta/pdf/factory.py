from docmeta.config.settings import Settings
from docmeta.pdf.base import BasePdfSlicer
from docmeta.pdf.pymupdf_adapter import PyMuPdfAdapter
from docmeta.pdf.pypdf_adapter import PyPdfAdapter
from docmeta.pdf.slicer import PageSlicer


class PdfSlicerFactory:
    """Creates the page slicer for the configured PDF engine."""

    ADAPTERS: dict[str, type[BasePdfSlicer]] = {
        "pymupdf": PyMuPdfAdapter,
        "pypdf": PyPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> PageSlicer:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return PageSlicer(adapter_cls(), max_pages=settings.max_pdf_pages)
