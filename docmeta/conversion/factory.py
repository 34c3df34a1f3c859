from docmeta.config.settings import Settings
from docmeta.conversion.base import BaseOfficeConverter
from docmeta.conversion.gotenberg_adapter import GotenbergAdapter
from docmeta.conversion.libreoffice_adapter import LibreOfficeAdapter


class ConverterFactory:
    """Creates the office-to-PDF converter for the configured engine."""

    ENGINES = ("libreoffice", "gotenberg")

    @classmethod
    def create(cls, settings: Settings) -> BaseOfficeConverter:
        engine = settings.converter_engine.lower()
        if engine == "libreoffice":
            return LibreOfficeAdapter(
                binary=settings.libreoffice_binary,
                timeout_seconds=settings.conversion_timeout_seconds,
            )
        if engine == "gotenberg":
            return GotenbergAdapter(
                base_url=settings.gotenberg_url,
                timeout_seconds=settings.conversion_timeout_seconds,
            )
        raise ValueError(
            f"Unknown converter engine '{engine}'. Choose from: {list(cls.ENGINES)}"
        )
