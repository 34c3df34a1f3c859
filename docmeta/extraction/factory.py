from docmeta.config.settings import Settings
from docmeta.extraction.client_base import BaseExtractionClient
from docmeta.extraction.example_client_adapter import ExampleClientAdapter
from docmeta.extraction.extractor import MetadataExtractor
from docmeta.extraction.gemini_client_adapter import GeminiClientAdapter
from docmeta.extraction.openai_client_adapter import OpenAIClientAdapter
from docmeta.extraction.uploader import Uploader


class ExtractionClientFactory:
    """Creates the configured remote client, uploader and metadata extractor."""

    PROVIDERS = ("gemini", "openai", "example")

    @classmethod
    def create_client(cls, settings: Settings) -> BaseExtractionClient:
        provider = cls._provider(settings)
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "gemini":
            return GeminiClientAdapter(
                api_key=settings.google_api_key,
                timeout_seconds=settings.gemini_timeout_seconds,
            )
        return OpenAIClientAdapter(
            api_key=settings.openai_api_key,
            timeout_seconds=settings.openai_timeout_seconds,
        )

    @classmethod
    def create_uploader(cls, client: BaseExtractionClient, settings: Settings) -> Uploader:
        return Uploader(
            client,
            poll_interval_seconds=settings.processing_poll_interval_seconds,
            max_wait_seconds=settings.processing_max_wait_seconds,
        )

    @classmethod
    def create_extractor(
        cls, client: BaseExtractionClient, settings: Settings
    ) -> MetadataExtractor:
        return MetadataExtractor(
            client=client,
            model=cls._resolve_model_name(cls._provider(settings), settings),
            temperature=settings.extraction_temperature,
            max_retries=settings.transient_max_retries,
            retry_delay_seconds=settings.transient_retry_delay_seconds,
        )

    @classmethod
    def _provider(cls, settings: Settings) -> str:
        provider = settings.extraction_provider.lower()
        if provider not in cls.PROVIDERS:
            raise ValueError(
                f"Unknown extraction provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
            )
        return provider

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "gemini": settings.gemini_model_name,
            "openai": settings.openai_model_name,
            "example": "example",
        }
        return key_map[provider]
