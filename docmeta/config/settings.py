from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    documents_dir: str = "decks"
    output_path: str = ""

    max_pdf_pages: int = 10
    pdf_engine: str = "pymupdf"

    converter_engine: str = "libreoffice"
    libreoffice_binary: str = "soffice"
    conversion_timeout_seconds: int = 120
    gotenberg_url: str = "http://localhost:3000"

    extraction_provider: str = "gemini"
    extraction_temperature: float = 0.0

    google_api_key: str = ""
    gemini_model_name: str = "gemini-2.5-flash"
    gemini_timeout_seconds: int = 120

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 120

    processing_poll_interval_seconds: float = 3.0
    processing_max_wait_seconds: float = 0.0

    transient_max_retries: int = 3
    transient_retry_delay_seconds: float = 10.0

    rate_limit_per_minute: int = 15
    stop_on_error: bool = False
