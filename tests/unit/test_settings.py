import pytest
from pydantic import ValidationError

from docmeta.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_max_pdf_pages(self) -> None:
        s = Settings()
        assert s.max_pdf_pages == 10

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pymupdf"

    def test_default_converter_engine(self) -> None:
        s = Settings()
        assert s.converter_engine == "libreoffice"

    def test_default_extraction_provider(self) -> None:
        s = Settings()
        assert s.extraction_provider == "gemini"

    def test_default_poll_interval(self) -> None:
        s = Settings()
        assert s.processing_poll_interval_seconds == 3.0

    def test_default_max_wait_is_unbounded(self) -> None:
        s = Settings()
        assert s.processing_max_wait_seconds == 0.0

    def test_default_retry_policy(self) -> None:
        s = Settings()
        assert s.transient_max_retries == 3
        assert s.transient_retry_delay_seconds == 10.0

    def test_default_temperature_is_zero(self) -> None:
        s = Settings()
        assert s.extraction_temperature == 0.0


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_google_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOOGLE_API_KEY", "secret-key")
        s = Settings()
        assert s.google_api_key == "secret-key"

    def test_loads_max_pdf_pages(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_PDF_PAGES", "5")
        s = Settings()
        assert s.max_pdf_pages == 5

    def test_loads_rate_limit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "30")
        s = Settings()
        assert s.rate_limit_per_minute == 30

    def test_loads_stop_on_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STOP_ON_ERROR", "true")
        s = Settings()
        assert s.stop_on_error is True


class TestSettingsValidation:
    def test_invalid_max_pdf_pages_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_PDF_PAGES", "ten")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_poll_interval_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROCESSING_POLL_INTERVAL_SECONDS", "soon")
        with pytest.raises(ValidationError):
            Settings()
