import pytest
from pydantic import ValidationError

from docintel.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings(_env_file=None)
        assert s.app_env == "dev"

    def test_default_provider_order(self) -> None:
        s = Settings(_env_file=None)
        assert s.provider_names == ["gemini", "openai", "anthropic"]

    def test_default_generation_params(self) -> None:
        s = Settings(_env_file=None)
        assert s.analysis_temperature == 0.3
        assert s.analysis_max_tokens == 2000

    def test_default_ml_model(self) -> None:
        s = Settings(_env_file=None)
        assert s.ml_model_name == "facebook/bart-large-cnn"
        assert s.ml_summarization_enabled is True

    def test_default_pdf_engine(self) -> None:
        s = Settings(_env_file=None)
        assert s.ocr_pdf_engine == "pdfplumber"

    def test_default_upload_limits(self) -> None:
        s = Settings(_env_file=None)
        assert s.processing_max_file_size_bytes == 10 * 1024 * 1024
        assert "pdf" in s.supported_formats
        assert "txt" in s.supported_formats


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings(_env_file=None)
        assert s.log_level == "DEBUG"

    def test_provider_order_is_normalized(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_PROVIDER_ORDER", " OpenAI , ,example ")
        s = Settings(_env_file=None)
        assert s.provider_names == ["openai", "example"]

    def test_loads_api_keys(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "g-key")
        monkeypatch.setenv("ANTHROPIC_API_KEY", "a-key")
        s = Settings(_env_file=None)
        assert s.gemini_api_key == "g-key"
        assert s.anthropic_api_key == "a-key"

    def test_supported_formats_strip_dots(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROCESSING_SUPPORTED_FORMATS", ".PDF, txt")
        s = Settings(_env_file=None)
        assert s.supported_formats == ["pdf", "txt"]

    def test_loads_idle_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ML_IDLE_TIMEOUT_SECONDS", "12.5")
        s = Settings(_env_file=None)
        assert s.ml_idle_timeout_seconds == 12.5


class TestSettingsValidation:
    def test_invalid_batch_size_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROCESSING_BATCH_SIZE", "not_a_number")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_invalid_temperature_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_TEMPERATURE", "warm")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
