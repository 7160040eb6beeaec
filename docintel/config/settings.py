from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SUPPORTED_FORMATS = (
    "pdf", "docx", "doc", "txt", "png", "jpg", "jpeg", "gif", "bmp", "tiff",
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    analysis_provider_order: str = "gemini,openai,anthropic"
    analysis_temperature: float = 0.3
    analysis_max_tokens: int = 2000
    analysis_max_content_chars: int = 4000

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-1.5-flash"
    gemini_timeout_seconds: int | None = None

    openai_api_key: str = ""
    openai_model_name: str = "gpt-3.5-turbo"
    openai_timeout_seconds: int | None = None
    openai_base_url: str | None = None

    anthropic_api_key: str = ""
    anthropic_model_name: str = "claude-3-haiku-20240307"
    anthropic_timeout_seconds: int | None = None

    ml_summarization_enabled: bool = True
    ml_model_name: str = "facebook/bart-large-cnn"
    ml_init_timeout_seconds: float = 5.0
    ml_idle_timeout_seconds: float | None = 300.0

    ocr_pdf_engine: str = "pdfplumber"

    processing_batch_size: int = 5
    processing_max_file_size_bytes: int = 10 * 1024 * 1024
    processing_supported_formats: str = ",".join(DEFAULT_SUPPORTED_FORMATS)
    processing_timeout_seconds: int = 30
    safety_check_delay_seconds: float = 0.5
    indexing_delay_seconds: float = 0.8

    @property
    def provider_names(self) -> list[str]:
        return [
            name.strip().lower()
            for name in self.analysis_provider_order.split(",")
            if name.strip()
        ]

    @property
    def supported_formats(self) -> list[str]:
        return [
            ext.strip().lower().lstrip(".")
            for ext in self.processing_supported_formats.split(",")
            if ext.strip()
        ]
