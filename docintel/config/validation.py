"""Configuration sanity checks run at startup."""

from pathlib import PurePath

from docintel.config.settings import Settings

KNOWN_PROVIDERS = ("gemini", "openai", "anthropic", "example")
KNOWN_PDF_ENGINES = ("pdfplumber", "pymupdf")


def provider_api_key(name: str, settings: Settings) -> str:
    key_map = {
        "gemini": settings.gemini_api_key,
        "openai": settings.openai_api_key,
        "anthropic": settings.anthropic_api_key,
    }
    return key_map.get(name, "")


def validate_settings(settings: Settings) -> list[str]:
    """Return human-readable configuration problems; empty when healthy."""
    problems: list[str] = []
    names = settings.provider_names
    if not names:
        problems.append("No analysis providers configured; only local analysis will run")
    for name in names:
        if name not in KNOWN_PROVIDERS:
            problems.append(
                f"Unknown analysis provider '{name}'. Choose from: {list(KNOWN_PROVIDERS)}"
            )
        elif name != "example" and not provider_api_key(name, settings):
            problems.append(f"Provider '{name}' has no API key and will be skipped")
    if settings.ocr_pdf_engine.lower() not in KNOWN_PDF_ENGINES:
        problems.append(
            f"Unknown PDF engine '{settings.ocr_pdf_engine}'. "
            f"Choose from: {list(KNOWN_PDF_ENGINES)}"
        )
    if settings.processing_batch_size < 1:
        problems.append("processing_batch_size must be at least 1")
    if settings.processing_max_file_size_bytes < 1:
        problems.append("processing_max_file_size_bytes must be positive")
    return problems


def configuration_summary(settings: Settings) -> dict[str, object]:
    enabled = [
        name for name in settings.provider_names
        if name == "example" or provider_api_key(name, settings)
    ]
    return {
        "providers": settings.provider_names,
        "enabled_providers": enabled,
        "ml_summarization": settings.ml_summarization_enabled,
        "ml_model": settings.ml_model_name,
        "pdf_engine": settings.ocr_pdf_engine,
        "batch_size": settings.processing_batch_size,
        "max_file_size_mb": round(settings.processing_max_file_size_bytes / (1024 * 1024), 2),
        "supported_formats": settings.supported_formats,
    }


def is_file_supported(file_name: str, settings: Settings) -> bool:
    extension = PurePath(file_name).suffix.lower().lstrip(".")
    return bool(extension) and extension in settings.supported_formats


def is_file_size_valid(size: int, settings: Settings) -> bool:
    return 0 <= size <= settings.processing_max_file_size_bytes
