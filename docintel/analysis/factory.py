from dataclasses import dataclass
from typing import ClassVar

from docintel.analysis.analyzer import AnalysisProvider, CascadeAnalyzer
from docintel.analysis.anthropic_client_adapter import AnthropicClientAdapter
from docintel.analysis.client_base import BaseAnalysisClient
from docintel.analysis.example_client_adapter import ExampleClientAdapter
from docintel.analysis.gemini_client_adapter import GeminiClientAdapter
from docintel.analysis.local_analyzer import LocalAnalyzer
from docintel.analysis.openai_client_adapter import OpenAIClientAdapter
from docintel.config.settings import Settings
from docintel.logging.logger import Log
from docintel.summarization.ml_summarizer import MLSummarizer


@dataclass(frozen=True)
class ProviderConfig:
    """Credentials and model selection for one analysis provider."""

    name: str
    api_key: str = ""
    model: str = ""
    timeout_seconds: float = 30
    base_url: str | None = None

    @property
    def enabled(self) -> bool:
        return self.name in AnalyzerFactory.KEYLESS_PROVIDERS or bool(self.api_key)


class AnalyzerFactory:
    """Creates the provider cascade from application settings."""

    SUPPORTED_PROVIDERS: ClassVar[tuple[str, ...]] = ("gemini", "openai", "anthropic", "example")
    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"example"})

    @classmethod
    def provider_configs(cls, settings: Settings) -> list[ProviderConfig]:
        """Provider configs in cascade order.

        Raises:
            ValueError: for a provider name this factory cannot build.
        """
        configs = []
        for name in settings.provider_names:
            if name not in cls.SUPPORTED_PROVIDERS:
                raise ValueError(
                    f"Unknown analysis provider '{name}'. Choose from: {list(cls.SUPPORTED_PROVIDERS)}"
                )
            configs.append(cls._config_for(name, settings))
        return configs

    @classmethod
    def _config_for(cls, name: str, settings: Settings) -> ProviderConfig:
        # Per-provider timeouts default to processing_timeout_seconds.
        if name == "gemini":
            return ProviderConfig(
                name=name,
                api_key=settings.gemini_api_key,
                model=settings.gemini_model_name,
                timeout_seconds=settings.gemini_timeout_seconds or settings.processing_timeout_seconds,
            )
        if name == "openai":
            return ProviderConfig(
                name=name,
                api_key=settings.openai_api_key,
                model=settings.openai_model_name,
                timeout_seconds=settings.openai_timeout_seconds or settings.processing_timeout_seconds,
                base_url=settings.openai_base_url,
            )
        if name == "anthropic":
            return ProviderConfig(
                name=name,
                api_key=settings.anthropic_api_key,
                model=settings.anthropic_model_name,
                timeout_seconds=settings.anthropic_timeout_seconds or settings.processing_timeout_seconds,
            )
        return ProviderConfig(name=name, model="example", timeout_seconds=settings.processing_timeout_seconds)

    @classmethod
    def create_client(cls, config: ProviderConfig) -> BaseAnalysisClient:
        if config.name == "gemini":
            return GeminiClientAdapter(api_key=config.api_key, timeout_seconds=config.timeout_seconds)
        if config.name == "openai":
            return OpenAIClientAdapter(
                api_key=config.api_key,
                timeout_seconds=config.timeout_seconds,
                base_url=config.base_url,
            )
        if config.name == "anthropic":
            return AnthropicClientAdapter(api_key=config.api_key, timeout_seconds=config.timeout_seconds)
        if config.name == "example":
            return ExampleClientAdapter()
        raise ValueError(
            f"Unknown analysis provider '{config.name}'. Choose from: {list(cls.SUPPORTED_PROVIDERS)}"
        )

    @classmethod
    def create_providers(cls, configs: list[ProviderConfig]) -> list[AnalysisProvider]:
        providers = []
        for config in configs:
            if not config.enabled:
                Log.info("Skipping analysis provider without credentials", provider=config.name)
                continue
            providers.append(
                AnalysisProvider(name=config.name, client=cls.create_client(config), model=config.model)
            )
        return providers

    @classmethod
    def create_summarizer(cls, settings: Settings) -> MLSummarizer:
        return MLSummarizer(
            model_name=settings.ml_model_name,
            enabled=settings.ml_summarization_enabled,
            init_timeout_seconds=settings.ml_init_timeout_seconds,
            idle_timeout_seconds=settings.ml_idle_timeout_seconds,
        )

    @classmethod
    def create(
        cls,
        settings: Settings,
        summarizer: MLSummarizer | None = None,
    ) -> CascadeAnalyzer:
        """Create a configured cascade analyzer from application settings."""
        providers = cls.create_providers(cls.provider_configs(settings))
        Log.info("Analysis cascade configured", providers=[p.name for p in providers] or "none")
        return CascadeAnalyzer(
            providers=providers,
            local_analyzer=LocalAnalyzer(summarizer or cls.create_summarizer(settings)),
            temperature=settings.analysis_temperature,
            max_tokens=settings.analysis_max_tokens,
            max_content_chars=settings.analysis_max_content_chars,
        )
