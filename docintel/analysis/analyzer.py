"""Provider-cascade document analyzer."""

import time
from dataclasses import dataclass, replace
from pathlib import Path

from docintel.analysis.client_base import BaseAnalysisClient
from docintel.analysis.exceptions import AnalysisError
from docintel.analysis.local_analyzer import LocalAnalyzer
from docintel.analysis.models import DocumentAnalysis
from docintel.analysis.parser import extract_json_object
from docintel.analysis.prompt_loader import build_prompt, load_prompt_template
from docintel.analysis.validator import validate_and_build
from docintel.logging.logger import Log

HEALTH_CHECK_PROMPT = "Reply with the JSON object {\"ok\": true}."


@dataclass(frozen=True)
class AnalysisProvider:
    """An enabled provider: its name, client and model id."""

    name: str
    client: BaseAnalysisClient
    model: str


class CascadeAnalyzer:
    """Tries each provider in order and ends with the local analyzer.

    A provider failure of any kind (network, HTTP status, empty reply,
    unparseable reply) is logged and the next provider is tried. The local
    tier always produces a result, so ``analyze_document`` does not raise.
    """

    def __init__(
        self,
        *,
        providers: list[AnalysisProvider],
        local_analyzer: LocalAnalyzer,
        temperature: float = 0.3,
        max_tokens: int = 2000,
        max_content_chars: int = 4000,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._providers = list(providers)
        self._local = local_analyzer
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._max_content_chars = max_content_chars
        self._prompt_template = load_prompt_template(prompt_template_path)

    @property
    def provider_names(self) -> list[str]:
        return [provider.name for provider in self._providers]

    async def analyze_document(
        self, content: str, file_name: str, language: str = "en"
    ) -> DocumentAnalysis:
        started = time.perf_counter()
        prompt = build_prompt(
            self._prompt_template,
            content=content or "",
            file_name=file_name,
            language=language,
            max_content_chars=self._max_content_chars,
        )

        for provider in self._providers:
            try:
                analysis = await self._attempt(provider, prompt)
            except AnalysisError as exc:
                Log.warning(
                    "Analysis provider failed, trying next",
                    provider=provider.name,
                    file=file_name,
                    error=exc,
                )
                continue
            except Exception as exc:
                Log.error(
                    "Analysis provider raised unexpectedly, trying next",
                    provider=provider.name,
                    file=file_name,
                    error=repr(exc),
                )
                continue
            Log.info("Analysis complete", provider=provider.name, file=file_name)
            return replace(analysis, processing_time_ms=self._elapsed_ms(started))

        if self._providers:
            Log.warning("All analysis providers failed, using local analysis", file=file_name)
        else:
            Log.info("No analysis providers enabled, using local analysis", file=file_name)
        analysis = await self._local.analyze(content, file_name, language)
        return replace(analysis, processing_time_ms=self._elapsed_ms(started))

    async def _attempt(self, provider: AnalysisProvider, prompt: str) -> DocumentAnalysis:
        Log.debug("Calling analysis provider", provider=provider.name, model=provider.model)
        raw = await provider.client.complete(
            model=provider.model,
            prompt=prompt,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        parsed = extract_json_object(raw)
        return validate_and_build(parsed, provider=provider.name)

    async def health_check(self) -> dict[str, bool]:
        """Check every enabled provider; the local tier is always healthy."""
        results: dict[str, bool] = {}
        for provider in self._providers:
            try:
                reply = await provider.client.complete(
                    model=provider.model,
                    prompt=HEALTH_CHECK_PROMPT,
                    temperature=0.0,
                    max_tokens=20,
                )
            except Exception as exc:
                Log.warning("Provider health check failed", provider=provider.name, error=exc)
                results[provider.name] = False
            else:
                results[provider.name] = bool(reply.strip())
        results[LocalAnalyzer.PROVIDER_NAME] = True
        return results

    async def aclose(self) -> None:
        for provider in self._providers:
            await provider.client.aclose()
        self._local.close()

    @staticmethod
    def _elapsed_ms(started: float) -> int:
        return int((time.perf_counter() - started) * 1000)
