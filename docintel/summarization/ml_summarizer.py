"""Transformer-backed summarizer with an explicit model lifecycle.

States: uninitialized -> initializing -> ready | failed. A failed load is
retried on the next call. Concurrent callers share one in-flight load. The
loaded pipeline is released after ``idle_timeout_seconds`` without use, or
on ``close()``.
"""

import asyncio
import time
from collections.abc import Callable
from typing import Any

from docintel.features.extractor import detect_document_type
from docintel.logging.logger import Log
from docintel.summarization.exceptions import ModelUnavailableError, SummarizationError
from docintel.summarization.extractive import ExtractiveSummarizer
from docintel.summarization.models import (
    MLModelState,
    MLSummarizationOptions,
    SummarizationResult,
)
from docintel.summarization.text import (
    compression_ratio,
    postprocess,
    preprocess,
    word_count,
)
from docintel.summarization.tfidf import TfidfSummarizer
from docintel.summarization.transformers_loader import load_summarization_pipeline

PipelineLoader = Callable[[str], Callable[..., Any]]

MIN_SUMMARIZABLE_CHARS = 100

LENGTH_PROFILES: dict[str, tuple[int, int]] = {
    "Safety": (200, 50),
    "Technical": (180, 40),
    "Compliance": (160, 35),
    "Maintenance": (140, 30),
}
DEFAULT_LENGTH_PROFILE = (150, 30)


def generation_params(text: str, options: MLSummarizationOptions | None = None) -> dict[str, Any]:
    """Pipeline keyword arguments for ``text``, sized by its detected document type."""
    options = options or MLSummarizationOptions()
    max_length, min_length = LENGTH_PROFILES.get(detect_document_type(text), DEFAULT_LENGTH_PROFILE)
    params: dict[str, Any] = {
        "max_length": options.max_length or max_length,
        "min_length": options.min_length or min_length,
        "do_sample": options.do_sample,
        "truncation": True,
    }
    if options.do_sample:
        params.update(temperature=options.temperature, top_p=options.top_p, top_k=options.top_k)
    if options.repetition_penalty != 1.0:
        params["repetition_penalty"] = options.repetition_penalty
    return params


class MLSummarizer:
    """Summarizes with a transformer model, degrading to extractive tiers.

    Initialization errors or an init slower than ``init_timeout_seconds``
    fall back to ``ExtractiveSummarizer``. Errors raised by a loaded model
    fall back to ``TfidfSummarizer``. ``summarize`` itself does not raise for
    either case.
    """

    def __init__(
        self,
        *,
        model_name: str = "facebook/bart-large-cnn",
        enabled: bool = True,
        init_timeout_seconds: float = 5.0,
        idle_timeout_seconds: float | None = 300.0,
        pipeline_loader: PipelineLoader | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._model_name = model_name
        self._enabled = enabled
        self._init_timeout = init_timeout_seconds
        self._idle_timeout = idle_timeout_seconds
        self._loader = pipeline_loader or load_summarization_pipeline
        self._clock = clock

        self._state = MLModelState.UNINITIALIZED
        self._pipeline: Callable[..., Any] | None = None
        self._init_task: asyncio.Task[None] | None = None
        self._generation = 0
        self._last_used: float | None = None
        self._active_calls = 0
        self._idle_handle: asyncio.TimerHandle | None = None

        self._fast_fallback = ExtractiveSummarizer()
        self._model_fallback = TfidfSummarizer()

    @property
    def state(self) -> MLModelState:
        return self._state

    @property
    def model_name(self) -> str:
        return self._model_name

    async def initialize(self) -> None:
        """Load the model, sharing an in-flight load with concurrent callers.

        Raises:
            ModelUnavailableError: if the load failed or was discarded by ``close()``.
        """
        if self._state is MLModelState.READY:
            return
        if self._init_task is None:
            self._state = MLModelState.INITIALIZING
            self._init_task = asyncio.get_running_loop().create_task(self._load())
        # Shielded so a timed-out waiter does not abort the shared load.
        await asyncio.shield(self._init_task)
        if self._state is not MLModelState.READY:
            raise ModelUnavailableError(f"Summarization model '{self._model_name}' is unavailable")

    async def _load(self) -> None:
        generation = self._generation
        Log.info("Loading summarization model", model=self._model_name)
        try:
            pipeline = await asyncio.to_thread(self._loader, self._model_name)
        except Exception as exc:
            if generation == self._generation:
                self._state = MLModelState.FAILED
                self._init_task = None
            Log.warning("Summarization model failed to load", model=self._model_name, error=exc)
            return
        if generation != self._generation:
            Log.debug("Discarding model loaded after close", model=self._model_name)
            return
        self._pipeline = pipeline
        self._state = MLModelState.READY
        self._init_task = None
        self._schedule_idle_release()
        Log.info("Summarization model ready", model=self._model_name)

    async def summarize(
        self, text: str, options: MLSummarizationOptions | None = None
    ) -> SummarizationResult:
        self._touch()
        if not self._enabled:
            return self._fast_fallback.summarize(text)

        self._active_calls += 1
        try:
            try:
                await asyncio.wait_for(self.initialize(), timeout=self._init_timeout)
            except (asyncio.TimeoutError, ModelUnavailableError) as exc:
                Log.info(
                    "Summarization model not available, using fast fallback",
                    model=self._model_name,
                    reason=type(exc).__name__,
                )
                return self._fast_fallback.summarize(text)

            try:
                return await self._run_model(text, options)
            except Exception as exc:
                Log.warning(
                    "Summarization model failed, using TF-IDF fallback",
                    model=self._model_name,
                    error=exc,
                )
                return self._model_fallback.summarize(text)
        finally:
            self._active_calls -= 1
            self._touch()

    async def _run_model(
        self, text: str, options: MLSummarizationOptions | None
    ) -> SummarizationResult:
        started = time.perf_counter()
        cleaned = preprocess(text)
        original_words = word_count(cleaned)
        if len(cleaned) < MIN_SUMMARIZABLE_CHARS:
            # Too short for the model; returned unchanged under the fallback label.
            return self._fast_fallback.summarize(text)

        pipeline = self._pipeline
        if pipeline is None:
            raise ModelUnavailableError("Summarization model was released")
        params = generation_params(cleaned, options)
        Log.debug("Running summarization model", model=self._model_name, chars=len(cleaned))
        output = await asyncio.to_thread(pipeline, cleaned, **params)

        summary = postprocess(self._summary_text(output))
        if not summary:
            raise SummarizationError("Model returned an empty summary")
        words = word_count(summary)
        return SummarizationResult(
            summary=summary,
            confidence=0.9,
            processing_time_ms=int((time.perf_counter() - started) * 1000),
            model=self._model_name,
            word_count=words,
            original_word_count=original_words,
            compression_ratio=compression_ratio(words, original_words),
        )

    @staticmethod
    def _summary_text(output: Any) -> str:
        if isinstance(output, list):
            output = output[0] if output else ""
        if isinstance(output, dict):
            output = output.get("summary_text", "")
        if not isinstance(output, str):
            raise SummarizationError(f"Unexpected model output: {type(output).__name__}")
        return output

    async def summarize_many(
        self, texts: list[str], options: MLSummarizationOptions | None = None
    ) -> list[SummarizationResult]:
        """Summarize texts one after another; one failure does not stop the rest."""
        results: list[SummarizationResult] = []
        for text in texts:
            try:
                results.append(await self.summarize(text, options))
            except Exception as exc:
                Log.error("Summarization failed", error=exc)
                results.append(
                    SummarizationResult(
                        summary=f"[Summarization failed] {text[:100]}...",
                        confidence=0.1,
                        processing_time_ms=0,
                        model="error",
                        word_count=0,
                        original_word_count=word_count(text),
                        compression_ratio=0.0,
                    )
                )
        return results

    def model_info(self) -> dict[str, object]:
        return {
            "name": self._model_name,
            "type": "transformer",
            "enabled": self._enabled,
            "state": self._state.value,
            "initialized": self._state is MLModelState.READY,
            "idle_timeout_seconds": self._idle_timeout,
        }

    def release_if_idle(self) -> bool:
        """Release the model if it has been unused for the idle timeout."""
        if self._state is not MLModelState.READY or self._idle_timeout is None:
            return False
        if self._active_calls or self._last_used is None:
            return False
        idle_for = self._clock() - self._last_used
        if idle_for < self._idle_timeout:
            self._schedule_idle_release(self._idle_timeout - idle_for)
            return False
        Log.info("Releasing idle summarization model", model=self._model_name)
        self._release()
        return True

    def close(self) -> None:
        """Release the model and drop any in-flight load."""
        self._generation += 1
        self._init_task = None
        self._release()

    def _release(self) -> None:
        self._cancel_idle_timer()
        self._pipeline = None
        self._state = MLModelState.UNINITIALIZED

    def _touch(self) -> None:
        self._last_used = self._clock()
        if self._state is MLModelState.READY:
            self._schedule_idle_release()

    def _schedule_idle_release(self, delay: float | None = None) -> None:
        if self._idle_timeout is None:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        self._cancel_idle_timer()
        self._idle_handle = loop.call_later(
            delay if delay is not None else self._idle_timeout, self.release_if_idle
        )

    def _cancel_idle_timer(self) -> None:
        if self._idle_handle is not None:
            self._idle_handle.cancel()
            self._idle_handle = None
