import time

from docintel.features.extractor import split_sentences
from docintel.summarization.models import SummarizationResult
from docintel.summarization.text import (
    SUMMARY_KEYWORDS,
    compression_ratio,
    preprocess,
    word_count,
)

MIN_SUMMARIZABLE_CHARS = 100
SNIPPET_CHARS = 200


class ExtractiveSummarizer:
    """Position and keyword scored sentence picker used when no model is available."""

    MODEL_NAME = "fast-fallback"
    SENTENCES_IN_SUMMARY = 2

    def summarize(self, text: str) -> SummarizationResult:
        started = time.perf_counter()
        cleaned = preprocess(text)
        original_words = word_count(cleaned)

        if len(cleaned) < MIN_SUMMARIZABLE_CHARS:
            return self._result(cleaned, 0.8, started, original_words, ratio=1.0)

        sentences = split_sentences(cleaned)
        if not sentences:
            summary = cleaned[:SNIPPET_CHARS] + "..."
            return self._result(summary, 0.8, started, original_words, ratio=1.0)

        last = len(sentences) - 1
        ranked = sorted(
            range(len(sentences)),
            key=lambda index: self._score(sentences[index], index, last),
            reverse=True,
        )
        chosen = [sentences[index] for index in ranked[: self.SENTENCES_IN_SUMMARY]]
        summary = ". ".join(chosen) + "."
        return self._result(summary, 0.75, started, original_words)

    @staticmethod
    def _score(sentence: str, index: int, last: int) -> int:
        score = 0
        if index == 0:
            score += 10
        if index == last:
            score += 8
        if index < 3:
            score += 5
        lowered = sentence.lower()
        score += sum(3 for keyword in SUMMARY_KEYWORDS if keyword in lowered)
        return score

    def _result(
        self,
        summary: str,
        confidence: float,
        started: float,
        original_words: int,
        ratio: float | None = None,
    ) -> SummarizationResult:
        words = word_count(summary)
        return SummarizationResult(
            summary=summary,
            confidence=confidence,
            processing_time_ms=int((time.perf_counter() - started) * 1000),
            model=self.MODEL_NAME,
            word_count=words,
            original_word_count=original_words,
            compression_ratio=ratio if ratio is not None else compression_ratio(words, original_words),
        )
