import math
import time
from collections import Counter

from docintel.features.extractor import split_sentences, tokenize
from docintel.features.keywords import DOMAIN_TERMS, IMPORTANCE_KEYWORDS
from docintel.summarization.extractive import SNIPPET_CHARS
from docintel.summarization.models import SummarizationResult
from docintel.summarization.text import compression_ratio, preprocess, word_count

IMPORTANCE_BOOST = 5
DOMAIN_BOOST = 2


class TfidfSummarizer:
    """TF-IDF sentence ranking; the tier used when a loaded model fails mid-run.

    Each sentence is treated as a document. A word's weight is its frequency
    in the whole text times its inverse sentence frequency, doubled for
    railway domain terms. Sentences are scored by the sum of their word
    weights plus a flat boost per importance keyword, and the best
    ``min(3, max(1, n * 0.3))`` are returned in their original order.
    """

    MODEL_NAME = "fallback-extractive"

    def summarize(self, text: str) -> SummarizationResult:
        started = time.perf_counter()
        cleaned = preprocess(text)
        original_words = word_count(cleaned)
        sentences = split_sentences(cleaned)

        if not sentences:
            summary = cleaned[:SNIPPET_CHARS] + "..." if cleaned else ""
        else:
            summary = self._summarize_sentences(sentences)

        words = word_count(summary)
        return SummarizationResult(
            summary=summary,
            confidence=0.7,
            processing_time_ms=int((time.perf_counter() - started) * 1000),
            model=self.MODEL_NAME,
            word_count=words,
            original_word_count=original_words,
            compression_ratio=compression_ratio(words, original_words),
        )

    def _summarize_sentences(self, sentences: list[str]) -> str:
        tokenized = [[w for w in tokenize(s) if len(w) > 3] for s in sentences]
        weights = self._word_weights(tokenized)
        scores = [
            self._sentence_score(sentence, tokens, weights)
            for sentence, tokens in zip(sentences, tokenized)
        ]
        keep = min(3, max(1, math.floor(len(sentences) * 0.3)))
        best = sorted(range(len(sentences)), key=lambda i: scores[i], reverse=True)[:keep]
        return ". ".join(sentences[i] for i in sorted(best)) + "."

    @staticmethod
    def _word_weights(tokenized: list[list[str]]) -> dict[str, float]:
        term_frequency = Counter(word for tokens in tokenized for word in tokens)
        sentence_frequency = Counter(word for tokens in tokenized for word in set(tokens))
        total = len(tokenized)
        weights: dict[str, float] = {}
        for word, count in term_frequency.items():
            idf = math.log(1 + total / sentence_frequency[word])
            weight = count * idf
            if word in DOMAIN_TERMS:
                weight *= DOMAIN_BOOST
            weights[word] = weight
        return weights

    @staticmethod
    def _sentence_score(sentence: str, tokens: list[str], weights: dict[str, float]) -> float:
        lowered = sentence.lower()
        score = sum(weights.get(word, 0.0) for word in tokens)
        score += IMPORTANCE_BOOST * sum(1 for keyword in IMPORTANCE_KEYWORDS if keyword in lowered)
        return score
