"""Text clean-up shared by the summarizer tiers."""

import re
import unicodedata

MAX_INPUT_CHARS = 4000

_WHITESPACE = re.compile(r"\s+")
_LEADING_NON_LETTERS = re.compile(r"^[^A-Za-z]+")
_KEPT_PUNCTUATION = frozenset(".,!?;:()-")

SUMMARY_KEYWORDS: tuple[str, ...] = (
    "safety", "important", "critical", "urgent", "compliance", "requirement",
    "procedure", "protocol", "maintenance", "operation", "training", "emergency",
    "hazard", "risk",
)


def _keep(char: str) -> bool:
    # Combining marks keep Indic scripts such as Malayalam readable.
    return (
        char.isalnum()
        or char.isspace()
        or char == "_"
        or char in _KEPT_PUNCTUATION
        or unicodedata.category(char).startswith("M")
    )


def preprocess(text: str, max_chars: int = MAX_INPUT_CHARS) -> str:
    collapsed = _WHITESPACE.sub(" ", text or "")
    cleaned = "".join(char for char in collapsed if _keep(char))
    return _WHITESPACE.sub(" ", cleaned).strip()[:max_chars]


def postprocess(summary: str) -> str:
    cleaned = _WHITESPACE.sub(" ", summary or "").strip()
    # Only strip leading junk when the summary is Latin script.
    if re.search(r"[A-Za-z]", cleaned):
        cleaned = _LEADING_NON_LETTERS.sub("", cleaned)
    if cleaned and cleaned[-1] not in ".!?":
        cleaned += "."
    return cleaned


def word_count(text: str) -> int:
    return len(text.split())


def compression_ratio(summary_words: int, original_words: int) -> float:
    if original_words <= 0:
        return 1.0
    return min(1.0, summary_words / original_words)
