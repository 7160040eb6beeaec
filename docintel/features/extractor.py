"""Rule-based text feature extractor.

Pure functions over raw text. Nothing here raises: empty or odd input yields
empty lists and the default category/priority.
"""

import re
from collections import Counter

from docintel.features.entities import (
    extract_amounts,
    extract_dates,
    extract_departments,
    extract_locations,
    extract_people,
    extract_regulations,
)
from docintel.features.keywords import (
    CONTENT_RECOMMENDATIONS,
    COMPLIANCE_KEYWORDS,
    CRITICAL_SAFETY_TERMS,
    DEFAULT_DEPARTMENT,
    DEFAULT_DOCUMENT_TYPE,
    DEFAULT_PRIORITY,
    DEFAULT_RECOMMENDATION,
    DEPARTMENT_RULES,
    DOCUMENT_TYPE_KEYWORDS,
    DOMAIN_TERMS,
    IMPORTANCE_KEYWORDS,
    PRIORITY_KEYWORDS,
    PROCEDURE_SAFETY_TERMS,
    SAFETY_KEYWORDS,
    SAFETY_RECOMMENDATIONS,
    SENTENCE_DOMAIN_TERMS,
    STOP_WORDS,
)
from docintel.features.models import TextFeatures

SENTENCE_SPLIT = re.compile(r"[.!?]+")
_PUNCTUATION = re.compile(r"[^\w\s]")

MIN_SENTENCE_CHARS = 20
MIN_TERM_CHARS = 4
DEFAULT_KEY_TERM_LIMIT = 15
DEFAULT_SENTENCE_LIMIT = 5


def extract_features(text: str) -> TextFeatures:
    """Run every extractor over ``text`` and bundle the results."""
    text = text or ""
    return TextFeatures(
        document_type=detect_document_type(text),
        priority=detect_priority(text),
        key_terms=extract_key_terms(text),
        important_sentences=extract_important_sentences(text),
        safety_info=extract_safety_info(text),
        compliance_info=extract_compliance_info(text),
        departments=extract_departments(text),
        dates=extract_dates(text),
        amounts=extract_amounts(text),
        locations=extract_locations(text),
        people=extract_people(text),
        regulations=extract_regulations(text),
    )


def _best_scoring(text: str, table: dict[str, tuple[str, ...]], default: str) -> str:
    lowered = text.lower()
    best, best_score = default, 0
    for label, keywords in table.items():
        score = sum(lowered.count(keyword) for keyword in keywords)
        if score > best_score:
            best, best_score = label, score
    return best


def detect_document_type(text: str) -> str:
    return _best_scoring(text, DOCUMENT_TYPE_KEYWORDS, DEFAULT_DOCUMENT_TYPE)


def detect_priority(text: str) -> str:
    return _best_scoring(text, PRIORITY_KEYWORDS, DEFAULT_PRIORITY)


def tokenize(text: str) -> list[str]:
    return _PUNCTUATION.sub(" ", text.lower()).split()


def extract_key_terms(text: str, limit: int = DEFAULT_KEY_TERM_LIMIT) -> list[str]:
    counts = Counter(
        word for word in tokenize(text)
        if len(word) >= MIN_TERM_CHARS and word not in STOP_WORDS
    )
    scored = [
        (word, count * 2 if word in DOMAIN_TERMS else count)
        for word, count in counts.items()
    ]
    # sorted() is stable and Counter keeps first-seen order, so ties stay in text order.
    scored.sort(key=lambda item: item[1], reverse=True)
    return [word for word, _ in scored[:limit]]


def split_sentences(text: str, min_chars: int = MIN_SENTENCE_CHARS) -> list[str]:
    return [
        sentence.strip()
        for sentence in SENTENCE_SPLIT.split(text)
        if len(sentence.strip()) > min_chars
    ]


def score_sentence(sentence: str) -> int:
    lowered = sentence.lower()
    score = sum(2 for keyword in IMPORTANCE_KEYWORDS if keyword in lowered)
    score += sum(1 for term in SENTENCE_DOMAIN_TERMS if term in lowered)
    if 50 <= len(sentence) < 200:
        score += 1
    return score


def extract_important_sentences(text: str, limit: int = DEFAULT_SENTENCE_LIMIT) -> list[str]:
    sentences = split_sentences(text)
    ranked = sorted(sentences, key=score_sentence, reverse=True)
    return ranked[:limit]


def _present(text: str, keywords: tuple[str, ...]) -> list[str]:
    lowered = text.lower()
    return [keyword for keyword in keywords if keyword in lowered]


def extract_safety_info(text: str) -> list[str]:
    return _present(text, SAFETY_KEYWORDS)


def extract_compliance_info(text: str) -> list[str]:
    return _present(text, COMPLIANCE_KEYWORDS)


def detect_department(text: str) -> str:
    """Pick the owning department from the first matching rule."""
    lowered = text.lower()
    for department, words in DEPARTMENT_RULES:
        if any(re.search(rf"\b{re.escape(word)}\b", lowered) for word in words):
            return department
    return DEFAULT_DEPARTMENT


def calculate_safety_score(text: str, safety_info: list[str]) -> int:
    lowered = text.lower()
    score = 25 + 10 * len(safety_info)
    score += 15 * sum(1 for term in CRITICAL_SAFETY_TERMS if term in lowered)
    score += 5 * sum(1 for term in PROCEDURE_SAFETY_TERMS if term in lowered)
    return min(score, 100)


def safety_recommendations(safety_info: list[str], text: str) -> list[str]:
    lowered = text.lower()
    recommendations = [
        advice for keyword, advice in SAFETY_RECOMMENDATIONS if keyword in safety_info
    ]
    recommendations.extend(
        advice for keyword, advice in CONTENT_RECOMMENDATIONS if keyword in lowered
    )
    return recommendations or [DEFAULT_RECOMMENDATION]
