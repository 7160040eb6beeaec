"""Regex-based entity extraction (departments, dates, amounts, locations,
people, regulations).

Every extractor returns a list deduplicated in first-seen order and never
raises on arbitrary input.
"""

import re
from collections.abc import Iterable

from docintel.features.keywords import (
    DEPARTMENTS,
    LOCATION_WORDS,
    MONTHS,
    REGULATION_WORDS,
)

# Three-letter stems so abbreviations ("Jan", "Sept.") match as well as full names.
_MONTH_ALTERNATION = "|".join(month[:3] for month in MONTHS)

_DATE_PATTERNS = (
    re.compile(r"\b\d{4}-\d{2}-\d{2}\b"),
    re.compile(r"\b\d{1,2}[/-]\d{1,2}[/-](?:\d{4}|\d{2})\b"),
    re.compile(rf"\b(?:{_MONTH_ALTERNATION})[a-z]*\.?\s+\d{{1,2}},?\s+\d{{4}}\b", re.IGNORECASE),
    re.compile(rf"\b\d{{1,2}}\s+(?:{_MONTH_ALTERNATION})[a-z]*\.?,?\s+\d{{4}}\b", re.IGNORECASE),
)

_AMOUNT_PATTERNS = (
    re.compile(r"(?:₹|\$|\bRs\.?|\bINR)\s?\d[\d,]*(?:\.\d+)?", re.IGNORECASE),
    re.compile(
        r"\b\d[\d,]*(?:\.\d+)?\s?(?:lakhs?|crores?|thousand|million|billion)\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b\d{1,3}(?:,\d{2,3})+(?:\.\d+)?\b"),
)

_CAPITALIZED_RUN = re.compile(r"\b[A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)+\b")

_REGULATION_REFERENCE = re.compile(
    r"\b(?:Rule|Regulation|Section|Clause|Act)\s+\d+(?:\.\d+)*\b", re.IGNORECASE
)

# Capitalized vocabulary that the person pattern would otherwise pick up.
_NOT_A_NAME = frozenset(
    word.lower()
    for word in (
        *DEPARTMENTS, *LOCATION_WORDS, *REGULATION_WORDS, *MONTHS,
        "Contact", "Department", "Document", "Report", "Safety", "Emergency",
        "Urgent", "Please", "Dear", "Subject", "Note", "The", "This", "All",
        "Metro", "Railway", "Rail", "Train", "Signal", "Inspection", "Notice",
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
    )
)


def _dedupe(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(v.strip() for v in values if v and v.strip()))


def _word_pattern(word: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE)


_DEPARTMENT_PATTERNS = tuple((name, _word_pattern(name)) for name in DEPARTMENTS)
_LOCATION_PATTERNS = tuple(
    (name, re.compile(rf"\b{name}s?\b", re.IGNORECASE)) for name in LOCATION_WORDS
)
_REGULATION_PATTERNS = tuple((name, _word_pattern(name)) for name in REGULATION_WORDS)


def extract_departments(text: str) -> list[str]:
    return [name for name, pattern in _DEPARTMENT_PATTERNS if pattern.search(text)]


def extract_dates(text: str) -> list[str]:
    found: list[tuple[int, str]] = []
    for pattern in _DATE_PATTERNS:
        found.extend((m.start(), m.group(0)) for m in pattern.finditer(text))
    found.sort(key=lambda item: item[0])
    return _dedupe(value for _, value in found)


def extract_amounts(text: str) -> list[str]:
    found: list[tuple[int, int, str]] = []
    for pattern in _AMOUNT_PATTERNS:
        found.extend((m.start(), m.end(), m.group(0)) for m in pattern.finditer(text))
    found.sort(key=lambda item: (item[0], -item[1]))
    amounts: list[str] = []
    covered_until = -1
    for start, end, value in found:
        # Skip matches nested inside a longer, earlier match.
        if start < covered_until:
            continue
        amounts.append(value)
        covered_until = end
    return _dedupe(amounts)


def extract_locations(text: str) -> list[str]:
    return [name for name, pattern in _LOCATION_PATTERNS if pattern.search(text)]


def extract_people(text: str) -> list[str]:
    """First two words of each run of capitalized words outside the known vocabulary."""
    people = []
    for match in _CAPITALIZED_RUN.finditer(text):
        segment: list[str] = []
        for word in match.group(0).split():
            if word.lower() not in _NOT_A_NAME:
                segment.append(word)
                continue
            if len(segment) >= 2:
                people.append(" ".join(segment[:2]))
            segment = []
        if len(segment) >= 2:
            people.append(" ".join(segment[:2]))
    return _dedupe(people)


def extract_regulations(text: str) -> list[str]:
    found = [name for name, pattern in _REGULATION_PATTERNS if pattern.search(text)]
    found.extend(m.group(0) for m in _REGULATION_REFERENCE.finditer(text))
    return _dedupe(found)
