"""Builds a DocumentAnalysis from loosely-shaped provider JSON.

Missing or malformed fields fall back to defaults one by one; nothing here
raises for bad provider data.
"""

from typing import Any

from docintel.analysis.models import (
    CATEGORIES,
    PRIORITIES,
    Classification,
    DocumentAnalysis,
    Entities,
    SafetyAssessment,
)

DEFAULT_SUMMARY = "No summary available"
DEFAULT_CONFIDENCE = 0.8
DEFAULT_SAFETY_SCORE = 50

_ENTITY_FIELDS = ("departments", "dates", "amounts", "locations", "people", "regulations")
_CATEGORY_LOOKUP = {category.lower(): category for category in CATEGORIES}


def validate_and_build(
    data: dict[str, Any],
    *,
    provider: str,
    processing_time_ms: int = 0,
) -> DocumentAnalysis:
    return DocumentAnalysis(
        summary=_build_summary(data.get("summary")),
        entities=_build_entities(data.get("entities")),
        classification=_build_classification(data.get("classification")),
        safety=_build_safety(data.get("safety")),
        confidence=_build_confidence(data.get("confidence")),
        processing_time_ms=processing_time_ms,
        provider=provider,
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _string_list(raw: Any) -> list[str]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list):
        return []
    items = (str(item).strip() for item in raw if isinstance(item, (str, int, float)))
    return list(dict.fromkeys(item for item in items if item))


def _build_summary(raw: Any) -> str:
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    return DEFAULT_SUMMARY


def _build_entities(raw: Any) -> Entities:
    if not isinstance(raw, dict):
        return Entities()
    return Entities(**{name: _string_list(raw.get(name)) for name in _ENTITY_FIELDS})


def _build_classification(raw: Any) -> Classification:
    if not isinstance(raw, dict):
        return Classification()
    category = raw.get("category")
    category = _CATEGORY_LOOKUP.get(category.strip().lower(), "General") if isinstance(category, str) else "General"
    department = raw.get("department")
    if not isinstance(department, str) or not department.strip():
        department = "Operations"
    priority = raw.get("priority")
    priority = priority.strip().lower() if isinstance(priority, str) else ""
    if priority not in PRIORITIES:
        priority = "medium"
    return Classification(
        category=category,
        department=department.strip(),
        priority=priority,
        tags=_string_list(raw.get("tags")),
    )


def _build_safety(raw: Any) -> SafetyAssessment:
    if not isinstance(raw, dict):
        return SafetyAssessment()
    issues = _string_list(raw.get("issues"))
    flag = raw.get("hasSafetyIssues", raw.get("has_safety_issues"))
    has_issues = flag if isinstance(flag, bool) else bool(issues)
    score = raw.get("safetyScore", raw.get("safety_score"))
    safety_score = (
        int(round(min(100.0, max(0.0, float(score))))) if _is_number(score) else DEFAULT_SAFETY_SCORE
    )
    return SafetyAssessment(
        has_safety_issues=has_issues,
        safety_score=safety_score,
        issues=issues,
        recommendations=_string_list(raw.get("recommendations")),
    )


def _build_confidence(raw: Any) -> float:
    if not _is_number(raw):
        return DEFAULT_CONFIDENCE
    return min(1.0, max(0.0, float(raw)))
