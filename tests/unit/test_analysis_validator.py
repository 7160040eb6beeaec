from docintel.analysis.models import Classification, Entities, SafetyAssessment
from docintel.analysis.validator import validate_and_build


def _valid_payload() -> dict[str, object]:
    return {
        "summary": "Signal failure at Platform 3 requires inspection.",
        "entities": {
            "departments": ["Engineering", "Engineering", "Safety"],
            "dates": ["2024-03-01"],
            "amounts": [],
            "locations": ["Platform 3"],
            "people": [],
            "regulations": [],
        },
        "classification": {
            "category": "Safety",
            "department": "Engineering",
            "priority": "critical",
            "tags": ["signal", "platform"],
        },
        "safety": {
            "hasSafetyIssues": True,
            "safetyScore": 85,
            "issues": ["signal failure"],
            "recommendations": ["Inspect signalling"],
        },
        "confidence": 0.92,
    }


class TestValidateAndBuild:
    def test_builds_full_analysis(self) -> None:
        analysis = validate_and_build(_valid_payload(), provider="gemini", processing_time_ms=42)
        assert analysis.summary == "Signal failure at Platform 3 requires inspection."
        assert analysis.entities.departments == ["Engineering", "Safety"]
        assert analysis.classification == Classification(
            category="Safety", department="Engineering", priority="critical", tags=["signal", "platform"]
        )
        assert analysis.safety.safety_score == 85
        assert analysis.confidence == 0.92
        assert analysis.provider == "gemini"
        assert analysis.processing_time_ms == 42
        assert analysis.summary_model is None

    def test_empty_payload_uses_defaults(self) -> None:
        analysis = validate_and_build({}, provider="openai")
        assert analysis.summary == "No summary available"
        assert analysis.entities == Entities()
        assert analysis.classification == Classification()
        assert analysis.safety == SafetyAssessment()
        assert analysis.confidence == 0.8

    def test_unknown_category_and_priority_fall_back(self) -> None:
        payload = _valid_payload()
        payload["classification"] = {"category": "Weather", "priority": "ASAP", "department": " "}
        classification = validate_and_build(payload, provider="x").classification
        assert classification.category == "General"
        assert classification.priority == "medium"
        assert classification.department == "Operations"

    def test_category_and_priority_are_case_insensitive(self) -> None:
        payload = _valid_payload()
        payload["classification"] = {"category": "maintenance", "priority": "HIGH"}
        classification = validate_and_build(payload, provider="x").classification
        assert classification.category == "Maintenance"
        assert classification.priority == "high"

    def test_scores_are_clamped(self) -> None:
        payload = _valid_payload()
        payload["safety"] = {"safetyScore": 140.6, "issues": []}
        payload["confidence"] = 3
        analysis = validate_and_build(payload, provider="x")
        assert analysis.safety.safety_score == 100
        assert analysis.confidence == 1.0

    def test_non_numeric_scores_use_defaults(self) -> None:
        payload = _valid_payload()
        payload["safety"] = {"safetyScore": "high", "issues": ["loose cable"]}
        payload["confidence"] = True
        analysis = validate_and_build(payload, provider="x")
        assert analysis.safety.safety_score == 50
        assert analysis.confidence == 0.8

    def test_safety_flag_derived_from_issues_when_missing(self) -> None:
        payload = _valid_payload()
        payload["safety"] = {"issues": ["loose cable"]}
        assert validate_and_build(payload, provider="x").safety.has_safety_issues is True

    def test_snake_case_safety_keys_are_accepted(self) -> None:
        payload = _valid_payload()
        payload["safety"] = {"has_safety_issues": False, "safety_score": 10}
        safety = validate_and_build(payload, provider="x").safety
        assert safety.has_safety_issues is False
        assert safety.safety_score == 10

    def test_malformed_entity_lists_are_coerced(self) -> None:
        payload = _valid_payload()
        payload["entities"] = {"dates": "2024-03-01", "amounts": {"bad": 1}, "people": ["", "  Ravi Kumar "]}
        entities = validate_and_build(payload, provider="x").entities
        assert entities.dates == ["2024-03-01"]
        assert entities.amounts == []
        assert entities.people == ["Ravi Kumar"]

    def test_blank_summary_uses_default(self) -> None:
        payload = _valid_payload()
        payload["summary"] = "   "
        assert validate_and_build(payload, provider="x").summary == "No summary available"
