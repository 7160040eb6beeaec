from dataclasses import dataclass, field


@dataclass(frozen=True)
class TextFeatures:
    """Rule-based features extracted from raw document text."""

    document_type: str = "General"
    priority: str = "Medium"
    key_terms: list[str] = field(default_factory=list)
    important_sentences: list[str] = field(default_factory=list)
    safety_info: list[str] = field(default_factory=list)
    compliance_info: list[str] = field(default_factory=list)
    departments: list[str] = field(default_factory=list)
    dates: list[str] = field(default_factory=list)
    amounts: list[str] = field(default_factory=list)
    locations: list[str] = field(default_factory=list)
    people: list[str] = field(default_factory=list)
    regulations: list[str] = field(default_factory=list)
