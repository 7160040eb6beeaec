from dataclasses import dataclass, field

CATEGORIES = (
    "Safety", "Maintenance", "Operations", "Finance", "HR", "Compliance",
    "Technical", "Administrative", "General",
)
PRIORITIES = ("low", "medium", "high", "critical")


@dataclass(frozen=True)
class Entities:
    """Named things found in a document."""

    departments: list[str] = field(default_factory=list)
    dates: list[str] = field(default_factory=list)
    amounts: list[str] = field(default_factory=list)
    locations: list[str] = field(default_factory=list)
    people: list[str] = field(default_factory=list)
    regulations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Classification:
    category: str = "General"
    department: str = "Operations"
    priority: str = "medium"
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SafetyAssessment:
    has_safety_issues: bool = False
    safety_score: int = 50
    issues: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DocumentAnalysis:
    """Structured analysis of one document and the tier that produced it."""

    summary: str
    entities: Entities
    classification: Classification
    safety: SafetyAssessment
    confidence: float
    processing_time_ms: int
    provider: str
    summary_model: str | None = None
