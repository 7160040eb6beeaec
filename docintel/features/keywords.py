"""Fixed vocabularies used by the rule-based feature extractor.

Dict order is significant: category and priority ties go to the entry
listed first.
"""

DOCUMENT_TYPE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "Safety": ("safety", "hazard", "accident", "incident", "emergency", "protocol", "procedure"),
    "Maintenance": ("maintenance", "repair", "inspection", "service", "overhaul", "check"),
    "Operations": ("operation", "service", "schedule", "timetable", "route", "line"),
    "Finance": ("budget", "cost", "financial", "expense", "revenue", "allocation"),
    "HR": ("personnel", "employee", "staff", "training", "hr", "recruitment"),
    "Compliance": ("compliance", "regulation", "standard", "requirement", "audit"),
    "Technical": ("technical", "engineering", "design", "specification", "drawing"),
    "Administrative": ("administrative", "policy", "procedure", "guideline", "manual"),
}
DEFAULT_DOCUMENT_TYPE = "General"

PRIORITY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "Critical": ("urgent", "critical", "emergency", "immediate", "asap", "rush"),
    "High": ("important", "priority", "high", "significant", "major"),
    "Medium": ("moderate", "medium", "standard", "normal"),
    "Low": ("routine", "low", "minor", "regular", "scheduled"),
}
DEFAULT_PRIORITY = "Medium"

STOP_WORDS = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "had", "her",
    "was", "one", "our", "out", "day", "get", "has", "him", "his", "how", "man",
    "new", "now", "old", "see", "two", "way", "who", "boy", "did", "its", "let",
    "put", "say", "she", "too", "use", "this", "that", "with", "have", "from",
    "they", "know", "want", "been", "good", "much", "some", "time", "very",
    "when", "come", "just", "like", "long", "make", "many", "over", "such",
    "take", "than", "them", "well", "were", "will", "would", "there", "their",
    "what", "which", "whom", "whose", "then", "here", "these", "those", "into",
    "also", "about", "after", "before", "should", "could", "shall", "being",
    "document", "file", "page", "section", "chapter", "part", "item",
})

DOMAIN_TERMS = frozenset({
    "safety", "maintenance", "operation", "compliance", "inspection", "training",
    "equipment", "platform", "station", "track", "signal", "passenger", "freight",
    "locomotive", "rolling", "infrastructure", "security", "emergency", "protocol",
    "procedure", "standard", "regulation", "policy", "guideline", "requirement",
    "audit",
})

IMPORTANCE_KEYWORDS: tuple[str, ...] = (
    "important", "critical", "urgent", "safety", "compliance", "requirement",
    "deadline", "action", "must", "should", "emergency", "hazard", "risk",
    "procedure", "protocol",
)

SENTENCE_DOMAIN_TERMS: tuple[str, ...] = (
    "platform", "station", "track", "signal", "train", "passenger",
    "maintenance", "inspection", "safety", "operation",
)

SAFETY_KEYWORDS: tuple[str, ...] = (
    "safety", "hazard", "risk", "accident", "incident", "emergency", "protocol",
    "procedure", "training", "equipment", "inspection", "maintenance", "warning",
    "caution", "danger", "secure",
)

COMPLIANCE_KEYWORDS: tuple[str, ...] = (
    "compliance", "regulation", "standard", "requirement", "audit", "inspection",
    "certification", "policy", "guideline", "rule", "law", "statute", "mandate",
    "obligation",
)

CRITICAL_SAFETY_TERMS: tuple[str, ...] = ("emergency", "hazard", "accident", "incident")
PROCEDURE_SAFETY_TERMS: tuple[str, ...] = ("protocol", "procedure", "training", "inspection")

DEPARTMENTS: tuple[str, ...] = (
    "Operations", "Engineering", "HR", "Finance", "Safety", "Maintenance", "IT",
    "Compliance", "Security", "Administration", "Planning", "Quality", "Training",
    "Procurement", "Legal",
)

LOCATION_WORDS: tuple[str, ...] = (
    "Station", "Platform", "Track", "Line", "Route", "Terminal", "Depot", "Yard",
    "Workshop", "Office", "Building", "Facility", "Zone",
)

REGULATION_WORDS: tuple[str, ...] = (
    "Regulation", "Rule", "Standard", "Protocol", "Guideline", "Policy",
    "Procedure", "Manual", "Code", "Act", "Law", "Statute",
)

MONTHS: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June", "July", "August",
    "September", "October", "November", "December",
)

# Ordered rules for picking an owning department; first match wins.
DEPARTMENT_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Safety", ("safety",)),
    ("Maintenance", ("maintenance",)),
    ("Finance", ("finance", "financial", "budget")),
    ("HR", ("hr", "personnel", "human resources")),
    ("IT", ("it", "technology")),
    ("Compliance", ("compliance",)),
    ("Engineering", ("engineering",)),
    ("Security", ("security",)),
)
DEFAULT_DEPARTMENT = "Operations"

SAFETY_RECOMMENDATIONS: tuple[tuple[str, str], ...] = (
    ("safety", "Review and update safety protocols"),
    ("training", "Ensure staff training is current and comprehensive"),
    ("equipment", "Verify equipment safety and maintenance status"),
    ("inspection", "Schedule regular safety inspections"),
    ("emergency", "Review emergency response procedures"),
    ("hazard", "Conduct hazard identification and risk assessment"),
)

CONTENT_RECOMMENDATIONS: tuple[tuple[str, str], ...] = (
    ("platform", "Review platform safety measures and passenger flow"),
    ("track", "Inspect track conditions and signaling systems"),
    ("passenger", "Ensure passenger safety protocols are followed"),
)

DEFAULT_RECOMMENDATION = "Conduct general safety review"
