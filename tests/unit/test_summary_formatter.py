from docintel.analysis.summary_formatter import (
    LABELS,
    MALAYALAM_PRIORITIES,
    MALAYALAM_TYPES,
    format_summary,
)
from docintel.features.models import TextFeatures


def _features() -> TextFeatures:
    return TextFeatures(
        document_type="Maintenance",
        priority="High",
        key_terms=["track", "inspection"],
        important_sentences=["Track inspection is due on Line 1", "Replace worn rail clips"],
        safety_info=["inspection"],
        compliance_info=["inspection"],
    )


class TestFormatSummary:
    def test_with_body(self) -> None:
        summary = format_summary(_features(), "bulletin.pdf", body="Inspect Line 1 track.")
        assert summary.splitlines()[:5] == [
            "Document Analysis: bulletin.pdf",
            "",
            "Type: Maintenance Document",
            "Priority: High",
            "",
        ]
        assert "Summary:\nInspect Line 1 track." in summary
        assert "Key Terms: track, inspection" in summary
        assert "Safety Elements: inspection" in summary
        assert "Compliance Elements: inspection" in summary
        assert "Key Points:" not in summary

    def test_without_body_lists_key_points(self) -> None:
        summary = format_summary(_features(), "bulletin.pdf")
        assert "Summary:" not in summary
        assert summary.endswith(
            "Key Points:\n1. Track inspection is due on Line 1\n2. Replace worn rail clips"
        )

    def test_malayalam_labels_and_values(self) -> None:
        labels = LABELS["ml"]
        summary = format_summary(_features(), "bulletin.pdf", language="ml")
        assert summary.startswith(f"{labels['heading']}: bulletin.pdf")
        assert f"{labels['type']}: {MALAYALAM_TYPES['Maintenance']}" in summary
        assert f"{labels['priority']}: {MALAYALAM_PRIORITIES['High']}" in summary
        assert "Type:" not in summary

    def test_unknown_language_uses_english(self) -> None:
        summary = format_summary(TextFeatures(), "x.txt", language="de")
        assert summary == "Document Analysis: x.txt\n\nType: General Document\nPriority: Medium"
