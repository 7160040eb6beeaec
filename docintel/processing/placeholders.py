"""Stand-in results used when a stage cannot produce a real one."""

from docintel.analysis.models import (
    Classification,
    DocumentAnalysis,
    Entities,
    SafetyAssessment,
)
from docintel.ocr.models import DocumentFile, OcrResult

PLACEHOLDER_PROVIDER = "placeholder"
OCR_PLACEHOLDER_CONFIDENCE = 0.1
ANALYSIS_PLACEHOLDER_CONFIDENCE = 0.3


def placeholder_ocr_result(file: DocumentFile, language: str) -> OcrResult:
    size_mb = file.size / (1024 * 1024)
    text = f"[OCR Failed] {file.name} - {file.mime_type} - {size_mb:.2f} MB"
    return OcrResult(
        text=text,
        confidence=OCR_PLACEHOLDER_CONFIDENCE,
        language=language,
        processing_time_ms=0,
        provider=PLACEHOLDER_PROVIDER,
        word_count=len(text.split()),
        character_count=len(text),
    )


def placeholder_analysis(file_name: str) -> DocumentAnalysis:
    return DocumentAnalysis(
        summary=f"Automatic analysis was not available for {file_name}.",
        entities=Entities(),
        classification=Classification(
            category="General",
            department="Operations",
            priority="medium",
            tags=["document", "processing-failed"],
        ),
        safety=SafetyAssessment(
            has_safety_issues=False,
            safety_score=25,
            issues=[],
            recommendations=["Manual review required due to processing errors"],
        ),
        confidence=ANALYSIS_PLACEHOLDER_CONFIDENCE,
        processing_time_ms=0,
        provider=PLACEHOLDER_PROVIDER,
    )
