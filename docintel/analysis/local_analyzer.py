import time

from docintel.analysis.models import (
    Classification,
    DocumentAnalysis,
    Entities,
    SafetyAssessment,
)
from docintel.analysis.summary_formatter import format_summary
from docintel.features.extractor import (
    calculate_safety_score,
    detect_department,
    extract_features,
    safety_recommendations,
)
from docintel.features.models import TextFeatures
from docintel.logging.logger import Log
from docintel.summarization.ml_summarizer import MLSummarizer

EMPTY_DOCUMENT_SUMMARY = "No content available for analysis."


class LocalAnalyzer:
    """Terminal tier of the cascade: rule-based features plus local summarization."""

    PROVIDER_NAME = "local-ai"
    CONFIDENCE = 0.85

    def __init__(self, summarizer: MLSummarizer | None = None) -> None:
        self._summarizer = summarizer

    async def analyze(
        self, content: str, file_name: str, language: str = "en"
    ) -> DocumentAnalysis:
        started = time.perf_counter()
        content = content or ""
        features = extract_features(content)

        summary, summary_model = await self._summarize(content, features, file_name, language)

        tags = list(dict.fromkeys([*features.key_terms, *features.safety_info, *features.compliance_info]))
        analysis = DocumentAnalysis(
            summary=summary,
            entities=Entities(
                departments=features.departments,
                dates=features.dates,
                amounts=features.amounts,
                locations=features.locations,
                people=features.people,
                regulations=features.regulations,
            ),
            classification=Classification(
                category=features.document_type,
                department=detect_department(content),
                priority=features.priority.lower(),
                tags=tags,
            ),
            safety=SafetyAssessment(
                has_safety_issues=bool(features.safety_info),
                safety_score=calculate_safety_score(content, features.safety_info),
                issues=features.safety_info,
                recommendations=safety_recommendations(features.safety_info, content),
            ),
            confidence=self.CONFIDENCE,
            processing_time_ms=int((time.perf_counter() - started) * 1000),
            provider=self.PROVIDER_NAME,
            summary_model=summary_model,
        )
        Log.info(
            "Local analysis complete",
            file=file_name,
            category=analysis.classification.category,
            summary_model=summary_model,
        )
        return analysis

    async def _summarize(
        self, content: str, features: TextFeatures, file_name: str, language: str
    ) -> tuple[str, str]:
        if not content.strip():
            return EMPTY_DOCUMENT_SUMMARY, "rule-based"
        if self._summarizer is not None:
            try:
                result = await self._summarizer.summarize(content)
            except Exception as exc:
                Log.warning("Local summarization failed, using key points", file=file_name, error=exc)
            else:
                return format_summary(features, file_name, language, body=result.summary), result.model
        return format_summary(features, file_name, language), "rule-based"

    def close(self) -> None:
        if self._summarizer is not None:
            self._summarizer.close()
