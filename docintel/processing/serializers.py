"""camelCase JSON payloads for processing results."""

from dataclasses import asdict

from docintel.analysis.models import DocumentAnalysis
from docintel.ocr.models import OcrResult
from docintel.processing.batch import ProcessingStats
from docintel.processing.models import DocumentProcessingResult, ProgressEvent, StageSnapshot


def analysis_to_payload(analysis: DocumentAnalysis) -> dict[str, object]:
    payload: dict[str, object] = {
        "summary": analysis.summary,
        "entities": asdict(analysis.entities),
        "classification": asdict(analysis.classification),
        "safety": {
            "hasSafetyIssues": analysis.safety.has_safety_issues,
            "safetyScore": analysis.safety.safety_score,
            "issues": list(analysis.safety.issues),
            "recommendations": list(analysis.safety.recommendations),
        },
        "confidence": analysis.confidence,
        "processingTime": analysis.processing_time_ms,
        "provider": analysis.provider,
    }
    if analysis.summary_model is not None:
        payload["summaryModel"] = analysis.summary_model
    return payload


def ocr_to_payload(ocr: OcrResult) -> dict[str, object]:
    return {
        "text": ocr.text,
        "confidence": ocr.confidence,
        "language": ocr.language,
        "processingTime": ocr.processing_time_ms,
        "provider": ocr.provider,
        "wordCount": ocr.word_count,
        "characterCount": ocr.character_count,
        "pageCount": ocr.page_count,
    }


def event_to_payload(event: ProgressEvent) -> dict[str, object]:
    return {
        "documentId": event.document_id,
        "stage": event.stage,
        "progress": event.progress,
        "message": event.message,
        "timestamp": event.timestamp,
        "overallProgress": event.overall_progress,
    }


def stage_to_payload(stage: StageSnapshot) -> dict[str, object]:
    return {
        "id": stage.id,
        "name": stage.name,
        "status": stage.status,
        "progress": stage.progress,
        "estimatedTime": stage.estimated_time_ms,
        "actualTime": stage.actual_time_ms,
        "degraded": stage.degraded,
    }


def result_to_payload(result: DocumentProcessingResult) -> dict[str, object]:
    return {
        "documentId": result.document_id,
        "fileName": result.file_name,
        "fileSize": result.file_size,
        "fileType": result.file_type,
        "ocr": ocr_to_payload(result.ocr),
        "analysis": analysis_to_payload(result.analysis),
        "processingTime": result.processing_time_ms,
        "status": result.status.value,
        "errors": list(result.errors),
        "progressEvents": [event_to_payload(e) for e in result.progress_events],
        "stages": [stage_to_payload(s) for s in result.stages],
    }


def stats_to_payload(stats: ProcessingStats) -> dict[str, object]:
    return {
        "total": stats.total,
        "successful": stats.successful,
        "partial": stats.partial,
        "failed": stats.failed,
        "averageProcessingTime": stats.average_processing_time_ms,
        "totalProcessingTime": stats.total_processing_time_ms,
        "fileTypes": dict(stats.file_types),
        "providers": {"ocr": dict(stats.ocr_providers), "ai": dict(stats.ai_providers)},
    }
