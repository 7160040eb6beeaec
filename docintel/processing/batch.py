import asyncio
import uuid
from collections import Counter
from dataclasses import dataclass, field

from docintel.logging.logger import Log
from docintel.ocr.models import DocumentFile
from docintel.processing.models import DocumentProcessingResult, ProcessingStatus
from docintel.processing.processor import DocumentProcessor


def new_document_id() -> str:
    return f"doc_{uuid.uuid4().hex[:12]}"


async def process_documents(
    processor: DocumentProcessor,
    files: list[DocumentFile],
    *,
    language: str = "en",
    batch_size: int = 5,
) -> list[DocumentProcessingResult]:
    """Process files in slices of ``batch_size`` running concurrently.

    Results keep the order of ``files``.
    """
    batch_size = max(1, batch_size)
    results: list[DocumentProcessingResult] = []
    for offset in range(0, len(files), batch_size):
        batch = files[offset: offset + batch_size]
        Log.info("Processing batch", offset=offset, size=len(batch))
        results.extend(
            await asyncio.gather(
                *(processor.process_document(file, new_document_id(), language) for file in batch)
            )
        )
    return results


@dataclass(frozen=True)
class ProcessingStats:
    total: int = 0
    successful: int = 0
    partial: int = 0
    failed: int = 0
    average_processing_time_ms: float = 0.0
    total_processing_time_ms: int = 0
    file_types: dict[str, int] = field(default_factory=dict)
    ocr_providers: dict[str, int] = field(default_factory=dict)
    ai_providers: dict[str, int] = field(default_factory=dict)


def processing_stats(results: list[DocumentProcessingResult]) -> ProcessingStats:
    if not results:
        return ProcessingStats()
    statuses = Counter(result.status for result in results)
    total_time = sum(result.processing_time_ms for result in results)
    return ProcessingStats(
        total=len(results),
        successful=statuses[ProcessingStatus.SUCCESS],
        partial=statuses[ProcessingStatus.PARTIAL],
        failed=statuses[ProcessingStatus.FAILED],
        average_processing_time_ms=total_time / len(results),
        total_processing_time_ms=total_time,
        file_types=dict(Counter(result.file_type or "unknown" for result in results)),
        ocr_providers=dict(Counter(result.ocr.provider for result in results)),
        ai_providers=dict(Counter(result.analysis.provider for result in results)),
    )
