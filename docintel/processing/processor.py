import time

from docintel.analysis.analyzer import CascadeAnalyzer
from docintel.analysis.factory import AnalyzerFactory
from docintel.analysis.models import DocumentAnalysis
from docintel.config.settings import DEFAULT_SUPPORTED_FORMATS, Settings
from docintel.logging.logger import Log
from docintel.ocr.base import BaseOcrProvider
from docintel.ocr.factory import build_ocr_service
from docintel.ocr.models import DocumentFile, OcrResult
from docintel.processing.models import (
    COMPLETE_STAGE,
    ERROR_STAGE,
    DocumentProcessingResult,
    ProcessingStatus,
    ProgressEvent,
)
from docintel.processing.pipeline import PipelineContext, PipelineStep
from docintel.processing.placeholders import placeholder_analysis, placeholder_ocr_result
from docintel.processing.progress import ProgressBroker, ProgressListener, ProgressSubscription
from docintel.processing.steps import (
    AnalysisStep,
    IndexingStep,
    OcrStep,
    SafetyCheckStep,
    UploadStep,
)
from docintel.processing.store import ResultStore

CONFIDENCE_FLOOR = 0.5


def classify_status(errors: list[str], ocr: OcrResult, analysis: DocumentAnalysis) -> ProcessingStatus:
    """success with no errors; partial if both confidences clear the floor; else failed."""
    if not errors:
        return ProcessingStatus.SUCCESS
    if ocr.confidence > CONFIDENCE_FLOOR and analysis.confidence > CONFIDENCE_FLOOR:
        return ProcessingStatus.PARTIAL
    return ProcessingStatus.FAILED


class DocumentProcessor:
    """Runs a document through upload -> ocr -> analysis -> safety -> indexing.

    Progress for each stage is published on the broker before the next stage
    starts. OCR and analysis failures are replaced by placeholders and noted
    in ``errors``; any other failure ends the run with an ``error`` event and
    a failed result. Every finished run is cached by document id.
    """

    def __init__(
        self,
        *,
        ocr: BaseOcrProvider,
        analyzer: CascadeAnalyzer,
        broker: ProgressBroker | None = None,
        store: ResultStore | None = None,
        max_file_size_bytes: int = 10 * 1024 * 1024,
        supported_formats: list[str] | None = None,
        safety_check_delay_seconds: float = 0.5,
        indexing_delay_seconds: float = 0.8,
    ) -> None:
        self._analyzer = analyzer
        self._broker = broker or ProgressBroker()
        self._store = store or ResultStore()
        self._steps: list[PipelineStep] = [
            UploadStep(
                self._broker,
                max_file_size_bytes=max_file_size_bytes,
                supported_formats=supported_formats or list(DEFAULT_SUPPORTED_FORMATS),
            ),
            OcrStep(self._broker, ocr),
            AnalysisStep(self._broker, analyzer),
            SafetyCheckStep(self._broker, safety_check_delay_seconds),
            IndexingStep(self._broker, indexing_delay_seconds),
        ]

    @property
    def broker(self) -> ProgressBroker:
        return self._broker

    async def process_document(
        self, file: DocumentFile, document_id: str, language: str = "en"
    ) -> DocumentProcessingResult:
        started = time.perf_counter()
        Log.info("Processing document", document_id=document_id, file=file.name)
        self._broker.begin(document_id)
        context = PipelineContext(document_id=document_id, file=file, language=language)

        try:
            for step in self._steps:
                context = await step.run(context)
            if context.ocr_result is None or context.analysis is None:
                raise ValueError("pipeline finished without results")

            elapsed = self._elapsed_ms(started)
            status = classify_status(context.errors, context.ocr_result, context.analysis)
            event = self._broker.record(
                document_id,
                COMPLETE_STAGE,
                100,
                f"Processing completed in {elapsed}ms",
                overall_progress=100,
            )
            result = self._build_result(
                context, context.ocr_result, context.analysis, status, elapsed, event
            )
        except Exception as exc:
            return self._finish_failed(context, exc, started)

        Log.info(
            "Document processed",
            document_id=document_id,
            status=status.value,
            provider=result.analysis.provider,
            elapsed_ms=elapsed,
        )
        return result

    def _finish_failed(
        self, context: PipelineContext, exc: Exception, started: float
    ) -> DocumentProcessingResult:
        Log.error("Document processing failed", document_id=context.document_id, error=repr(exc))
        current = context.tracker.current()
        if current is not None:
            context.tracker.fail(current)
        context.errors.append(f"Processing failed: {exc}")
        ocr = context.ocr_result or placeholder_ocr_result(context.file, context.language)
        analysis = context.analysis or placeholder_analysis(context.file.name)
        event = self._broker.record(
            context.document_id,
            ERROR_STAGE,
            0,
            f"Processing failed: {exc}",
            overall_progress=context.tracker.overall_progress(),
        )
        return self._build_result(
            context, ocr, analysis, ProcessingStatus.FAILED, self._elapsed_ms(started), event
        )

    def _build_result(
        self,
        context: PipelineContext,
        ocr: OcrResult,
        analysis: DocumentAnalysis,
        status: ProcessingStatus,
        elapsed_ms: int,
        terminal_event: ProgressEvent,
    ) -> DocumentProcessingResult:
        context.events.append(terminal_event)
        result = DocumentProcessingResult(
            document_id=context.document_id,
            file_name=context.file.name,
            file_size=context.file.size,
            file_type=context.file.mime_type,
            ocr=ocr,
            analysis=analysis,
            processing_time_ms=elapsed_ms,
            status=status,
            errors=tuple(context.errors),
            progress_events=tuple(context.events),
            stages=context.tracker.snapshot(),
        )
        # Cache before notifying so a listener reacting to the terminal event can fetch it.
        self._store.save(result)
        self._broker.dispatch(terminal_event)
        return result

    def on_progress(self, document_id: str, listener: ProgressListener) -> None:
        self._broker.on_progress(document_id, listener)

    def off_progress(self, document_id: str, listener: ProgressListener) -> None:
        self._broker.off_progress(document_id, listener)

    def subscribe(self, document_id: str) -> ProgressSubscription:
        return self._broker.subscribe(document_id)

    def get_processing_result(self, document_id: str) -> DocumentProcessingResult | None:
        return self._store.get(document_id)

    def get_all_processing_results(self) -> list[DocumentProcessingResult]:
        return self._store.all()

    def get_progress(self, document_id: str) -> int | None:
        """Overall percentage of the latest run, or None before any event."""
        event = self._broker.latest(document_id)
        return event.overall_progress if event else None

    def cleanup(self, document_id: str) -> None:
        """Forget the cached result and every progress consumer for ``document_id``."""
        self._store.remove(document_id)
        self._broker.cleanup(document_id)

    async def health_check(self) -> dict[str, bool]:
        return await self._analyzer.health_check()

    async def aclose(self) -> None:
        await self._analyzer.aclose()

    @staticmethod
    def _elapsed_ms(started: float) -> int:
        return int((time.perf_counter() - started) * 1000)


def build_processor(settings: Settings) -> DocumentProcessor:
    """Build a DocumentProcessor with all required adapters."""
    return DocumentProcessor(
        ocr=build_ocr_service(settings),
        analyzer=AnalyzerFactory.create(settings),
        max_file_size_bytes=settings.processing_max_file_size_bytes,
        supported_formats=settings.supported_formats,
        safety_check_delay_seconds=settings.safety_check_delay_seconds,
        indexing_delay_seconds=settings.indexing_delay_seconds,
    )
