import asyncio

from docintel.analysis.analyzer import CascadeAnalyzer
from docintel.logging.logger import Log
from docintel.ocr.base import BaseOcrProvider
from docintel.processing.exceptions import UploadValidationError
from docintel.processing.models import StageId
from docintel.processing.pipeline import PipelineContext, StageStep
from docintel.processing.placeholders import placeholder_analysis, placeholder_ocr_result
from docintel.processing.progress import ProgressBroker


class UploadStep(StageStep):
    """Validates size and format. The only stage whose failure aborts the run."""

    stage_id = StageId.UPLOAD

    def __init__(
        self,
        broker: ProgressBroker,
        *,
        max_file_size_bytes: int,
        supported_formats: list[str],
    ) -> None:
        super().__init__(broker)
        self._max_file_size_bytes = max_file_size_bytes
        self._supported_formats = frozenset(supported_formats)

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.tracker.start(self.stage_id)
        self._emit(context, 10, "Starting document processing...")
        file = context.file
        if file.extension not in self._supported_formats:
            context.tracker.fail(self.stage_id)
            raise UploadValidationError(
                f"Unsupported file format '{file.extension or file.mime_type}' for {file.name}"
            )
        if file.size > self._max_file_size_bytes:
            context.tracker.fail(self.stage_id)
            raise UploadValidationError(
                f"{file.name} is {file.size} bytes; the limit is {self._max_file_size_bytes}"
            )
        context.tracker.complete(self.stage_id)
        self._emit(context, 100, f"Upload accepted: {file.name} ({file.size} bytes)")
        return context


class OcrStep(StageStep):
    stage_id = StageId.OCR

    def __init__(self, broker: ProgressBroker, ocr: BaseOcrProvider) -> None:
        super().__init__(broker)
        self._ocr = ocr

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.tracker.start(self.stage_id)
        self._emit(context, 20, "Initializing OCR processing...")
        try:
            context.ocr_result = await self._ocr.extract(context.file, context.language)
        except Exception as exc:
            Log.warning("OCR failed, using placeholder", document_id=context.document_id, error=exc)
            context.ocr_result = placeholder_ocr_result(context.file, context.language)
            context.errors.append(f"OCR failed: {exc}")
            context.tracker.complete(self.stage_id, degraded=True)
            self._emit(context, 100, f"OCR failed, continuing with placeholder text: {exc}")
            return context
        context.tracker.complete(self.stage_id)
        self._emit(
            context, 100, f"OCR completed: {len(context.ocr_result.text)} characters extracted"
        )
        return context


class AnalysisStep(StageStep):
    stage_id = StageId.ANALYSIS

    def __init__(self, broker: ProgressBroker, analyzer: CascadeAnalyzer) -> None:
        super().__init__(broker)
        self._analyzer = analyzer

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.ocr_result is None:
            raise ValueError("PipelineContext.ocr_result must be set before analysis")
        context.tracker.start(self.stage_id)
        self._emit(context, 10, "Starting AI analysis...")
        self._emit(context, 30, "Analyzing document content...")
        try:
            context.analysis = await self._analyzer.analyze_document(
                context.ocr_result.text, context.file.name, context.language
            )
        except Exception as exc:
            Log.error(
                "Analysis failed, using placeholder", document_id=context.document_id, error=repr(exc)
            )
            context.analysis = placeholder_analysis(context.file.name)
            context.errors.append(f"AI analysis failed: {exc}")
            context.tracker.complete(self.stage_id, degraded=True)
            self._emit(context, 100, f"AI analysis failed, continuing with placeholder: {exc}")
            return context
        context.tracker.complete(self.stage_id)
        self._emit(
            context,
            100,
            f"Analysis completed by {context.analysis.provider}: "
            f"{len(context.analysis.summary)} characters summary",
        )
        return context


class SafetyCheckStep(StageStep):
    """Simulated hand-off to the external safety-check service."""

    stage_id = StageId.SAFETY

    def __init__(self, broker: ProgressBroker, delay_seconds: float = 0.5) -> None:
        super().__init__(broker)
        self._delay_seconds = delay_seconds

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.tracker.start(self.stage_id)
        self._emit(context, 20, "Performing safety analysis...")
        self._emit(context, 60, "Checking compliance requirements...")
        await asyncio.sleep(self._delay_seconds)
        context.tracker.complete(self.stage_id)
        score = context.analysis.safety.safety_score if context.analysis else None
        self._emit(context, 100, f"Safety analysis completed (score {score})")
        return context


class IndexingStep(StageStep):
    """Simulated hand-off to the external search-indexing service."""

    stage_id = StageId.INDEXING

    def __init__(self, broker: ProgressBroker, delay_seconds: float = 0.8) -> None:
        super().__init__(broker)
        self._delay_seconds = delay_seconds

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.tracker.start(self.stage_id)
        self._emit(context, 20, "Indexing document in knowledge graph...")
        self._emit(context, 60, "Creating document relationships...")
        await asyncio.sleep(self._delay_seconds)
        context.tracker.complete(self.stage_id)
        self._emit(context, 100, "Document indexed successfully")
        return context
