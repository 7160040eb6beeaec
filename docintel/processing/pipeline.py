from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from docintel.analysis.models import DocumentAnalysis
from docintel.ocr.models import DocumentFile, OcrResult
from docintel.processing.models import ProgressEvent, StageId
from docintel.processing.progress import ProgressBroker
from docintel.processing.stages import StageTracker


@dataclass(slots=True)
class PipelineContext:
    document_id: str
    file: DocumentFile
    language: str = "en"
    tracker: StageTracker = field(default_factory=StageTracker)
    ocr_result: OcrResult | None = None
    analysis: DocumentAnalysis | None = None
    errors: list[str] = field(default_factory=list)
    events: list[ProgressEvent] = field(default_factory=list)


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError


class StageStep(PipelineStep):
    """A step that owns one tracked stage and reports its progress."""

    stage_id: StageId

    def __init__(self, broker: ProgressBroker) -> None:
        self._broker = broker

    def _emit(self, context: PipelineContext, progress: int, message: str) -> None:
        context.tracker.update(self.stage_id, progress)
        event = self._broker.publish(
            context.document_id,
            self.stage_id.value,
            progress,
            message,
            overall_progress=context.tracker.overall_progress(),
        )
        context.events.append(event)
