from dataclasses import dataclass, field
from enum import Enum

from docintel.analysis.models import DocumentAnalysis
from docintel.ocr.models import OcrResult


class StageId(str, Enum):
    UPLOAD = "upload"
    OCR = "ocr"
    ANALYSIS = "analysis"
    SAFETY = "safety"
    INDEXING = "indexing"


class StageStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class ProcessingStatus(str, Enum):
    SUCCESS = "success"
    PARTIAL = "partial"
    FAILED = "failed"


# Event-only stage values that close a run.
COMPLETE_STAGE = "complete"
ERROR_STAGE = "error"
TERMINAL_STAGES = frozenset({COMPLETE_STAGE, ERROR_STAGE})


@dataclass
class ProcessingStage:
    """Mutable progress record for one stage of a run."""

    id: StageId
    name: str
    description: str
    estimated_time_ms: int
    status: StageStatus = StageStatus.PENDING
    progress: int = 0
    actual_time_ms: int | None = None
    degraded: bool = False


@dataclass(frozen=True)
class ProgressEvent:
    document_id: str
    stage: str
    progress: int
    message: str
    timestamp: float
    overall_progress: int = 0

    @property
    def is_terminal(self) -> bool:
        return self.stage in TERMINAL_STAGES


@dataclass(frozen=True)
class StageSnapshot:
    """Immutable copy of a ProcessingStage kept on the final result."""

    id: str
    name: str
    status: str
    progress: int
    estimated_time_ms: int
    actual_time_ms: int | None
    degraded: bool


@dataclass(frozen=True)
class DocumentProcessingResult:
    document_id: str
    file_name: str
    file_size: int
    file_type: str
    ocr: OcrResult
    analysis: DocumentAnalysis
    processing_time_ms: int
    status: ProcessingStatus
    errors: tuple[str, ...] = ()
    progress_events: tuple[ProgressEvent, ...] = ()
    stages: tuple[StageSnapshot, ...] = field(default_factory=tuple)
