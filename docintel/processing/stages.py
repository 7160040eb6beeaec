import time
from collections.abc import Callable

from docintel.processing.models import (
    ProcessingStage,
    StageId,
    StageSnapshot,
    StageStatus,
)

STAGE_DEFINITIONS: tuple[tuple[StageId, str, str, int], ...] = (
    (StageId.UPLOAD, "File Upload", "Validating the uploaded file", 2000),
    (StageId.OCR, "OCR Processing", "Extracting text from the document", 5000),
    (StageId.ANALYSIS, "AI Analysis", "Summarizing and classifying the content", 8000),
    (StageId.SAFETY, "Safety Check", "Checking safety and compliance findings", 3000),
    (StageId.INDEXING, "Knowledge Indexing", "Indexing the document for search", 2000),
)


class StageTracker:
    """Tracks status and progress of the fixed stage sequence for one run."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._started_at: dict[StageId, float] = {}
        self.stages: dict[StageId, ProcessingStage] = {
            stage_id: ProcessingStage(
                id=stage_id,
                name=name,
                description=description,
                estimated_time_ms=estimate,
            )
            for stage_id, name, description, estimate in STAGE_DEFINITIONS
        }

    def start(self, stage_id: StageId) -> None:
        stage = self.stages[stage_id]
        stage.status = StageStatus.PROCESSING
        self._started_at[stage_id] = self._clock()

    def update(self, stage_id: StageId, progress: int) -> None:
        stage = self.stages[stage_id]
        stage.progress = max(stage.progress, min(100, progress))

    def complete(self, stage_id: StageId, *, degraded: bool = False) -> None:
        stage = self.stages[stage_id]
        stage.status = StageStatus.COMPLETED
        stage.progress = 100
        stage.degraded = degraded
        stage.actual_time_ms = self._elapsed_ms(stage_id)

    def fail(self, stage_id: StageId) -> None:
        stage = self.stages[stage_id]
        stage.status = StageStatus.ERROR
        stage.actual_time_ms = self._elapsed_ms(stage_id)

    def current(self) -> StageId | None:
        for stage in self.stages.values():
            if stage.status is StageStatus.PROCESSING:
                return stage.id
        return None

    def overall_progress(self) -> int:
        """Percent done: (completed stages + fraction of in-flight stages) / total."""
        completed = sum(1 for s in self.stages.values() if s.status is StageStatus.COMPLETED)
        in_flight = [s.progress for s in self.stages.values() if s.status is StageStatus.PROCESSING]
        fraction = (sum(in_flight) / len(in_flight)) / 100 if in_flight else 0.0
        return round((completed + fraction) / len(self.stages) * 100)

    def snapshot(self) -> tuple[StageSnapshot, ...]:
        return tuple(
            StageSnapshot(
                id=stage.id.value,
                name=stage.name,
                status=stage.status.value,
                progress=stage.progress,
                estimated_time_ms=stage.estimated_time_ms,
                actual_time_ms=stage.actual_time_ms,
                degraded=stage.degraded,
            )
            for stage in self.stages.values()
        )

    def _elapsed_ms(self, stage_id: StageId) -> int | None:
        started = self._started_at.get(stage_id)
        if started is None:
            return None
        return int((self._clock() - started) * 1000)
