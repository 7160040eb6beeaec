from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class SummarizationResult:
    """Summary text plus the bookkeeping every summarizer tier reports."""

    summary: str
    confidence: float
    processing_time_ms: int
    model: str
    word_count: int
    original_word_count: int
    compression_ratio: float


@dataclass(frozen=True)
class MLSummarizationOptions:
    """Caller overrides for model generation; ``None`` keeps the per-type default."""

    max_length: int | None = None
    min_length: int | None = None
    do_sample: bool = False
    temperature: float = 1.0
    top_p: float = 1.0
    top_k: int = 50
    repetition_penalty: float = 1.0


class MLModelState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    FAILED = "failed"
