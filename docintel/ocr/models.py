from dataclasses import dataclass
from pathlib import PurePath


@dataclass(frozen=True)
class DocumentFile:
    """An uploaded document: its name, raw bytes and declared MIME type."""

    name: str
    content: bytes
    mime_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def extension(self) -> str:
        return PurePath(self.name).suffix.lower().lstrip(".")


@dataclass(frozen=True)
class OcrResult:
    """Text recovered from a document plus extraction metadata."""

    text: str
    confidence: float
    language: str
    processing_time_ms: int
    provider: str
    word_count: int = 0
    character_count: int = 0
    page_count: int | None = None
