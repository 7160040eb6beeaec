from abc import ABC, abstractmethod

from docintel.ocr.models import DocumentFile, OcrResult


class BaseOcrProvider(ABC):
    """Contract for services that turn an uploaded file into text."""

    @abstractmethod
    async def extract(self, file: DocumentFile, language: str = "en") -> OcrResult:
        """Extract text from ``file``.

        Raises:
            OcrError: if the file cannot be read or its type is unsupported.
        """


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract_pages(self, pdf_bytes: bytes) -> list[str]:
        """Extract the text of each page from PDF bytes.

        Blocking; callers on the event loop run it in a worker thread.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
