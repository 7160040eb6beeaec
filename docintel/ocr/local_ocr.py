import asyncio
import time

from docintel.logging.logger import Log
from docintel.ocr.base import BaseOcrProvider, BasePdfExtractor
from docintel.ocr.exceptions import UnsupportedDocumentError
from docintel.ocr.models import DocumentFile, OcrResult

TEXT_EXTENSIONS = frozenset({"txt", "md", "csv", "json", "log"})

TEXT_CONFIDENCE = 0.99
PDF_CONFIDENCE = 0.9
EMPTY_PDF_CONFIDENCE = 0.3


class LocalOcrService(BaseOcrProvider):
    """Extracts text locally: plain-text files are decoded, PDFs are parsed.

    Scanned images and word-processor formats have no local extractor and
    raise UnsupportedDocumentError.
    """

    PROVIDER_NAME = "local-ocr"

    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    async def extract(self, file: DocumentFile, language: str = "en") -> OcrResult:
        started = time.perf_counter()
        page_count: int | None = None
        if self._is_text(file):
            text = file.content.decode("utf-8-sig", errors="replace").strip()
            confidence = TEXT_CONFIDENCE
        elif self._is_pdf(file):
            pages = await asyncio.to_thread(self._pdf_extractor.extract_pages, file.content)
            page_count = len(pages)
            text = "\n".join(page for page in pages if page).strip()
            confidence = PDF_CONFIDENCE if text else EMPTY_PDF_CONFIDENCE
        else:
            raise UnsupportedDocumentError(
                f"No local text extractor for '{file.mime_type}' ({file.name})"
            )

        result = OcrResult(
            text=text,
            confidence=confidence,
            language=language,
            processing_time_ms=int((time.perf_counter() - started) * 1000),
            provider=self.PROVIDER_NAME,
            word_count=len(text.split()),
            character_count=len(text),
            page_count=page_count,
        )
        Log.info(
            "Text extracted",
            file=file.name,
            chars=result.character_count,
            confidence=result.confidence,
        )
        return result

    @staticmethod
    def _is_text(file: DocumentFile) -> bool:
        return file.mime_type.startswith("text/") or file.extension in TEXT_EXTENSIONS

    @staticmethod
    def _is_pdf(file: DocumentFile) -> bool:
        return file.mime_type == "application/pdf" or file.extension == "pdf"
