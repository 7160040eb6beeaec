from docintel.config.settings import Settings
from docintel.ocr.base import BaseOcrProvider, BasePdfExtractor
from docintel.ocr.local_ocr import LocalOcrService
from docintel.ocr.pdfplumber_adapter import PdfPlumberAdapter
from docintel.ocr.pymupdf_adapter import PyMuPdfAdapter

PDF_ENGINES: dict[str, type[BasePdfExtractor]] = {
    "pdfplumber": PdfPlumberAdapter,
    "pymupdf": PyMuPdfAdapter,
}


class OcrServiceFactory:
    """Builds the text-extraction service for the configured PDF engine."""

    @classmethod
    def pdf_extractor(cls, engine: str) -> BasePdfExtractor:
        """Raises ValueError for an engine with no adapter."""
        try:
            return PDF_ENGINES[engine.strip().lower()]()
        except KeyError:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(PDF_ENGINES)}"
            ) from None

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrProvider:
        return LocalOcrService(cls.pdf_extractor(settings.ocr_pdf_engine))


def build_ocr_service(settings: Settings) -> BaseOcrProvider:
    return OcrServiceFactory.create(settings)
