import pytest

from docintel.config.settings import Settings
from docintel.ocr.factory import OcrServiceFactory, build_ocr_service
from docintel.ocr.local_ocr import LocalOcrService
from docintel.ocr.pdfplumber_adapter import PdfPlumberAdapter
from docintel.ocr.pymupdf_adapter import PyMuPdfAdapter


class TestPdfExtractorSelection:
    @pytest.mark.parametrize(
        ("engine", "expected"),
        [
            ("pdfplumber", PdfPlumberAdapter),
            ("pymupdf", PyMuPdfAdapter),
            (" PyMuPDF ", PyMuPdfAdapter),
        ],
    )
    def test_selects_adapter_by_name(self, engine: str, expected: type) -> None:
        assert isinstance(OcrServiceFactory.pdf_extractor(engine), expected)

    def test_unknown_engine_lists_choices(self) -> None:
        with pytest.raises(ValueError, match=r"Unknown PDF engine 'tesseract'.*pdfplumber"):
            OcrServiceFactory.pdf_extractor("tesseract")


class TestBuildOcrService:
    def test_builds_local_service_from_settings(self) -> None:
        settings = Settings(_env_file=None, ocr_pdf_engine="pymupdf")
        assert isinstance(build_ocr_service(settings), LocalOcrService)

    def test_bad_engine_in_settings_fails_fast(self) -> None:
        settings = Settings(_env_file=None, ocr_pdf_engine="nope")
        with pytest.raises(ValueError):
            OcrServiceFactory.create(settings)
