from unittest.mock import MagicMock

import pytest

from docintel.ocr.exceptions import PdfExtractionError, UnsupportedDocumentError
from docintel.ocr.local_ocr import LocalOcrService
from docintel.ocr.models import DocumentFile


def _extractor(pages: list[str] | None = None, error: Exception | None = None) -> MagicMock:
    extractor = MagicMock()
    extractor.extract_pages.return_value = pages or []
    extractor.extract_pages.side_effect = error
    return extractor


class TestLocalOcrService:
    @pytest.mark.asyncio
    async def test_decodes_text_files(self) -> None:
        service = LocalOcrService(_extractor())
        file = DocumentFile(
            name="notice.txt",
            content="\ufeffPlatform 3 closed\n".encode("utf-8"),
            mime_type="text/plain",
        )

        result = await service.extract(file, "en")

        assert result.text == "Platform 3 closed"
        assert result.confidence == 0.99
        assert result.provider == "local-ocr"
        assert result.word_count == 3
        assert result.character_count == len("Platform 3 closed")
        assert result.page_count is None

    @pytest.mark.asyncio
    async def test_text_detected_by_extension(self) -> None:
        service = LocalOcrService(_extractor())
        file = DocumentFile(name="log.md", content=b"# heading")
        result = await service.extract(file)
        assert result.text == "# heading"

    @pytest.mark.asyncio
    async def test_joins_pdf_pages(self) -> None:
        extractor = _extractor(pages=["Page one", "", "Page three"])
        service = LocalOcrService(extractor)
        file = DocumentFile(name="bulletin.pdf", content=b"%PDF", mime_type="application/pdf")

        result = await service.extract(file, "ml")

        assert result.text == "Page one\nPage three"
        assert result.confidence == 0.9
        assert result.language == "ml"
        assert result.page_count == 3
        extractor.extract_pages.assert_called_once_with(b"%PDF")

    @pytest.mark.asyncio
    async def test_textless_pdf_has_low_confidence(self) -> None:
        service = LocalOcrService(_extractor(pages=["", ""]))
        result = await service.extract(DocumentFile(name="scan.pdf", content=b"%PDF"))
        assert result.text == ""
        assert result.confidence == 0.3

    @pytest.mark.asyncio
    async def test_pdf_errors_propagate(self) -> None:
        service = LocalOcrService(_extractor(error=PdfExtractionError("pdfplumber extraction failed: bad")))
        with pytest.raises(PdfExtractionError):
            await service.extract(DocumentFile(name="broken.pdf", content=b"nope"))

    @pytest.mark.asyncio
    async def test_images_are_unsupported(self) -> None:
        service = LocalOcrService(_extractor())
        file = DocumentFile(name="photo.png", content=b"\x89PNG", mime_type="image/png")
        with pytest.raises(UnsupportedDocumentError, match="image/png"):
            await service.extract(file)
