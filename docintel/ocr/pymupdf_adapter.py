import pymupdf

from docintel.ocr.base import BasePdfExtractor
from docintel.ocr.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Per-page PDF text via PyMuPDF."""

    def extract_pages(self, pdf_bytes: bytes) -> list[str]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return [page.get_text().strip() for page in doc]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
