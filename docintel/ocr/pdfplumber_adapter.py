import io

import pdfplumber

from docintel.ocr.base import BasePdfExtractor
from docintel.ocr.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Per-page PDF text via pdfplumber."""

    def extract_pages(self, pdf_bytes: bytes) -> list[str]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return [(page.extract_text() or "").strip() for page in pdf.pages]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
