class OcrError(Exception):
    """Base exception for text extraction failures."""


class PdfExtractionError(OcrError):
    """Raised when a PDF cannot be parsed."""


class UnsupportedDocumentError(OcrError):
    """Raised when no extractor handles the document's type."""
