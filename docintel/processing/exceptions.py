class ProcessingError(Exception):
    """Base exception for all processing-related errors."""


class UploadValidationError(ProcessingError):
    """Raised when an upload is rejected before processing starts."""
