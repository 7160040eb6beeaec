class SummarizationError(Exception):
    """Raised when summarization fails."""


class ModelUnavailableError(SummarizationError):
    """Raised when the summarization model cannot be loaded or has been released."""
