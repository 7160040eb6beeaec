class AnalysisError(Exception):
    """Raised when a provider analysis attempt fails."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class AnalysisResponseError(AnalysisError):
    """Raised when the AI provider answers with an empty or malformed envelope."""


class AnalysisParseError(AnalysisError):
    """Raised when no JSON object can be recovered from a provider reply."""
