class AnalysisError(Exception):
    """Raised when the AI service cannot produce a health report analysis."""


class AnalysisTimeoutError(AnalysisError):
    """Raised when the analysis call ran past the request timeout."""
