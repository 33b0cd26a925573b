class AiServiceError(Exception):
    """Raised when the AI service call fails or returns nothing usable."""


class AiServiceNetworkError(AiServiceError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class AiServiceTimeoutError(AiServiceNetworkError):
    """Raised when the AI provider does not answer within the request timeout."""
