from healthflow.ai.client_base import BaseCompletionClient
from healthflow.ai.exceptions import AiServiceError, AiServiceNetworkError, AiServiceTimeoutError
from healthflow.ai.factory import CompletionClientFactory

__all__ = [
    "AiServiceError",
    "AiServiceNetworkError",
    "AiServiceTimeoutError",
    "BaseCompletionClient",
    "CompletionClientFactory",
]
