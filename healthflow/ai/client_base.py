from abc import ABC, abstractmethod


class BaseCompletionClient(ABC):
    """Contract for the text-completion service: prompt in, text out."""

    @abstractmethod
    def generate(self, prompt: str, timeout_seconds: float | None = None) -> str:
        """Return the model's completion for ``prompt``.

        ``timeout_seconds`` overrides the client's default timeout for this call.

        Raises:
            AiServiceError: on any failure, including an empty completion.
        """
