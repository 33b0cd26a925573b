import httpx
import openai

from healthflow.ai.client_base import BaseCompletionClient
from healthflow.ai.exceptions import (
    AiServiceError,
    AiServiceNetworkError,
    AiServiceTimeoutError,
)


class OpenAIClientAdapter(BaseCompletionClient):
    """Completion client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        temperature: float = 0.4,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )
        self._model = model
        self._temperature = temperature

    def generate(self, prompt: str, timeout_seconds: float | None = None) -> str:
        options: dict[str, float] = {}
        if timeout_seconds is not None:
            options["timeout"] = timeout_seconds
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                messages=[{"role": "user", "content": prompt}],
                **options,
            )
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise AiServiceTimeoutError(f"AI provider timed out: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError) as exc:
            raise AiServiceNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AiServiceNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AiServiceError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AiServiceError("AI returned empty response")
        return content
