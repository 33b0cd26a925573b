from typing import ClassVar

from healthflow.ai.client_base import BaseCompletionClient
from healthflow.ai.example_client_adapter import ExampleClientAdapter
from healthflow.ai.openai_client_adapter import OpenAIClientAdapter
from healthflow.config.settings import Settings


class CompletionClientFactory:
    """Creates the configured completion client."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseCompletionClient:
        """Create a completion client from application settings."""
        provider = settings.ai_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        base_url = cls._resolve_base_url(provider, settings)
        if not settings.ai_api_key and provider != "ollama":
            raise ValueError(f"ai_api_key is required for ai_provider={provider}")
        return OpenAIClientAdapter(
            api_key=settings.ai_api_key or "ollama",
            model=settings.ai_model_name,
            timeout_seconds=settings.ai_timeout_seconds,
            temperature=settings.ai_temperature,
            base_url=base_url,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        custom_url = settings.ai_base_url.strip()
        if provider == "openai":
            return custom_url or None
        if provider == "openai_compatible":
            if not custom_url:
                raise ValueError(
                    "ai_base_url is required for ai_provider=openai_compatible"
                )
            return custom_url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return custom_url or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown AI provider '{provider}'. Choose from: {supported}")
