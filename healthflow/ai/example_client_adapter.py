"""Offline completion client.

Returns canned answers without any network call. Handy for local runs of the
CLI and for end-to-end tests of the pipeline.
"""

import json
from typing import ClassVar

from healthflow.ai.client_base import BaseCompletionClient


class ExampleClientAdapter(BaseCompletionClient):
    """Answers classification prompts with a passing verdict and anything else
    with a short fixed analysis."""

    CLASSIFICATION_RESPONSE: ClassVar[dict[str, object]] = {
        "isValid": True,
        "confidence": 0.9,
        "reason": "Example client accepts every document",
    }
    ANALYSIS_RESPONSE: ClassVar[str] = (
        "## 📋 Summary\n"
        "This is an example analysis produced without contacting an AI provider.\n\n"
        "## 🔍 Key Findings\n"
        "- 🟢 No live findings are available in example mode.\n"
    )

    def generate(self, prompt: str, timeout_seconds: float | None = None) -> str:
        if '"isValid"' in prompt:
            return json.dumps(self.CLASSIFICATION_RESPONSE)
        return self.ANALYSIS_RESPONSE
