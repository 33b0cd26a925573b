"""AI-backed medical document classifier with heuristic and fail-open fallbacks."""

import json
import math
from pathlib import Path
from typing import Any

from healthflow.ai.client_base import BaseCompletionClient
from healthflow.ai.prompt_loader import load_prompt_template
from healthflow.classification.models import ClassificationVerdict
from healthflow.logging.logger import Log

TECHNICAL_FAILURE_VERDICT = ClassificationVerdict(
    is_valid=True,
    confidence=0.3,
    reason="could not validate due to technical issue",
)

_MEDICAL_HINTS = ("true", "medical", "health")


class MedicalReportClassifier:
    """Asks the AI service whether text is a medical report.

    Unparseable answers fall back to keyword matching on the raw response.
    Service failures never propagate: the document is let through with a low
    confidence so the pipeline threshold still applies.
    """

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        excerpt_chars: int = 2000,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._excerpt_chars = excerpt_chars
        self._prompt_template = load_prompt_template(
            "classification_prompt.txt", prompt_template_path
        )

    def classify(self, text: str, timeout_seconds: float | None = None) -> ClassificationVerdict:
        prompt = self._build_prompt(text)
        Log.debug(f"Classification prompt:\n{prompt}")

        try:
            raw_response = self._client.generate(prompt, timeout_seconds=timeout_seconds)
        except Exception as exc:
            Log.error(f"Medical validation call failed, allowing document through: {exc}")
            return TECHNICAL_FAILURE_VERDICT
        Log.debug(f"Classification raw response:\n{raw_response}")

        verdict = self._parse_verdict(raw_response)
        if verdict is None:
            Log.warning("Failed to parse classification response, using keyword fallback")
            verdict = self._keyword_verdict(raw_response)

        Log.info(
            f"Validation result: is_valid={verdict.is_valid}, "
            f"confidence={verdict.confidence}, reason={verdict.reason!r}"
        )
        return verdict

    def _build_prompt(self, text: str) -> str:
        return self._prompt_template.format(
            excerpt_chars=self._excerpt_chars,
            excerpt=text[: self._excerpt_chars],
        )

    @staticmethod
    def _parse_verdict(raw: str) -> ClassificationVerdict | None:
        data = _load_json_object(raw)
        if data is None:
            return None
        is_valid = data.get("isValid")
        confidence = data.get("confidence")
        reason = data.get("reason", "")
        if not isinstance(is_valid, bool):
            return None
        if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
            return None
        if not math.isfinite(confidence):
            return None
        if not isinstance(reason, str):
            return None
        return ClassificationVerdict(
            is_valid=is_valid,
            confidence=max(0.0, min(1.0, float(confidence))),
            reason=reason,
        )

    @staticmethod
    def _keyword_verdict(raw: str) -> ClassificationVerdict:
        lowered = raw.lower()
        if any(hint in lowered for hint in _MEDICAL_HINTS):
            return ClassificationVerdict(
                is_valid=True,
                confidence=0.6,
                reason="Content appears to be medical-related",
            )
        return ClassificationVerdict(
            is_valid=False,
            confidence=0.4,
            reason="Content does not appear to be a medical report",
        )


def _load_json_object(raw: str) -> dict[str, Any] | None:
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError:
        return None
    if not isinstance(parsed, dict):
        return None
    return parsed
