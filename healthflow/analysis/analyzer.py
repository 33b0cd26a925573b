from pathlib import Path

from healthflow.ai.client_base import BaseCompletionClient
from healthflow.ai.exceptions import AiServiceTimeoutError
from healthflow.ai.prompt_loader import load_prompt_template
from healthflow.analysis.exceptions import AnalysisError, AnalysisTimeoutError
from healthflow.logging.logger import Log


class HealthReportAnalyzer:
    """Produces a plain-language markdown summary of a medical report."""

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._prompt_template = load_prompt_template(
            "analysis_prompt.txt", prompt_template_path
        )

    def analyze(self, text: str, timeout_seconds: float | None = None) -> str:
        """Return the generated narrative.

        ``timeout_seconds`` bounds the AI call; the client default applies when unset.

        Raises:
            AnalysisTimeoutError: the AI service timed out.
            AnalysisError: any other failure, or an empty narrative.
        """
        prompt = self._prompt_template.format(report=text)
        Log.debug(f"Analysis prompt:\n{prompt}")

        try:
            narrative = self._client.generate(prompt, timeout_seconds=timeout_seconds)
        except AiServiceTimeoutError as exc:
            raise AnalysisTimeoutError(f"AI analysis failed: {exc}") from exc
        except Exception as exc:
            raise AnalysisError(f"AI analysis failed: {exc}") from exc

        if not narrative or not narrative.strip():
            raise AnalysisError("AI analysis failed: AI returned an empty analysis")
        Log.info(f"AI analysis completed: {len(narrative)} characters")
        return narrative
