import time
from collections.abc import Callable
from datetime import datetime, timezone

from healthflow.ai.client_base import BaseCompletionClient
from healthflow.ai.factory import CompletionClientFactory
from healthflow.analysis.analyzer import HealthReportAnalyzer
from healthflow.classification.classifier import MedicalReportClassifier
from healthflow.config.settings import Settings
from healthflow.logging.logger import Log
from healthflow.pdf.factory import PdfExtractorFactory
from healthflow.processor.models import AnalysisReport, UploadedDocument
from healthflow.processor.pipeline import (
    PipelineContext,
    PipelineState,
    PipelineStep,
    RequestBudget,
)
from healthflow.processor.steps import (
    AnalyzeStep,
    ContentLengthCheckStep,
    ExtractTextStep,
    ValidateMedicalContentStep,
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Processor:
    """Runs one uploaded document through the analysis pipeline.

    Pipeline: extract -> validate -> content length check -> analyze.
    Any step may raise a ProcessorError; the run stops there and nothing is kept.
    With ``request_timeout_seconds`` set, all AI calls of one run share that
    allowance.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        clock: Callable[[], datetime] = _utc_now,
        request_timeout_seconds: float | None = None,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._steps = list(steps)
        self._clock = clock
        self._request_timeout_seconds = request_timeout_seconds
        self._monotonic = monotonic

    def process(self, document: UploadedDocument) -> AnalysisReport:
        Log.info(f"Processing PDF: {document.filename} ({document.size_bytes} bytes)")
        context = PipelineContext(document=document)
        if self._request_timeout_seconds is not None:
            context.budget = RequestBudget(self._request_timeout_seconds, self._monotonic)
        try:
            for step in self._steps:
                step.run(context)
        except Exception as exc:
            Log.error(f"Pipeline failed during {context.state.value}: {exc}")
            context.error_message = str(exc)
            context.state = PipelineState.FAILED
            raise

        if context.verdict is None:
            raise ValueError("PipelineContext.verdict must be set before building a report")
        context.state = PipelineState.DONE
        Log.info(f"Analysis of {document.filename} completed successfully")
        return AnalysisReport(
            filename=document.filename,
            extracted_text=context.extracted_text,
            analysis_narrative=context.analysis_narrative,
            processed_at=self._clock(),
            validation_score=context.verdict.confidence,
        )


def build_processor(
    settings: Settings,
    client: BaseCompletionClient | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    if client is None:
        client = CompletionClientFactory.create(settings)
    text_extractor = PdfExtractorFactory.create_text_extractor(settings)
    classifier = MedicalReportClassifier(
        client=client,
        excerpt_chars=settings.classification_excerpt_chars,
    )
    analyzer = HealthReportAnalyzer(client=client)
    return Processor(
        steps=[
            ExtractTextStep(text_extractor),
            ValidateMedicalContentStep(classifier, settings.min_validation_confidence),
            ContentLengthCheckStep(settings.min_content_length),
            AnalyzeStep(analyzer),
        ],
        request_timeout_seconds=settings.ai_timeout_seconds,
    )
