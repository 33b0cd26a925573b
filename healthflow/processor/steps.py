from healthflow.analysis.analyzer import HealthReportAnalyzer
from healthflow.analysis.exceptions import AnalysisError, AnalysisTimeoutError
from healthflow.classification.classifier import MedicalReportClassifier
from healthflow.logging.logger import Log
from healthflow.pdf.exceptions import EmptyPdfTextError, PdfExtractionFailedError
from healthflow.pdf.text_extractor import PdfTextExtractor
from healthflow.processor.exceptions import (
    AiAnalysisFailedError,
    AiAnalysisTimeoutError,
    EmptyExtractionError,
    InsufficientContentError,
    NotMedicalReportError,
    PdfProcessingError,
)
from healthflow.processor.pipeline import PipelineContext, PipelineState, PipelineStep


class ExtractTextStep(PipelineStep):
    def __init__(self, text_extractor: PdfTextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.state = PipelineState.EXTRACTING
        try:
            text = self._text_extractor.extract(context.document.content)
        except PdfExtractionFailedError as exc:
            Log.error(
                f"PDF conversion failed for {context.document.filename} "
                f"({exc.kind.value}): {exc.raw_message}"
            )
            raise PdfProcessingError(exc.remediation, kind=exc.kind) from exc
        except EmptyPdfTextError as exc:
            raise EmptyExtractionError() from exc

        if not text.strip():
            raise EmptyExtractionError()
        context.extracted_text = text
        Log.info(f"Extracted {len(text)} characters from {context.document.filename}")
        return context


class ValidateMedicalContentStep(PipelineStep):
    def __init__(self, classifier: MedicalReportClassifier, min_confidence: float) -> None:
        self._classifier = classifier
        self._min_confidence = min_confidence

    def run(self, context: PipelineContext) -> PipelineContext:
        context.state = PipelineState.VALIDATING
        verdict = self._classifier.classify(
            context.extracted_text, timeout_seconds=context.remaining_seconds()
        )
        context.verdict = verdict
        if not verdict.passes(self._min_confidence):
            Log.warning(
                f"Medical validation failed: {verdict.reason} "
                f"(confidence: {verdict.confidence})"
            )
            raise NotMedicalReportError(verdict)
        Log.info(f"Medical validation passed (confidence: {verdict.confidence})")
        return context


class ContentLengthCheckStep(PipelineStep):
    def __init__(self, min_length: int) -> None:
        self._min_length = min_length

    def run(self, context: PipelineContext) -> PipelineContext:
        context.state = PipelineState.CONTENT_LENGTH_CHECK
        length = len(context.extracted_text)
        if length < self._min_length:
            Log.warning(f"Content too short for medical analysis: {length} characters")
            raise InsufficientContentError(length)
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, analyzer: HealthReportAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.state = PipelineState.ANALYZING
        remaining = context.remaining_seconds()
        if remaining is not None and remaining <= 0:
            raise AiAnalysisTimeoutError("AI analysis failed: request time budget exhausted")
        try:
            narrative = self._analyzer.analyze(
                context.extracted_text, timeout_seconds=remaining
            )
        except AnalysisTimeoutError as exc:
            raise AiAnalysisTimeoutError(str(exc)) from exc
        except AnalysisError as exc:
            raise AiAnalysisFailedError(str(exc)) from exc

        if not narrative or not narrative.strip():
            raise AiAnalysisFailedError("Could not generate health report analysis")
        context.analysis_narrative = narrative
        return context
