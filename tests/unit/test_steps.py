from unittest.mock import MagicMock

import pytest

from healthflow.analysis.analyzer import HealthReportAnalyzer
from healthflow.analysis.exceptions import AnalysisError, AnalysisTimeoutError
from healthflow.classification.classifier import MedicalReportClassifier
from healthflow.classification.models import ClassificationVerdict
from healthflow.pdf.exceptions import (
    REMEDIATION_MESSAGES,
    EmptyPdfTextError,
    ExtractionErrorKind,
    PdfExtractionFailedError,
)
from healthflow.pdf.text_extractor import PdfTextExtractor
from healthflow.processor.exceptions import (
    AiAnalysisFailedError,
    AiAnalysisTimeoutError,
    EmptyExtractionError,
    InsufficientContentError,
    NotMedicalReportError,
    PdfProcessingError,
)
from healthflow.processor.models import UploadedDocument
from healthflow.processor.pipeline import PipelineContext, PipelineState, RequestBudget
from healthflow.processor.steps import (
    AnalyzeStep,
    ContentLengthCheckStep,
    ExtractTextStep,
    ValidateMedicalContentStep,
)


def _make_context(text: str = "") -> PipelineContext:
    document = UploadedDocument(filename="report.pdf", content=b"%PDF-fake", size_bytes=9)
    return PipelineContext(document=document, extracted_text=text)


class TestExtractTextStep:
    def test_sets_extracted_text(self) -> None:
        extractor = MagicMock(spec=PdfTextExtractor)
        extractor.extract.return_value = "clean text"
        context = ExtractTextStep(extractor).run(_make_context())
        assert context.extracted_text == "clean text"
        assert context.state is PipelineState.EXTRACTING
        extractor.extract.assert_called_once_with(b"%PDF-fake")

    def test_classified_failure_becomes_pdf_processing_error(self) -> None:
        extractor = MagicMock(spec=PdfTextExtractor)
        extractor.extract.side_effect = PdfExtractionFailedError(
            ExtractionErrorKind.CORRUPTED_STRUCTURE, "bad xref"
        )
        with pytest.raises(PdfProcessingError) as exc_info:
            ExtractTextStep(extractor).run(_make_context())
        assert exc_info.value.kind is ExtractionErrorKind.CORRUPTED_STRUCTURE
        assert exc_info.value.message == REMEDIATION_MESSAGES[ExtractionErrorKind.CORRUPTED_STRUCTURE]
        assert exc_info.value.suggestion

    def test_no_text_layer_becomes_empty_extraction(self) -> None:
        extractor = MagicMock(spec=PdfTextExtractor)
        extractor.extract.side_effect = EmptyPdfTextError("No text extracted from PDF")
        with pytest.raises(EmptyExtractionError):
            ExtractTextStep(extractor).run(_make_context())

    def test_blank_cleaned_text_becomes_empty_extraction(self) -> None:
        extractor = MagicMock(spec=PdfTextExtractor)
        extractor.extract.return_value = "   "
        with pytest.raises(EmptyExtractionError):
            ExtractTextStep(extractor).run(_make_context())


class TestValidateMedicalContentStep:
    def _run(self, verdict: ClassificationVerdict) -> PipelineContext:
        classifier = MagicMock(spec=MedicalReportClassifier)
        classifier.classify.return_value = verdict
        return ValidateMedicalContentStep(classifier, 0.6).run(_make_context("text"))

    def test_passes_at_exact_threshold(self) -> None:
        context = self._run(ClassificationVerdict(True, 0.6, "lab results"))
        assert context.verdict is not None
        assert context.verdict.confidence == 0.6
        assert context.state is PipelineState.VALIDATING

    def test_rejects_just_below_threshold(self) -> None:
        with pytest.raises(NotMedicalReportError):
            self._run(ClassificationVerdict(True, 0.59, "maybe"))

    def test_rejects_invalid_verdict(self) -> None:
        with pytest.raises(NotMedicalReportError) as exc_info:
            self._run(ClassificationVerdict(False, 0.95, "This is an invoice"))
        assert exc_info.value.verdict.reason == "This is an invoice"
        assert "This is an invoice." in exc_info.value.message

    def test_rejects_fail_open_verdict(self) -> None:
        with pytest.raises(NotMedicalReportError):
            self._run(ClassificationVerdict(True, 0.3, "could not validate due to technical issue"))

    def test_threshold_is_configurable(self) -> None:
        classifier = MagicMock(spec=MedicalReportClassifier)
        classifier.classify.return_value = ClassificationVerdict(True, 0.3, "low")
        context = ValidateMedicalContentStep(classifier, 0.25).run(_make_context("text"))
        assert context.verdict is not None


class TestContentLengthCheckStep:
    def test_accepts_minimum_length(self) -> None:
        context = ContentLengthCheckStep(100).run(_make_context("x" * 100))
        assert context.state is PipelineState.CONTENT_LENGTH_CHECK

    def test_rejects_short_text(self) -> None:
        with pytest.raises(InsufficientContentError) as exc_info:
            ContentLengthCheckStep(100).run(_make_context("x" * 99))
        assert exc_info.value.length == 99


class TestAnalyzeStep:
    def test_sets_narrative(self) -> None:
        analyzer = MagicMock(spec=HealthReportAnalyzer)
        analyzer.analyze.return_value = "## Summary"
        context = AnalyzeStep(analyzer).run(_make_context("text"))
        assert context.analysis_narrative == "## Summary"
        assert context.state is PipelineState.ANALYZING

    def test_analysis_error_becomes_ai_analysis_failed(self) -> None:
        analyzer = MagicMock(spec=HealthReportAnalyzer)
        analyzer.analyze.side_effect = AnalysisError("AI analysis failed: quota")
        with pytest.raises(AiAnalysisFailedError, match="AI analysis failed: quota"):
            AnalyzeStep(analyzer).run(_make_context("text"))

    def test_timeout_becomes_timeout_error(self) -> None:
        analyzer = MagicMock(spec=HealthReportAnalyzer)
        analyzer.analyze.side_effect = AnalysisTimeoutError("AI analysis failed: timed out")
        with pytest.raises(AiAnalysisTimeoutError) as exc_info:
            AnalyzeStep(analyzer).run(_make_context("text"))
        assert exc_info.value.status_code == 504

    def test_empty_narrative_fails(self) -> None:
        analyzer = MagicMock(spec=HealthReportAnalyzer)
        analyzer.analyze.return_value = ""
        with pytest.raises(AiAnalysisFailedError, match="Could not generate"):
            AnalyzeStep(analyzer).run(_make_context("text"))


def _budget(*ticks: float, total: float = 120) -> RequestBudget:
    clock = iter(ticks)
    return RequestBudget(total, monotonic=lambda: next(clock))


class TestRequestBudget:
    def test_remaining_never_negative(self) -> None:
        assert _budget(0.0, 200.0).remaining_seconds() == 0.0

    def test_context_without_budget_has_no_limit(self) -> None:
        assert _make_context("text").remaining_seconds() is None

    def test_classifier_gets_remaining_time(self) -> None:
        classifier = MagicMock(spec=MedicalReportClassifier)
        classifier.classify.return_value = ClassificationVerdict(True, 0.9, "labs")
        context = _make_context("text")
        context.budget = _budget(0.0, 15.0)
        ValidateMedicalContentStep(classifier, 0.6).run(context)
        classifier.classify.assert_called_once_with("text", timeout_seconds=105.0)

    def test_analyzer_gets_remaining_time(self) -> None:
        analyzer = MagicMock(spec=HealthReportAnalyzer)
        analyzer.analyze.return_value = "## Summary"
        context = _make_context("text")
        context.budget = _budget(0.0, 100.0)
        AnalyzeStep(analyzer).run(context)
        analyzer.analyze.assert_called_once_with("text", timeout_seconds=20.0)

    def test_exhausted_budget_times_out_without_calling_analyzer(self) -> None:
        analyzer = MagicMock(spec=HealthReportAnalyzer)
        context = _make_context("text")
        context.budget = _budget(0.0, 121.0)
        with pytest.raises(AiAnalysisTimeoutError) as exc_info:
            AnalyzeStep(analyzer).run(context)
        assert exc_info.value.status_code == 504
        analyzer.analyze.assert_not_called()
