from typing import ClassVar

from healthflow.classification.models import ClassificationVerdict
from healthflow.pdf.exceptions import ExtractionErrorKind


class ProcessorError(Exception):
    """Base exception for all user-facing processing failures.

    ``category`` and ``status_code`` describe how the failure is reported;
    ``suggestion`` is remediation text when one is known.
    """

    category: ClassVar[str] = "Processing failed"
    status_code: ClassVar[int] = 500

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion


class PdfProcessingError(ProcessorError):
    """Raised when no extraction strategy could read the PDF."""

    category = "PDF processing failed"
    status_code = 400
    SUGGESTION = (
        "Please ensure you upload a valid, unprotected PDF medical report. "
        "If the issue persists, try downloading a fresh copy of your medical report."
    )

    def __init__(self, message: str, kind: ExtractionErrorKind) -> None:
        super().__init__(message, suggestion=self.SUGGESTION)
        self.kind = kind


class EmptyExtractionError(ProcessorError):
    """Raised when the PDF is readable but holds no text, e.g. a scanned image."""

    category = "PDF conversion failed"
    status_code = 400
    MESSAGE = (
        "Could not extract any readable text from the PDF file. "
        "The PDF may be image-based, corrupted, or empty."
    )
    SUGGESTION = (
        "Please ensure your medical report contains readable text (not just images) "
        "and try uploading again."
    )

    def __init__(self) -> None:
        super().__init__(self.MESSAGE, suggestion=self.SUGGESTION)


class NotMedicalReportError(ProcessorError):
    """Raised when the classification gate rejects the document."""

    category = "Not a medical report"
    status_code = 400
    SUGGESTION = (
        "Make sure you upload a PDF containing medical test results, lab reports, "
        "health checkups, diagnostic imaging results, or other medical documentation."
    )

    def __init__(self, verdict: ClassificationVerdict) -> None:
        reason = verdict.reason.rstrip(".")
        super().__init__(
            f"This document doesn't appear to be a medical report. {reason}. "
            "Please upload a valid medical document such as lab results, health "
            "checkup reports, or medical test results.",
            suggestion=self.SUGGESTION,
        )
        self.verdict = verdict


class InsufficientContentError(ProcessorError):
    """Raised when validated text is too short to analyze."""

    category = "Insufficient content"
    status_code = 400
    MESSAGE = (
        "The document appears to contain very little text. Medical reports typically "
        "contain detailed information about tests, results, and recommendations."
    )
    SUGGESTION = (
        "Please ensure you upload a complete medical report with sufficient detail "
        "for analysis."
    )

    def __init__(self, length: int) -> None:
        super().__init__(self.MESSAGE, suggestion=self.SUGGESTION)
        self.length = length


class AiAnalysisFailedError(ProcessorError):
    """Raised when the summary could not be generated."""

    category = "AI analysis failed"
    status_code = 500


class AiAnalysisTimeoutError(AiAnalysisFailedError):
    """Raised when summary generation timed out; the user may simply retry."""

    category = "AI analysis timed out"
    status_code = 504
    SUGGESTION = "The analysis service is taking too long to respond. Please try again in a moment."

    def __init__(self, message: str) -> None:
        super().__init__(message, suggestion=self.SUGGESTION)
