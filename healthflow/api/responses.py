from typing import Any

from healthflow.processor.exceptions import NotMedicalReportError, ProcessorError
from healthflow.processor.models import AnalysisReport

INTERNAL_ERROR_MESSAGE = "An error occurred while processing your health report"


def success_response(report: AnalysisReport) -> tuple[int, dict[str, Any]]:
    return 200, {"success": True, "data": report.to_dict()}


def error_response(exc: Exception) -> tuple[int, dict[str, Any]]:
    """Map any failure to ``(status_code, body)``.

    Unknown exceptions become a generic 500 without remediation text.
    """
    if not isinstance(exc, ProcessorError):
        return 500, {
            "error": ProcessorError.category,
            "message": str(exc) or INTERNAL_ERROR_MESSAGE,
        }

    body: dict[str, Any] = {"error": exc.category, "message": exc.message}
    if exc.suggestion:
        body["suggestion"] = exc.suggestion
    if isinstance(exc, NotMedicalReportError):
        body["validationDetails"] = {
            "confidence": exc.verdict.confidence,
            "reason": exc.verdict.reason,
        }
    return exc.status_code, body
