from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UploadedDocument:
    """An uploaded PDF held in memory for the duration of one request."""

    filename: str
    content: bytes
    size_bytes: int
    mime_type: str = "application/pdf"


@dataclass(frozen=True)
class AnalysisReport:
    """Terminal artifact of a successful pipeline run."""

    filename: str
    extracted_text: str
    analysis_narrative: str
    processed_at: datetime
    validation_score: float

    def to_dict(self) -> dict[str, object]:
        """Response payload with camelCase keys and an ISO-8601 UTC timestamp."""
        processed_at = self.processed_at.isoformat(timespec="milliseconds")
        return {
            "filename": self.filename,
            "extractedText": self.extracted_text,
            "analysis": self.analysis_narrative,
            "processedAt": processed_at.replace("+00:00", "Z"),
            "validationScore": self.validation_score,
        }
