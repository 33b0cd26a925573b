from dataclasses import dataclass


@dataclass(frozen=True)
class ClassificationVerdict:
    """Whether extracted text looks like a genuine medical report."""

    is_valid: bool
    confidence: float
    reason: str

    def passes(self, min_confidence: float) -> bool:
        """Gate check; the threshold is inclusive."""
        return self.is_valid and self.confidence >= min_confidence
