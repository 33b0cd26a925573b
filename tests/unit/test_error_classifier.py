import pytest

from healthflow.pdf.error_classifier import classify_extraction_error
from healthflow.pdf.exceptions import (
    REMEDIATION_MESSAGES,
    ExtractionErrorKind,
    PdfExtractionFailedError,
)


class TestClassifyExtractionError:
    @pytest.mark.parametrize(
        ("message", "expected"),
        [
            ("bad XRef entry", ExtractionErrorKind.CORRUPTED_STRUCTURE),
            ("File is Encrypted", ExtractionErrorKind.ENCRYPTED),
            ("PDFPasswordIncorrect", ExtractionErrorKind.ENCRYPTED),
            ("Invalid PDF structure", ExtractionErrorKind.INVALID_FORMAT),
            ("unknown format", ExtractionErrorKind.INVALID_FORMAT),
            ("out of memory", ExtractionErrorKind.TOO_LARGE_OR_COMPLEX),
            ("max size exceeded", ExtractionErrorKind.TOO_LARGE_OR_COMPLEX),
            ("something odd happened", ExtractionErrorKind.UNKNOWN),
            ("", ExtractionErrorKind.UNKNOWN),
        ],
    )
    def test_keyword_families(self, message: str, expected: ExtractionErrorKind) -> None:
        assert classify_extraction_error(message) is expected

    def test_xref_wins_over_later_families(self) -> None:
        assert (
            classify_extraction_error("invalid xref table")
            is ExtractionErrorKind.CORRUPTED_STRUCTURE
        )


class TestPdfExtractionFailedError:
    def test_every_kind_has_remediation(self) -> None:
        assert set(REMEDIATION_MESSAGES) == set(ExtractionErrorKind)

    def test_message_is_remediation_text(self) -> None:
        exc = PdfExtractionFailedError(ExtractionErrorKind.ENCRYPTED, "password required")
        assert str(exc) == REMEDIATION_MESSAGES[ExtractionErrorKind.ENCRYPTED]
        assert exc.raw_message == "password required"
        assert "password-protected" in exc.remediation
