from enum import Enum


class ExtractionErrorKind(str, Enum):
    """User-facing classification of an unreadable PDF."""

    CORRUPTED_STRUCTURE = "corrupted_structure"
    ENCRYPTED = "encrypted"
    INVALID_FORMAT = "invalid_format"
    TOO_LARGE_OR_COMPLEX = "too_large_or_complex"
    UNKNOWN = "unknown"


class PdfExtractionError(Exception):
    """Raised by a single extraction strategy when it cannot read the PDF.

    ``kind`` is set when the adapter recognized the parser's own error type;
    otherwise the message is classified by keyword.
    """

    def __init__(self, message: str, kind: ExtractionErrorKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


REMEDIATION_MESSAGES: dict[ExtractionErrorKind, str] = {
    ExtractionErrorKind.CORRUPTED_STRUCTURE: (
        "This PDF file appears to be corrupted or has structural issues. Please try:\n"
        "• Re-downloading the PDF from the original source\n"
        "• Asking your healthcare provider for a fresh copy\n"
        "• Converting the PDF to a new PDF file using a PDF editor"
    ),
    ExtractionErrorKind.ENCRYPTED: (
        "This PDF file is password-protected or encrypted. Please:\n"
        "• Remove password protection from the PDF\n"
        "• Save an unprotected copy of your medical report\n"
        "• Contact your healthcare provider for an unprotected version"
    ),
    ExtractionErrorKind.INVALID_FORMAT: (
        "This file may not be a valid PDF or may be corrupted. Please:\n"
        "• Verify the file is a genuine PDF medical report\n"
        "• Try downloading the report again\n"
        "• Check if the file opens correctly in a PDF viewer"
    ),
    ExtractionErrorKind.TOO_LARGE_OR_COMPLEX: (
        "The PDF file is too large or complex to process. Please:\n"
        "• Try compressing the PDF file\n"
        "• Use a smaller file (under 10MB)\n"
        "• Split multi-page reports into smaller sections"
    ),
    ExtractionErrorKind.UNKNOWN: (
        "Unable to process this PDF file. This could be due to:\n"
        "• File corruption or damage\n"
        "• Unsupported PDF format\n"
        "• Complex document structure\n\n"
        "Please try uploading a different medical report or contact support "
        "if the issue persists."
    ),
}


class PdfExtractionFailedError(Exception):
    """Raised when every extraction strategy failed.

    Carries the classified kind and the message of the first underlying
    failure. ``str(exc)`` is the remediation text shown to the user.
    """

    def __init__(self, kind: ExtractionErrorKind, raw_message: str) -> None:
        self.kind = kind
        self.raw_message = raw_message
        super().__init__(self.remediation)

    @property
    def remediation(self) -> str:
        return REMEDIATION_MESSAGES[self.kind]


class EmptyPdfTextError(Exception):
    """Raised when the PDF opens fine but no strategy finds a text layer."""
