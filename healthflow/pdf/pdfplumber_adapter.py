import io
import re

import pdfplumber
from pdfminer.pdfdocument import PDFEncryptionError, PDFNoValidXRef
from pdfminer.pdfparser import PDFSyntaxError
from pdfminer.psparser import PSEOF
from pdfplumber.page import Page
from pdfplumber.utils.exceptions import PdfminerException

from healthflow.pdf.base import BasePdfExtractor
from healthflow.pdf.exceptions import ExtractionErrorKind, PdfExtractionError

_HORIZONTAL_WHITESPACE = re.compile(r"[ \t\r\f\v]+")


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber.

    With no arguments every page is read with pdfplumber defaults. The options
    narrow the scope for fallback attempts on troublesome files.
    """

    def __init__(
        self,
        *,
        max_pages: int | None = None,
        x_tolerance: float = 3,
        keep_blank_chars: bool = False,
        normalize_whitespace: bool = False,
    ) -> None:
        self._max_pages = max_pages
        self._x_tolerance = x_tolerance
        self._keep_blank_chars = keep_blank_chars
        self._normalize_whitespace = normalize_whitespace

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = pdf.pages
                if self._max_pages is not None:
                    pages = pages[: self._max_pages]
                texts = [self._page_text(page) for page in pages]
            return "\n".join(texts).strip()
        except PdfExtractionError:
            raise
        except Exception as exc:
            cause = _unwrap(exc)
            raise PdfExtractionError(
                f"pdfplumber extraction failed: {type(cause).__name__}: {cause}",
                kind=_error_kind(cause),
            ) from exc

    def _page_text(self, page: Page) -> str:
        text = page.extract_text(
            x_tolerance=self._x_tolerance,
            keep_blank_chars=self._keep_blank_chars,
        ) or ""
        if self._normalize_whitespace:
            text = _HORIZONTAL_WHITESPACE.sub(" ", text)
        return text


def _unwrap(exc: BaseException) -> BaseException:
    """Return the pdfminer error that pdfplumber wrapped, if any."""
    while isinstance(exc, PdfminerException) and exc.args:
        inner = exc.args[0]
        if not isinstance(inner, BaseException):
            break
        exc = inner
    return exc


def _error_kind(exc: BaseException) -> ExtractionErrorKind | None:
    if isinstance(exc, PDFEncryptionError):
        return ExtractionErrorKind.ENCRYPTED
    if isinstance(exc, (PDFNoValidXRef, PSEOF)):
        return ExtractionErrorKind.CORRUPTED_STRUCTURE
    if isinstance(exc, PDFSyntaxError):
        # Truncated files surface as a syntax error at end of input.
        if "EOF" in str(exc):
            return ExtractionErrorKind.CORRUPTED_STRUCTURE
        return ExtractionErrorKind.INVALID_FORMAT
    if isinstance(exc, MemoryError):
        return ExtractionErrorKind.TOO_LARGE_OR_COMPLEX
    return None
