import pymupdf

from healthflow.pdf.base import BasePdfExtractor
from healthflow.pdf.exceptions import ExtractionErrorKind, PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF's plain text mode."""

    def __init__(self, *, max_pages: int | None = None) -> None:
        self._max_pages = max_pages

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.needs_pass:
                    raise PdfExtractionError(
                        "pymupdf extraction failed: document is encrypted and needs a password",
                        kind=ExtractionErrorKind.ENCRYPTED,
                    )
                page_count = doc.page_count
                if self._max_pages is not None:
                    page_count = min(page_count, self._max_pages)
                pages = [doc[i].get_text() for i in range(page_count)]
            return "\n".join(pages).strip()
        except PdfExtractionError:
            raise
        except pymupdf.FileDataError as exc:
            raise PdfExtractionError(
                f"pymupdf extraction failed: {type(exc).__name__}: {exc}",
                kind=ExtractionErrorKind.INVALID_FORMAT,
            ) from exc
        except MemoryError as exc:
            raise PdfExtractionError(
                f"pymupdf extraction failed: {type(exc).__name__}: {exc}",
                kind=ExtractionErrorKind.TOO_LARGE_OR_COMPLEX,
            ) from exc
        except Exception as exc:
            raise PdfExtractionError(
                f"pymupdf extraction failed: {type(exc).__name__}: {exc}"
            ) from exc
