from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for a single PDF text extraction strategy."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content. Never modified.

        Returns:
            Extracted text, stripped. May be empty for image-only PDFs.

        Raises:
            PdfExtractionError: if the parser fails for any reason.
        """
