"""Ordered fallback ladder over PDF extraction strategies."""

from dataclasses import dataclass

from healthflow.cleaning.text_cleaner import TextCleaner
from healthflow.logging.logger import Log
from healthflow.pdf.base import BasePdfExtractor
from healthflow.pdf.error_classifier import classify_extraction_error
from healthflow.pdf.exceptions import (
    EmptyPdfTextError,
    PdfExtractionError,
    PdfExtractionFailedError,
)

NO_TEXT_MESSAGE = "No text extracted from PDF"


@dataclass(frozen=True)
class ExtractionStrategy:
    """A named extraction attempt."""

    name: str
    extractor: BasePdfExtractor


class PdfTextExtractor:
    """Tries each strategy in order and returns the first non-empty, cleaned text.

    Strategies run strictly one after another; the first success stops the
    ladder. When all of them fail, the first raised error decides the
    user-facing error kind.
    """

    def __init__(self, strategies: list[ExtractionStrategy], cleaner: TextCleaner) -> None:
        if not strategies:
            raise ValueError("At least one extraction strategy is required")
        self._strategies = list(strategies)
        self._cleaner = cleaner

    @property
    def strategy_names(self) -> list[str]:
        return [s.name for s in self._strategies]

    def extract(self, pdf_bytes: bytes) -> str:
        """Extract and clean text from PDF bytes.

        Raises:
            PdfExtractionFailedError: every strategy failed and at least one raised.
            EmptyPdfTextError: every strategy read the file but found no text.
        """
        first_error: PdfExtractionError | None = None
        for index, strategy in enumerate(self._strategies):
            if index == 0:
                Log.info(f"Extracting text with primary strategy '{strategy.name}'")
            else:
                Log.warning(f"Trying fallback strategy {index} '{strategy.name}'")
            try:
                text = strategy.extractor.extract(pdf_bytes)
            except PdfExtractionError as exc:
                Log.warning(f"Strategy '{strategy.name}' failed: {exc}")
                if first_error is None:
                    first_error = exc
                continue

            if text and text.strip():
                Log.info(
                    f"Strategy '{strategy.name}' extracted {len(text)} characters"
                )
                return self._cleaner.clean(text)
            Log.warning(f"Strategy '{strategy.name}' failed: {NO_TEXT_MESSAGE}")

        Log.error("All PDF extraction strategies failed")
        if first_error is None:
            raise EmptyPdfTextError(NO_TEXT_MESSAGE)
        raw_message = str(first_error)
        kind = first_error.kind
        if kind is None:
            kind = classify_extraction_error(raw_message)
        raise PdfExtractionFailedError(kind, raw_message)
