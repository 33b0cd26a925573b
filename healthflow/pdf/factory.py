from healthflow.cleaning.text_cleaner import TextCleaner
from healthflow.config.settings import Settings
from healthflow.pdf.base import BasePdfExtractor
from healthflow.pdf.pdfplumber_adapter import PdfPlumberAdapter
from healthflow.pdf.pymupdf_adapter import PyMuPdfAdapter
from healthflow.pdf.text_extractor import ExtractionStrategy, PdfTextExtractor


class PdfExtractorFactory:
    """Creates the primary PDF extractor and the full fallback ladder."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        """Primary strategy: configured engine, default options, all pages."""
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()

    @classmethod
    def create_text_extractor(
        cls,
        settings: Settings,
        cleaner: TextCleaner | None = None,
    ) -> PdfTextExtractor:
        strategies = [
            ExtractionStrategy(f"{settings.pdf_engine.lower()}-full", cls.create(settings)),
            ExtractionStrategy(
                "pdfplumber-relaxed",
                PdfPlumberAdapter(
                    max_pages=settings.pdf_relaxed_max_pages,
                    x_tolerance=1,
                    normalize_whitespace=True,
                ),
            ),
            ExtractionStrategy(
                "pdfplumber-first-pages",
                PdfPlumberAdapter(
                    max_pages=settings.pdf_limited_max_pages,
                    keep_blank_chars=True,
                ),
            ),
            ExtractionStrategy("pymupdf-basic", PyMuPdfAdapter()),
        ]
        return PdfTextExtractor(strategies, cleaner or TextCleaner())
