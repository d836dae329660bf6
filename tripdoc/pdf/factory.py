from typing import ClassVar

from tripdoc.config.settings import Settings
from tripdoc.pdf.base import BasePdfExtractor
from tripdoc.pdf.pdfplumber_adapter import PdfPlumberAdapter
from tripdoc.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Maps the ``pdf_engine`` setting to a text extraction backend."""

    ENGINES: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        return cls.for_engine(settings.pdf_engine)

    @classmethod
    def for_engine(cls, engine: str) -> BasePdfExtractor:
        """Instantiate the backend registered as *engine* (case-insensitive).

        Raises:
            ValueError: if no backend is registered under that name.
        """
        key = engine.strip().lower()
        try:
            extractor_cls = cls.ENGINES[key]
        except KeyError:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Supported engines: {', '.join(sorted(cls.ENGINES))}"
            ) from None
        return extractor_cls()
