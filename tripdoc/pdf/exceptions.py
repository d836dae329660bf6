from typing import ClassVar

from tripdoc.extraction.exceptions import ExtractionFailure


class PdfExtractionError(ExtractionFailure):
    """Raised when text cannot be extracted from a PDF."""

    kind: ClassVar[str] = "pdf"
