from typing import ClassVar

from tripdoc.extraction.exceptions import ExtractionFailure


class EmailExtractionError(ExtractionFailure):
    """Raised when an email body cannot be extracted."""

    kind: ClassVar[str] = "email"
