from typing import ClassVar

from tripdoc.extraction.exceptions import ExtractionFailure


class VisionExtractionError(ExtractionFailure):
    """Raised when the vision oracle call fails or returns an unusable reply."""

    kind: ClassVar[str] = "vision"


class EmptyOracleResponseError(VisionExtractionError):
    """Raised when the oracle returns no choices or no text content."""
