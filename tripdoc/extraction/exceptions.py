from typing import ClassVar


class ExtractionError(Exception):
    """Base exception for all document extraction errors."""

    kind: ClassVar[str] = "extraction"


class UnsupportedMediaTypeError(ExtractionError):
    """Raised when the declared media type has no extractor."""

    kind: ClassVar[str] = "unsupported_media_type"

    def __init__(self, media_type: str) -> None:
        super().__init__(f"Unsupported media type '{media_type}'")
        self.media_type = media_type


class ExtractionFailure(ExtractionError):
    """Raised when an extractor cannot turn the uploaded bytes into text.

    Subclasses set ``kind`` to the source that failed: pdf, email or vision.
    """
