from dataclasses import dataclass
from typing import Literal

SourceKind = Literal["pdf", "email", "image"]

SUPPORTED_MEDIA_TYPES: dict[str, SourceKind] = {
    "application/pdf": "pdf",
    "message/rfc822": "email",
    "text/plain": "email",
    "image/jpeg": "image",
    "image/jpg": "image",
    "image/png": "image",
    "image/gif": "image",
    "image/webp": "image",
}


def normalize_media_type(declared: str) -> str:
    """Lowercase the media type and drop parameters such as charset."""
    return declared.split(";", 1)[0].strip().lower()


@dataclass(frozen=True)
class UploadedFile:
    """Uploaded bytes plus the media type the caller declared for them."""

    content: bytes
    declared_media_type: str


@dataclass(frozen=True)
class ExtractionResult:
    """Sanitized text produced by the extraction pipeline."""

    text: str
