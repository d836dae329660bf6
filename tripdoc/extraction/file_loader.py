import mimetypes
from pathlib import Path
from typing import ClassVar

from tripdoc.extraction.models import UploadedFile


class FileLoader:
    """Reads a local file and attaches a declared media type to its bytes."""

    FALLBACK_MEDIA_TYPE = "application/octet-stream"

    # Extensions the platform mimetypes table may not know.
    EXTENSION_MEDIA_TYPES: ClassVar[dict[str, str]] = {
        ".eml": "message/rfc822",
        ".webp": "image/webp",
    }

    def load(self, path: Path, media_type: str | None = None) -> UploadedFile:
        """Read *path* into an UploadedFile.

        The media type is *media_type* when given, otherwise guessed from the
        file extension. Unknown extensions get ``application/octet-stream``,
        which the dispatcher rejects.

        Raises:
            FileNotFoundError: if the file does not exist.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        declared = media_type or self.guess_media_type(path)
        return UploadedFile(content=path.read_bytes(), declared_media_type=declared)

    def guess_media_type(self, path: Path) -> str:
        suffix = path.suffix.lower()
        if suffix in self.EXTENSION_MEDIA_TYPES:
            return self.EXTENSION_MEDIA_TYPES[suffix]
        guessed, _encoding = mimetypes.guess_type(path.name)
        return guessed or self.FALLBACK_MEDIA_TYPE
