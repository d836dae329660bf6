import asyncio

from tripdoc.config.settings import Settings
from tripdoc.extraction.exceptions import UnsupportedMediaTypeError
from tripdoc.extraction.models import (
    SUPPORTED_MEDIA_TYPES,
    ExtractionResult,
    SourceKind,
    UploadedFile,
    normalize_media_type,
)
from tripdoc.logging.logger import Log
from tripdoc.mail.base import BaseEmailExtractor
from tripdoc.mail.email_parser_adapter import EmailParserAdapter
from tripdoc.pdf.base import BasePdfExtractor
from tripdoc.pdf.factory import PdfExtractorFactory
from tripdoc.sanitization.base import BaseSanitizer
from tripdoc.sanitization.factory import SanitizerFactory
from tripdoc.vision.factory import ImageOcrExtractorFactory
from tripdoc.vision.image_extractor import ImageOcrExtractor


class ExtractionDispatcher:
    """Routes an upload to its extractor by declared media type, then sanitizes.

    Pipeline: resolve media type -> extract raw text -> sanitize.
    The declared type is trusted; content is never sniffed.
    """

    def __init__(
        self,
        *,
        pdf_extractor: BasePdfExtractor,
        email_extractor: BaseEmailExtractor,
        image_extractor: ImageOcrExtractor,
        sanitizer: BaseSanitizer,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._email_extractor = email_extractor
        self._image_extractor = image_extractor
        self._sanitizer = sanitizer

    async def extract(self, uploaded: UploadedFile) -> ExtractionResult:
        """Extract and sanitize the text of *uploaded*.

        Raises:
            UnsupportedMediaTypeError: if the declared type has no extractor.
            ExtractionFailure: if the chosen extractor fails.
        """
        media_type = normalize_media_type(uploaded.declared_media_type)
        source = SUPPORTED_MEDIA_TYPES.get(media_type)
        if source is None:
            raise UnsupportedMediaTypeError(uploaded.declared_media_type)

        Log.info(
            "Extracting document",
            source=source,
            media_type=media_type,
            size_bytes=len(uploaded.content),
        )
        raw_text = await self._extract_raw(source, media_type, uploaded.content)
        text = self._sanitizer.sanitize(raw_text)
        Log.info("Extraction complete", raw_chars=len(raw_text), sanitized_chars=len(text))
        return ExtractionResult(text=text)

    async def _extract_raw(self, source: SourceKind, media_type: str, content: bytes) -> str:
        if source == "pdf":
            return await asyncio.to_thread(self._pdf_extractor.extract, content)
        if source == "email":
            return await asyncio.to_thread(self._email_extractor.extract, content)
        return await self._image_extractor.extract(content, media_type)


def build_dispatcher(settings: Settings) -> ExtractionDispatcher:
    """Build an ExtractionDispatcher with all required adapters."""
    return ExtractionDispatcher(
        pdf_extractor=PdfExtractorFactory.create(settings),
        email_extractor=EmailParserAdapter(),
        image_extractor=ImageOcrExtractorFactory.create(settings),
        sanitizer=SanitizerFactory.create(settings),
    )
