from abc import ABC, abstractmethod

from tripdoc.logging.logger import Log


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Text of every page in document order, pages separated by newlines.

        Raises:
            PdfExtractionError: if the PDF is malformed, encrypted or unreadable.
        """

    @staticmethod
    def _join_pages(pages: list[str], engine: str) -> str:
        text = "\n".join(pages).strip()
        if pages and not text:
            # Scanned documents carry no text layer and are not OCR'd.
            Log.warning("PDF has no text layer", engine=engine, pages=len(pages))
        else:
            Log.debug("PDF text extracted", engine=engine, pages=len(pages), chars=len(text))
        return text
