import io

import pdfplumber

from tripdoc.pdf.base import BasePdfExtractor
from tripdoc.pdf.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber.

    Encrypted documents surface as a pdfminer error on open and are wrapped
    like any other parse failure.
    """

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return self._join_pages(pages, "pdfplumber")
