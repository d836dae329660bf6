import pytest

from tripdoc.extraction.exceptions import ExtractionFailure
from tripdoc.pdf.exceptions import PdfExtractionError
from tripdoc.pdf.pdfplumber_adapter import PdfPlumberAdapter


class TestPdfPlumberAdapter:
    def test_extract_returns_text(self, sample_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        result = adapter.extract(sample_pdf_bytes)
        assert isinstance(result, str)
        assert "Flight BA117 London to New York" in result

    def test_extract_multi_page_in_document_order(self, multi_page_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        result = adapter.extract(multi_page_pdf_bytes)
        assert "Page one content" in result
        assert "Page two content" in result
        assert result.index("Page one content") < result.index("Page two content")

    def test_extract_empty_pdf_returns_empty_string(self, empty_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        assert adapter.extract(empty_pdf_bytes) == ""

    def test_extract_raises_on_invalid_bytes(self) -> None:
        adapter = PdfPlumberAdapter()
        with pytest.raises(PdfExtractionError, match="pdfplumber"):
            adapter.extract(b"not a pdf")

    def test_extract_raises_on_encrypted_pdf(self, encrypted_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        with pytest.raises(PdfExtractionError):
            adapter.extract(encrypted_pdf_bytes)

    def test_error_carries_pdf_kind_and_cause(self) -> None:
        adapter = PdfPlumberAdapter()
        with pytest.raises(ExtractionFailure) as exc_info:
            adapter.extract(b"not a pdf")
        assert exc_info.value.kind == "pdf"
        assert exc_info.value.__cause__ is not None

    def test_extract_result_is_stripped(self, sample_pdf_bytes: bytes) -> None:
        adapter = PdfPlumberAdapter()
        result = adapter.extract(sample_pdf_bytes)
        assert result == result.strip()
