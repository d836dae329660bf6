import io
from email.message import EmailMessage

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

CONTACT_LINE = "Contact me at jane@example.com or call 415-555-1234."


def _pdf(*pages: str, encrypt: str | None = None) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter, encrypt=encrypt)
    for text in pages:
        if text:
            c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return _pdf("Flight BA117 London to New York")


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _pdf("Page one content", "Page two content")


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _pdf("")


@pytest.fixture()
def encrypted_pdf_bytes() -> bytes:
    """Generate a PDF that requires a user password to open."""
    return _pdf("Secret itinerary", encrypt="s3cret")


@pytest.fixture()
def contact_pdf_bytes() -> bytes:
    return _pdf(CONTACT_LINE)


@pytest.fixture()
def contact_email_bytes() -> bytes:
    """RFC822 message whose plain-text body is the contact line."""
    msg = EmailMessage()
    msg["From"] = "bookings@airline.example"
    msg["To"] = "traveler@example.org"
    msg["Subject"] = "Your booking"
    msg.set_content(CONTACT_LINE)
    return msg.as_bytes()


@pytest.fixture()
def multipart_email_bytes() -> bytes:
    """Plain and HTML alternatives plus a PDF attachment."""
    msg = EmailMessage()
    msg["From"] = "hotel@example.it"
    msg["To"] = "traveler@example.org"
    msg["Subject"] = "Reservation confirmed"
    msg.set_content("Check-in 14 June at Hotel Roma")
    msg.add_alternative(
        "<html><body><p>Check-in <b>14 June</b> at Hotel Roma</p></body></html>",
        subtype="html",
    )
    msg.add_attachment(
        b"%PDF-1.4 attachment",
        maintype="application",
        subtype="pdf",
        filename="voucher.pdf",
    )
    return msg.as_bytes()


@pytest.fixture()
def html_only_email_bytes() -> bytes:
    msg = EmailMessage()
    msg["From"] = "tours@example.com"
    msg["Subject"] = "Vatican tour"
    msg.set_content(
        "<html><head><style>p { color: red; }</style></head>"
        "<body><p>Vatican&nbsp;Guided Tour</p><p>Starts 10:00</p>"
        "<script>track();</script></body></html>",
        subtype="html",
    )
    return msg.as_bytes()
