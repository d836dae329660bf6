"""Email body extraction on top of the standard library MIME parser.

Selection order:
1. Input without a header/body separator is treated as bare plain text.
2. The ``text/plain`` body, if any.
3. The ``text/html`` body, reduced to text.
Attachments and headers never reach the output.
"""

from __future__ import annotations

from email import errors, policy
from email.message import EmailMessage
from email.parser import BytesParser
from html.parser import HTMLParser
from typing import ClassVar

from tripdoc.logging.logger import Log
from tripdoc.mail.base import BaseEmailExtractor
from tripdoc.mail.exceptions import EmailExtractionError


class _HtmlTextParser(HTMLParser):
    """Collects visible text from an HTML body, one block per line."""

    _SKIPPED_TAGS: ClassVar[frozenset[str]] = frozenset({"script", "style", "head"})
    _BLOCK_TAGS: ClassVar[frozenset[str]] = frozenset(
        {"br", "p", "div", "tr", "li", "table", "h1", "h2", "h3", "h4", "h5", "h6"}
    )

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._parts: list[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in self._SKIPPED_TAGS:
            self._skip_depth += 1
        elif tag in self._BLOCK_TAGS:
            self._parts.append("\n")

    def handle_endtag(self, tag: str) -> None:
        if tag in self._SKIPPED_TAGS and self._skip_depth:
            self._skip_depth -= 1
        elif tag in self._BLOCK_TAGS:
            self._parts.append("\n")

    def handle_data(self, data: str) -> None:
        if not self._skip_depth:
            self._parts.append(data)

    def text(self) -> str:
        lines = (" ".join(line.split()) for line in "".join(self._parts).splitlines())
        return "\n".join(line for line in lines if line)


def html_to_text(html: str) -> str:
    parser = _HtmlTextParser()
    parser.feed(html)
    parser.close()
    return parser.text()


class EmailParserAdapter(BaseEmailExtractor):
    """Extracts the body of RFC822 or plain-text uploads."""

    def extract(self, email_bytes: bytes) -> str:
        if not email_bytes.strip():
            return ""
        try:
            message = BytesParser(policy=policy.default).parsebytes(email_bytes)
            if self._is_bare_text(message):
                Log.debug("No RFC822 header block found, treating input as plain text")
                return email_bytes.decode("utf-8", errors="replace").strip()
            return self._body_text(message).strip()
        except EmailExtractionError:
            raise
        except Exception as exc:
            raise EmailExtractionError(f"email parsing failed: {exc}") from exc

    @staticmethod
    def _is_bare_text(message: EmailMessage) -> bool:
        # A real message separates its headers from the body with a blank line.
        return any(
            isinstance(defect, errors.MissingHeaderBodySeparatorDefect)
            for defect in message.defects
        )

    @staticmethod
    def _body_text(message: EmailMessage) -> str:
        body = message.get_body(preferencelist=("plain", "html"))
        if body is None:
            Log.debug("Email has no text body")
            return ""
        content = body.get_content()
        if body.get_content_subtype() == "html":
            return html_to_text(content)
        return str(content)
