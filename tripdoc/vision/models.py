"""Shapes of the vision oracle's message content.

Providers return either one string or a list of parts. The reply is
normalized into one of the dataclasses below exactly once, at the client
boundary, so nothing downstream branches on raw types.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from tripdoc.vision.exceptions import EmptyOracleResponseError, VisionExtractionError

OracleContent = str | Sequence[object] | None


@dataclass(frozen=True)
class TextReply:
    """Content returned as a single string."""

    text: str
    type: str = "text"

    def as_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class FragmentReply:
    """Content returned as an ordered sequence of text fragments."""

    fragments: tuple[str, ...]
    type: str = "fragments"

    def as_text(self) -> str:
        return "".join(self.fragments)


OracleReply = TextReply | FragmentReply


def parse_oracle_content(raw: object) -> OracleReply:
    """Build an OracleReply from raw message content.

    Fragments may be plain strings, ``{"type": "text", "text": ...}`` dicts
    or SDK objects with a ``text`` attribute.

    Raises:
        EmptyOracleResponseError: if the content is missing.
        VisionExtractionError: if the content or a fragment has no text.
    """
    if raw is None:
        raise EmptyOracleResponseError("Vision oracle returned no content")
    if isinstance(raw, str):
        return TextReply(text=raw)
    if isinstance(raw, (list, tuple)):
        return FragmentReply(
            fragments=tuple(_fragment_text(part, i) for i, part in enumerate(raw))
        )
    raise VisionExtractionError(
        f"Unsupported oracle content type: {type(raw).__name__}"
    )


def _fragment_text(part: object, index: int) -> str:
    if isinstance(part, str):
        return part
    if isinstance(part, dict):
        text = part.get("text")
    else:
        text = getattr(part, "text", None)
    if not isinstance(text, str):
        raise VisionExtractionError(f"Oracle content fragment {index} carries no text")
    return text
