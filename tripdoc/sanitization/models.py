import re
from collections.abc import Callable
from dataclasses import dataclass

Replacement = str | Callable[[re.Match[str]], str]


@dataclass(frozen=True)
class RedactionRule:
    """One category of PII: a pattern and what replaces each match.

    ``replacement`` is either a fixed placeholder token or a function that
    builds the replacement from the match. A function may return the match
    unchanged to leave it for a later rule.
    """

    name: str
    pattern: re.Pattern[str]
    replacement: Replacement

    def apply(self, text: str) -> tuple[str, int]:
        """Substitute every match in *text*; return (new_text, redaction_count)."""
        redacted = 0

        def substitute(match: re.Match[str]) -> str:
            nonlocal redacted
            if isinstance(self.replacement, str):
                new = self.replacement
            else:
                new = self.replacement(match)
            if new != match.group(0):
                redacted += 1
            return new

        return self.pattern.sub(substitute, text), redacted
