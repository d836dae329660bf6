from collections.abc import Sequence

from tripdoc.logging.logger import Log
from tripdoc.sanitization.base import BaseSanitizer
from tripdoc.sanitization.models import RedactionRule
from tripdoc.sanitization.rules import DEFAULT_RULES


class Sanitizer(BaseSanitizer):
    """Runs an ordered ruleset over text, one global substitution per rule.

    Rule *n*+1 sees the output of rule *n*, never the original text.
    """

    def __init__(self, rules: Sequence[RedactionRule] = DEFAULT_RULES) -> None:
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[RedactionRule, ...]:
        return self._rules

    def sanitize(self, text: str) -> str:
        if not text:
            return ""

        total = 0
        for rule in self._rules:
            text, count = rule.apply(text)
            if count:
                Log.debug("Redaction rule applied", rule=rule.name, matches=count)
            total += count

        Log.info("Sanitized text", chars=len(text), redactions=total)
        return text
