from abc import ABC, abstractmethod


class BaseSanitizer(ABC):
    """Contract for PII sanitizers."""

    @abstractmethod
    def sanitize(self, text: str) -> str:
        """Replace personally identifying content in *text* with placeholders.

        Must be idempotent: sanitizing already sanitized text is a no-op.
        """
