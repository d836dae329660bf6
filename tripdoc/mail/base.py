from abc import ABC, abstractmethod


class BaseEmailExtractor(ABC):
    """Contract for email body extraction adapters."""

    @abstractmethod
    def extract(self, email_bytes: bytes) -> str:
        """Return the best-effort plain-text body of an email.

        Args:
            email_bytes: RFC822 message or bare plain text.

        Returns:
            Body text without headers or attachments; empty string if the
            message has no body.

        Raises:
            EmailExtractionError: if the message cannot be parsed or decoded.
        """
