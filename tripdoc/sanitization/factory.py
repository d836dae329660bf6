from tripdoc.config.settings import Settings
from tripdoc.sanitization.base import BaseSanitizer
from tripdoc.sanitization.sanitizer import Sanitizer


class SanitizerFactory:
    """Creates the configured sanitizer."""

    @classmethod
    def create(cls, settings: Settings) -> BaseSanitizer:
        """Create a regex sanitizer over the default ruleset."""
        _ = settings  # reserved for future configuration
        return Sanitizer()
