from typing import ClassVar

from tripdoc.config.settings import Settings
from tripdoc.vision.client_base import BaseVisionClient
from tripdoc.vision.example_client_adapter import ExampleVisionClient
from tripdoc.vision.image_extractor import ImageOcrExtractor
from tripdoc.vision.openai_client_adapter import OpenAIVisionClientAdapter


class ImageOcrExtractorFactory:
    """Creates the image OCR extractor wired to the configured provider."""

    OFFLINE_PROVIDER: ClassVar[str] = "example"
    CUSTOM_PROVIDER: ClassVar[str] = "openai_compatible"

    # Hosted OpenAI-compatible endpoints; None means the SDK default.
    PROVIDER_BASE_URLS: ClassVar[dict[str, str | None]] = {
        "openai": None,
        "mistral": "https://api.mistral.ai/v1",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> ImageOcrExtractor:
        """Create an extractor holding one long-lived oracle client."""
        return ImageOcrExtractor(
            client=cls.create_client(settings),
            model=settings.vision_model_name,
            temperature=settings.vision_temperature,
        )

    @classmethod
    def create_client(cls, settings: Settings) -> BaseVisionClient:
        provider = settings.vision_provider.strip().lower()
        if provider == cls.OFFLINE_PROVIDER:
            return ExampleVisionClient()
        return OpenAIVisionClientAdapter(
            api_key=settings.vision_api_key,
            timeout_seconds=settings.vision_timeout_seconds,
            base_url=cls.base_url_for(provider, settings.vision_base_url),
        )

    @classmethod
    def base_url_for(cls, provider: str, configured_url: str = "") -> str | None:
        """Return the endpoint for *provider*.

        ``openai_compatible`` takes the configured URL, which is then required.

        Raises:
            ValueError: for an unknown provider or a missing custom URL.
        """
        if provider == cls.CUSTOM_PROVIDER:
            url = configured_url.strip()
            if not url:
                raise ValueError(
                    f"vision_base_url is required for vision_provider={cls.CUSTOM_PROVIDER}"
                )
            return url
        if provider in cls.PROVIDER_BASE_URLS:
            return cls.PROVIDER_BASE_URLS[provider]
        known = sorted([cls.OFFLINE_PROVIDER, cls.CUSTOM_PROVIDER, *cls.PROVIDER_BASE_URLS])
        raise ValueError(f"Unknown vision provider '{provider}'. Known providers: {known}")
