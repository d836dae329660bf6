from abc import ABC, abstractmethod

from tripdoc.vision.models import OracleContent


class BaseVisionClient(ABC):
    """Contract for provider-specific vision oracle clients."""

    @abstractmethod
    async def create_vision_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        image_url: str,
    ) -> OracleContent:
        """Return the raw message content of the first choice.

        Raises:
            EmptyOracleResponseError: if the provider returns no choices.
            VisionExtractionError: on transport or API failure.
        """
