"""Example vision client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseVisionClient and register the provider in ImageOcrExtractorFactory.
"""

from typing import ClassVar

from tripdoc.vision.client_base import BaseVisionClient
from tripdoc.vision.models import OracleContent


class ExampleVisionClient(BaseVisionClient):
    """Offline oracle that returns fixed content.

    No network calls. Useful for local development, tests, and as a stub
    oracle injected in place of a real provider.
    """

    DEFAULT_CONTENT: ClassVar[list[str]] = ["BOARDING PASS\n", "Gate B12 Seat 14A"]

    def __init__(self, content: OracleContent = None) -> None:
        self._content = content if content is not None else list(self.DEFAULT_CONTENT)

    async def create_vision_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        image_url: str,
    ) -> OracleContent:
        _ = model, temperature, system_prompt, user_prompt, image_url
        return self._content
