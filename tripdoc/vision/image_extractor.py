"""OCR of uploaded images through a vision-capable language model."""

import base64
from pathlib import Path

from tripdoc.logging.logger import Log
from tripdoc.vision.client_base import BaseVisionClient
from tripdoc.vision.exceptions import EmptyOracleResponseError
from tripdoc.vision.models import parse_oracle_content
from tripdoc.vision.prompt_loader import load_system_prompt, load_user_prompt

_MAX_TEMPERATURE = 0.2
_MEDIA_TYPE_ALIASES = {"image/jpg": "image/jpeg"}


def build_data_uri(image_bytes: bytes, media_type: str) -> str:
    """Encode image bytes as a base64 ``data:`` URI."""
    media_type = _MEDIA_TYPE_ALIASES.get(media_type, media_type)
    payload = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{media_type};base64,{payload}"


class ImageOcrExtractor:
    """Transcribes image text using an injected vision oracle client."""

    def __init__(
        self,
        *,
        client: BaseVisionClient,
        model: str,
        temperature: float = 0.0,
        system_prompt_path: Path | None = None,
        user_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(_MAX_TEMPERATURE, temperature))
        self._system_prompt = load_system_prompt(system_prompt_path)
        self._user_prompt = load_user_prompt(user_prompt_path)

    @property
    def temperature(self) -> float:
        return self._temperature

    async def extract(self, image_bytes: bytes, media_type: str) -> str:
        """Return the text transcribed from the image, trimmed at both ends.

        Raises:
            EmptyOracleResponseError: if the oracle returns no text.
            VisionExtractionError: on any other oracle failure.
        """
        Log.debug(
            "Sending image to vision oracle",
            model=self._model,
            media_type=media_type,
            size_bytes=len(image_bytes),
        )
        raw_content = await self._client.create_vision_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=self._user_prompt,
            image_url=build_data_uri(image_bytes, media_type),
        )
        reply = parse_oracle_content(raw_content)
        text = reply.as_text().strip()
        if not text:
            raise EmptyOracleResponseError("Vision oracle returned empty content")

        Log.info("OCR transcription received", chars=len(text), reply=reply.type)
        return text
