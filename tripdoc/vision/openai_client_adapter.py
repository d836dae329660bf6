import httpx
import openai

from tripdoc.vision.client_base import BaseVisionClient
from tripdoc.vision.exceptions import EmptyOracleResponseError, VisionExtractionError
from tripdoc.vision.models import OracleContent


class OpenAIVisionClientAdapter(BaseVisionClient):
    """Vision oracle client built on the OpenAI-compatible chat API.

    The SDK's own retries are disabled: a failed call fails the request.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    async def create_vision_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        image_url: str,
    ) -> OracleContent:
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": user_prompt},
                            {"type": "image_url", "image_url": {"url": image_url}},
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise VisionExtractionError(f"Vision provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise VisionExtractionError(f"Vision provider API error: {exc}") from exc

        if not response.choices:
            raise EmptyOracleResponseError("Vision provider returned no choices")
        return response.choices[0].message.content
