"""
Google Gemini adapter using the google-genai SDK

Gemini is the only provider with client-side moderation: four harm
categories are blocked at medium probability and above.
"""

from typing import Any

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from majin.providers.base import (
    BaseAdapter,
    Provider,
    register_adapter,
)
from majin.registry.models import ModelConfig
from majin.utils.logging import get_logger

logger = get_logger("providers.gemini")

SAFETY_SETTINGS = [
    types.SafetySetting(
        category=category,
        threshold=types.HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    )
    for category in (
        types.HarmCategory.HARM_CATEGORY_HARASSMENT,
        types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
        types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
        types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
    )
]


@register_adapter(Provider.GEMINI)
class GeminiAdapter(BaseAdapter):
    """``generate_content`` through the async surface of ``genai.Client``."""

    display_name = "Gemini"

    def _create_client(self, api_key: str | None) -> Any:
        http_options = types.HttpOptions(
            base_url=self.base_url,
            timeout=int(self.timeout * 1000),
        )
        return genai.Client(api_key=api_key, http_options=http_options)

    async def generate(self, config: ModelConfig, prompt: str) -> str | None:
        client = self._create_client(config.api_key)
        try:
            response = await client.aio.models.generate_content(
                model=config.name,
                contents=[
                    types.Content(role="user", parts=[types.Part(text=prompt)])
                ],
                config=types.GenerateContentConfig(safety_settings=SAFETY_SETTINGS),
            )
        except genai_errors.APIError as e:
            raise self.request_failed(config, e.message or e.status, e.code) from e
        except httpx.HTTPError as e:
            raise self.connection_failed(config, e) from e
        finally:
            await client.aio.aclose()

        return self._first_candidate_text(response)

    @staticmethod
    def _first_candidate_text(response: Any) -> str | None:
        candidates = getattr(response, "candidates", None) or []
        if not candidates:
            feedback = getattr(response, "prompt_feedback", None)
            block_reason = getattr(feedback, "block_reason", None)
            if block_reason:
                logger.info("Gemini blocked the prompt: %s", block_reason)
            return None

        content = getattr(candidates[0], "content", None)
        parts = getattr(content, "parts", None) or []
        texts = [
            part.text
            for part in parts
            if isinstance(getattr(part, "text", None), str)
            and not getattr(part, "thought", False)
        ]
        return "".join(texts) or None
