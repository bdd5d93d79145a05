"""
OpenAI adapter using the official SDK
"""

from typing import Any

import openai
from openai import AsyncOpenAI

from majin.providers.base import (
    BaseAdapter,
    Provider,
    extract_error_message,
    register_adapter,
)
from majin.registry.models import ModelConfig
from majin.utils.logging import get_logger

logger = get_logger("providers.openai")


@register_adapter(Provider.OPENAI)
class OpenAIAdapter(BaseAdapter):
    """Chat completions through ``AsyncOpenAI``."""

    display_name = "OpenAI"

    def _create_client(self, api_key: str | None) -> Any:
        # max_retries=0: the SDK would otherwise retry on its own
        return AsyncOpenAI(
            api_key=api_key,
            base_url=self.base_url,
            timeout=self.timeout,
            max_retries=0,
        )

    async def generate(self, config: ModelConfig, prompt: str) -> str | None:
        client = self._create_client(config.api_key)
        try:
            response = await client.chat.completions.create(
                model=config.name,
                messages=self.user_messages(prompt),
            )
        except openai.APIStatusError as e:
            detail = extract_error_message(e.body) or e.message
            raise self.request_failed(config, detail, e.status_code) from e
        except openai.APIConnectionError as e:
            raise self.connection_failed(config, e) from e
        finally:
            await client.close()

        return self._first_choice_text(response)

    @staticmethod
    def _first_choice_text(response: Any) -> str | None:
        choices = getattr(response, "choices", None) or []
        if not choices:
            return None
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        return content if isinstance(content, str) else None
