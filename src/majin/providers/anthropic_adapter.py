"""
Anthropic adapter using the official SDK
"""

from typing import Any

import anthropic
from anthropic import AsyncAnthropic

from majin.providers.base import (
    BaseAdapter,
    Provider,
    extract_error_message,
    register_adapter,
)
from majin.registry.models import ModelConfig
from majin.utils.logging import get_logger

logger = get_logger("providers.anthropic")

MAX_TOKENS = 1024


@register_adapter(Provider.ANTHROPIC)
class AnthropicAdapter(BaseAdapter):
    """Messages API through ``AsyncAnthropic``."""

    display_name = "Anthropic"

    def _create_client(self, api_key: str | None) -> Any:
        return AsyncAnthropic(
            api_key=api_key,
            base_url=self.base_url,
            timeout=self.timeout,
            max_retries=0,
        )

    async def generate(self, config: ModelConfig, prompt: str) -> str | None:
        client = self._create_client(config.api_key)
        try:
            response = await client.messages.create(
                model=config.name,
                max_tokens=MAX_TOKENS,
                messages=self.user_messages(prompt),
            )
        except anthropic.APIStatusError as e:
            detail = extract_error_message(e.body) or e.message
            raise self.request_failed(config, detail, e.status_code) from e
        except anthropic.APIConnectionError as e:
            raise self.connection_failed(config, e) from e
        finally:
            await client.close()

        return self._first_text_block(response)

    @staticmethod
    def _first_text_block(response: Any) -> str | None:
        blocks = getattr(response, "content", None) or []
        if not blocks:
            return None
        first = blocks[0]
        if getattr(first, "type", None) != "text":
            logger.debug("First content block is %s, not text", getattr(first, "type", None))
            return None
        text = getattr(first, "text", None)
        return text if isinstance(text, str) else None
