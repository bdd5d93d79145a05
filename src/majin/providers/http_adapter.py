"""
Raw HTTP adapter for OpenAI-compatible ``/chat/completions`` endpoints
"""

from typing import Any

import httpx

from majin.providers.base import BaseAdapter, extract_error_message
from majin.providers.exceptions import ProviderError
from majin.registry.models import ModelConfig
from majin.utils.logging import get_logger

logger = get_logger("providers.http")


class ChatCompletionsHTTPAdapter(BaseAdapter):
    """POSTs a single-message chat body with a bearer token via ``httpx``.

    Subclasses set ``default_base_url`` to the full endpoint URL and may
    override ``error_fallback`` (used only when the error body is not JSON) and
    ``extract_text``.
    """

    error_fallback = "Unknown error"

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url=base_url, timeout=timeout)
        self._transport = transport

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def generate(self, config: ModelConfig, prompt: str) -> str | None:
        if not self.base_url:
            raise self.request_failed(config, "No endpoint configured")

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {config.api_key}",
        }
        payload = {"model": config.name, "messages": self.user_messages(prompt)}

        try:
            async with self._create_client() as client:
                response = await client.post(self.base_url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            raise self.connection_failed(config, e) from e

        if not response.is_success:
            raise self._status_error(config, response)

        try:
            data = response.json()
        except ValueError:
            logger.warning(
                "%s returned a non-JSON body with HTTP %s",
                self.display_name,
                response.status_code,
            )
            return None

        return self.extract_text(data)

    def _status_error(self, config: ModelConfig, response: httpx.Response) -> ProviderError:
        reason = response.reason_phrase or "HTTP error"
        try:
            detail = extract_error_message(response.json())
            fallback = "Unknown error"
        except ValueError:
            detail = None
            fallback = f"{reason} - {self.error_fallback}"
        logger.error(
            "%s API error: %s %s",
            self.display_name,
            response.status_code,
            response.reason_phrase,
        )
        return self.request_failed(
            config,
            detail,
            response.status_code,
            fallback=fallback,
        )

    @staticmethod
    def first_choice_content(data: Any) -> str | None:
        if not isinstance(data, dict):
            return None
        choices = data.get("choices")
        if not isinstance(choices, list) or not choices:
            return None
        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        return content if isinstance(content, str) else None

    def extract_text(self, data: Any) -> str | None:
        return self.first_choice_content(data)
