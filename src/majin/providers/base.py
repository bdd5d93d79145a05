"""
Base classes for provider adapters

Each adapter turns ``(ModelConfig, prompt)`` into the text of the first
completion returned by one vendor. Adapters are registered against a member
of the closed ``Provider`` enum; the dispatcher selects them by tag.
"""

from __future__ import annotations

import abc
from enum import Enum
from typing import Any

from majin.config.schemas import ProvidersConfig
from majin.providers.exceptions import ProviderConnectionError, ProviderError
from majin.registry.models import ModelConfig
from majin.utils.logging import get_logger

logger = get_logger("providers.base")

REDACTED = "***"


class Provider(str, Enum):
    """Vendors Majin can dispatch to."""

    OPENAI = "openai"
    GEMINI = "gemini"
    DEEPSEEK = "deepseek"
    ANTHROPIC = "anthropic"
    GROK = "grok"

    @classmethod
    def from_tag(cls, tag: str | None) -> Provider | None:
        """Exact match on the lower-cased tag; no aliases."""
        if not tag:
            return None
        try:
            return cls(tag.lower())
        except ValueError:
            return None


def redact(text: str, secret: str | None) -> str:
    """Remove every occurrence of ``secret`` from ``text``."""
    if not secret:
        return text
    return text.replace(secret, REDACTED)


def extract_error_message(body: Any) -> str | None:
    """Pull the vendor's error text out of a decoded error body."""
    if not isinstance(body, dict):
        return None
    error = body.get("error", body)
    if isinstance(error, str):
        return error or None
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    message = body.get("message")
    return message if isinstance(message, str) and message else None


class BaseAdapter(abc.ABC):
    """One vendor's "send a prompt, get text back" call.

    Subclasses implement ``generate``. They make exactly one attempt: no
    retry, no backoff, no streaming. Transport failures are raised as
    ``ProviderError``; a response without usable text returns ``None``.
    """

    provider: Provider
    display_name: str = ""
    default_base_url: str | None = None

    def __init__(self, base_url: str | None = None, timeout: float = 60.0) -> None:
        self.base_url = base_url or self.default_base_url
        self.timeout = timeout

    @abc.abstractmethod
    async def generate(self, config: ModelConfig, prompt: str) -> str | None:
        """Return the first completion's text, or None when there is none."""

    @staticmethod
    def user_messages(prompt: str) -> list[dict[str, str]]:
        return [{"role": "user", "content": prompt}]

    def request_failed(
        self,
        config: ModelConfig,
        detail: str | None,
        status_code: int | None = None,
        fallback: str = "Unknown error",
    ) -> ProviderError:
        """Build the error for a non-2xx response."""
        status = f" (HTTP {status_code})" if status_code is not None else ""
        message = f"{self.display_name} API request failed{status}: {detail or fallback}"
        return ProviderError(
            redact(message, config.api_key),
            provider=self.provider.value,
            status_code=status_code,
        )

    def connection_failed(self, config: ModelConfig, error: Exception) -> ProviderError:
        """Build the error for a network failure or timeout."""
        detail = str(error) or type(error).__name__
        message = f"{self.display_name} API request failed: {detail}"
        return ProviderConnectionError(
            redact(message, config.api_key), provider=self.provider.value
        )


# Module-level adapter table filled by @register_adapter
_adapter_registry: dict[Provider, type[BaseAdapter]] = {}


def register_adapter(provider: Provider):
    """Decorator binding an adapter class to one ``Provider`` member."""

    def decorator(cls: type[BaseAdapter]) -> type[BaseAdapter]:
        if provider in _adapter_registry and _adapter_registry[provider] is not cls:
            raise ValueError(f"Adapter already registered for {provider.value}")
        cls.provider = provider
        _adapter_registry[provider] = cls
        logger.debug(f"Registered adapter: {provider.value}")
        return cls

    return decorator


def registered_adapters() -> dict[Provider, type[BaseAdapter]]:
    return dict(_adapter_registry)


def build_adapters(config: ProvidersConfig | None = None) -> dict[Provider, BaseAdapter]:
    """Instantiate one adapter per provider using endpoint and timeout settings."""
    config = config or ProvidersConfig()
    missing = [p.value for p in Provider if p not in _adapter_registry]
    if missing:
        raise RuntimeError(f"No adapter registered for: {', '.join(missing)}")
    return {
        provider: cls(
            base_url=config.endpoint_for(provider.value),
            timeout=config.request_timeout,
        )
        for provider, cls in _adapter_registry.items()
    }
