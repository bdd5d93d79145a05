"""
Provider dispatcher: model name + prompt in, completion text or a classified failure out.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Protocol

from majin.core.exceptions import GenerationError
from majin.core.types import GenerationResult
from majin.dispatch.exceptions import (
    EmptyCompletionError,
    InvalidRequestError,
    MissingCredentialError,
    ModelUnavailableError,
    UnsupportedProviderError,
)
from majin.providers.base import BaseAdapter, Provider, build_adapters
from majin.providers.exceptions import ProviderError
from majin.registry.models import ModelConfig
from majin.utils.logging import get_logger

logger = get_logger("dispatch.dispatcher")

INTERNAL_ERROR_MESSAGE = "An internal error occurred during content generation."


class ModelLookup(Protocol):
    """The read-only slice of the registry the dispatcher needs."""

    def find_active(self, name: str) -> ModelConfig | None: ...


class Dispatcher:
    """Resolves a model name to its stored config and calls the matching adapter.

    The dispatcher holds no state between calls apart from the adapter table
    and never writes to the registry.
    """

    def __init__(
        self,
        registry: ModelLookup,
        adapters: Mapping[Provider, BaseAdapter] | None = None,
    ) -> None:
        self.registry = registry
        self.adapters: dict[Provider, BaseAdapter] = dict(
            adapters if adapters is not None else build_adapters()
        )

    async def generate(self, model_name: str, prompt: str) -> str:
        """Return the completion text for ``prompt`` from ``model_name``.

        Raises:
            GenerationError: One of the dispatch or provider error kinds.
        """
        if not model_name or not prompt:
            raise InvalidRequestError("Missing modelName or prompt")

        config = await asyncio.to_thread(self.registry.find_active, model_name)
        if config is None:
            raise ModelUnavailableError(model_name)

        if not config.api_key:
            raise MissingCredentialError(model_name)

        provider = Provider.from_tag(config.provider)
        adapter = self.adapters.get(provider) if provider else None
        if adapter is None:
            raise UnsupportedProviderError(config.provider)

        logger.info("Dispatching to %s", provider.value, extra={"model": model_name})
        try:
            text = await adapter.generate(config, prompt)
        except GenerationError:
            raise
        except Exception as e:
            logger.error(
                "Unexpected error from %s adapter", provider.value, exc_info=True
            )
            raise ProviderError(INTERNAL_ERROR_MESSAGE, provider=provider.value) from e

        if not text:
            raise EmptyCompletionError(model_name)
        return text

    async def dispatch(self, model_name: str, prompt: str) -> GenerationResult:
        """Like ``generate`` but every failure comes back as a result value."""
        try:
            text = await self.generate(model_name, prompt)
        except GenerationError as e:
            logger.warning(
                "Generation failed: %s",
                e.message,
                extra={"model": model_name, "kind": e.kind.value},
            )
            return GenerationResult.failure(model_name, e)
        except Exception:
            logger.error("Unclassified failure for %s", model_name, exc_info=True)
            return GenerationResult.failure(model_name, ProviderError(INTERNAL_ERROR_MESSAGE))
        return GenerationResult.success(model_name, text)
