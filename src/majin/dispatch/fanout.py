"""
Fan-out: one prompt, several models, bounded concurrency.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from majin.core.types import GenerationResult
from majin.dispatch.dispatcher import Dispatcher
from majin.dispatch.exceptions import InvalidRequestError
from majin.utils.logging import get_logger

logger = get_logger("dispatch.fanout")

DEFAULT_MAX_CONCURRENCY = 5


class FanOut:
    """Runs one dispatch per model with at most ``max_concurrency`` in flight.

    Results are returned in the order of the requested model names. A failed
    dispatch yields a failed result and never affects its siblings.
    Cancelling the awaiting task cancels every in-flight provider call.
    """

    def __init__(
        self, dispatcher: Dispatcher, max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.dispatcher = dispatcher
        self.max_concurrency = max_concurrency

    async def run(self, model_names: Sequence[str], prompt: str) -> list[GenerationResult]:
        if not model_names:
            raise InvalidRequestError("No models selected")

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def _bounded(name: str) -> GenerationResult:
            async with semaphore:
                return await self.dispatcher.dispatch(name, prompt)

        logger.info(
            "Fanning out prompt to %d model(s)",
            len(model_names),
            extra={"max_concurrency": self.max_concurrency},
        )
        results = await asyncio.gather(*(_bounded(name) for name in model_names))

        succeeded = sum(1 for r in results if r.ok)
        logger.info("Fan-out finished: %d/%d succeeded", succeeded, len(results))
        return list(results)
