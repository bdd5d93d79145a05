"""Generation routes: single dispatch and fan-out."""

import asyncio
from typing import Any

from fastapi import APIRouter, Depends

from majin.api.dependencies import get_deps
from majin.api.errors import error_response
from majin.api.schemas import FanOutRequest, GenerateTextRequest
from majin.core.dependencies import AppDependencies
from majin.registry.models import ContentType
from majin.utils.logging import get_logger

router = APIRouter(prefix="/api", tags=["generation"])
logger = get_logger("api.generation")


@router.post("/generate-text")
async def generate_text(
    body: GenerateTextRequest, deps: AppDependencies = Depends(get_deps)
) -> dict[str, str]:
    """Dispatch one prompt to one model.

    Failures are raised as ``GenerationError`` and mapped to 400/404/500/501
    by the exception handlers.
    """
    completion = await deps.dispatcher.generate(body.model_name, body.prompt)
    return {"completion": completion}


@router.post("/generate")
async def generate(body: FanOutRequest, deps: AppDependencies = Depends(get_deps)) -> Any:
    """Send one prompt to every selected model and return all results."""
    if body.content_type is not ContentType.TEXT:
        return error_response(
            f"Content type '{body.content_type.value}' has no generation path", 501
        )

    results = await deps.fanout.run(body.models, body.prompt)
    response: dict[str, Any] = {
        "results": [r.model_dump(mode="json") for r in results],
    }
    if body.save:
        response["resultId"] = await asyncio.to_thread(
            deps.results.save, body.prompt, results, body.content_type
        )
    return response
