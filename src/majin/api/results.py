"""Saved results routes."""

from typing import Any

from fastapi import APIRouter, Depends

from majin.api.dependencies import get_deps
from majin.api.schemas import SaveResultsRequest
from majin.core.dependencies import AppDependencies

router = APIRouter(prefix="/api/results", tags=["results"])


@router.get("")
def list_results(deps: AppDependencies = Depends(get_deps)) -> dict[str, Any]:
    records = deps.results.list_all()
    return {"success": True, "results": [r.model_dump(mode="json") for r in records]}


@router.post("")
def save_results(
    body: SaveResultsRequest, deps: AppDependencies = Depends(get_deps)
) -> dict[str, Any]:
    inserted_id = deps.results.save(body.prompt, body.results, body.content_type)
    return {"success": True, "insertedId": inserted_id}
