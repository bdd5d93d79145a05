"""Model management routes (CRUD over the registry)."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from majin.api.dependencies import get_deps
from majin.api.errors import error_response
from majin.core.dependencies import AppDependencies

router = APIRouter(prefix="/api/models", tags=["models"])


@router.get("")
def list_models(deps: AppDependencies = Depends(get_deps)) -> list[dict[str, Any]]:
    return [model.to_public() for model in deps.registry.list_all()]


@router.post("", status_code=201)
def add_model(
    payload: dict[str, Any] = Body(...), deps: AppDependencies = Depends(get_deps)
) -> Any:
    model_id = deps.registry.insert(payload)
    return JSONResponse(
        {"message": "Model added successfully", "id": model_id}, status_code=201
    )


@router.put("")
def update_model(
    payload: dict[str, Any] = Body(...), deps: AppDependencies = Depends(get_deps)
) -> Any:
    fields = dict(payload)
    model_id = fields.pop("id", None)
    if not model_id:
        return error_response("Missing model ID", 400)
    model = deps.registry.update(str(model_id), fields)
    return {"message": "Model updated successfully", "model": model.to_public()}


@router.delete("")
def delete_model(
    payload: dict[str, Any] = Body(...), deps: AppDependencies = Depends(get_deps)
) -> Any:
    model_id = payload.get("id")
    if not model_id:
        return error_response("Missing model ID", 400)
    deps.registry.delete(str(model_id))
    return {"message": "Model deleted successfully"}
