"""Settings routes: profile, theme and selected models."""

from typing import Any

from fastapi import APIRouter, Depends

from majin.api.dependencies import get_deps
from majin.api.schemas import SettingsUpdate
from majin.core.dependencies import AppDependencies

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("")
def get_settings(deps: AppDependencies = Depends(get_deps)) -> dict[str, Any]:
    return deps.state.get().model_dump(mode="json")


@router.put("")
def update_settings(
    body: SettingsUpdate, deps: AppDependencies = Depends(get_deps)
) -> dict[str, Any]:
    state = deps.state.get()
    if body.user is not None:
        state = deps.state.update_user(body.user.name, body.user.email)
    if body.theme is not None:
        state = deps.state.set_theme(body.theme)
    if body.selected_models is not None:
        state = deps.state.set_selected_models(body.selected_models)
    return state.model_dump(mode="json")
