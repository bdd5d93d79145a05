"""Operations behind the settings and model-selection controls."""

from __future__ import annotations

from pydantic import ValidationError

from majin.core.exceptions import StateError
from majin.state.models import MAX_SELECTED_MODELS, AppState, Theme, UserProfile
from majin.state.store import StateStore
from majin.utils.logging import get_logger

logger = get_logger("state.service")


class StateService:
    """Loads the state, applies one change, and saves it back."""

    def __init__(self, store: StateStore) -> None:
        self.store = store

    def get(self) -> AppState:
        return self.store.load()

    def update_user(self, name: str, email: str) -> AppState:
        if not name or not email:
            raise StateError("Please fill in all required fields: name and email")
        state = self.store.load()
        state.user = UserProfile(name=name, email=email)
        return self._save(state, "Profile updated")

    def set_theme(self, theme: Theme | str) -> AppState:
        try:
            value = Theme(theme)
        except ValueError as e:
            choices = ", ".join(t.value for t in Theme)
            raise StateError(f"Unknown theme '{theme}'; choose one of: {choices}") from e
        state = self.store.load()
        state.theme = value
        return self._save(state, f"Theme has been changed to {value.value}")

    def select_model(self, name: str) -> AppState:
        if not name:
            raise StateError("Model name is required")
        state = self.store.load()
        if name in state.selected_models:
            return state
        if len(state.selected_models) >= MAX_SELECTED_MODELS:
            raise StateError(
                f"Maximum models reached: you can select up to {MAX_SELECTED_MODELS} models"
            )
        state.selected_models.append(name)
        return self._save(state, f"Selected model {name}")

    def deselect_model(self, name: str) -> AppState:
        state = self.store.load()
        if name not in state.selected_models:
            return state
        state.selected_models.remove(name)
        return self._save(state, f"Deselected model {name}")

    def set_selected_models(self, names: list[str]) -> AppState:
        state = self.store.load()
        try:
            state = AppState.model_validate({**state.model_dump(), "selected_models": names})
        except ValidationError as e:
            raise StateError(f"Invalid model selection: {e.errors()[0]['msg']}") from e
        return self._save(state, "Model selection updated")

    def _save(self, state: AppState, message: str) -> AppState:
        self.store.save(state)
        logger.info(message)
        return state
