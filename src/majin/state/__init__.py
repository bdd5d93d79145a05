"""Locally persisted application state (profile, theme, selected models)."""

from .models import MAX_SELECTED_MODELS, AppState, Theme, UserProfile
from .service import StateService
from .store import InMemoryStateStore, StateStore, YamlStateStore

__all__ = [
    "MAX_SELECTED_MODELS",
    "AppState",
    "InMemoryStateStore",
    "StateService",
    "StateStore",
    "Theme",
    "UserProfile",
    "YamlStateStore",
]
