"""Persistence for ``AppState``."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import yaml
from pydantic import ValidationError

from majin.core.exceptions import StateError
from majin.state.models import AppState
from majin.utils.logging import get_logger

logger = get_logger("state.store")


class StateStore(Protocol):
    """Read/write interface the state service persists through."""

    def load(self) -> AppState: ...

    def save(self, state: AppState) -> None: ...


class InMemoryStateStore:
    """Keeps state for the lifetime of the process only."""

    def __init__(self, state: AppState | None = None) -> None:
        self._state = state or AppState()

    def load(self) -> AppState:
        return self._state.model_copy(deep=True)

    def save(self, state: AppState) -> None:
        self._state = state.model_copy(deep=True)


class YamlStateStore:
    """Stores state as a YAML document at ``path``."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> AppState:
        if not self.path.exists():
            return AppState()

        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise StateError(f"Failed to read state file {self.path}: {e}") from e

        try:
            return AppState.model_validate(data)
        except ValidationError as e:
            raise StateError(f"Invalid state file {self.path}: {e}") from e

    def save(self, state: AppState) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                yaml.safe_dump(state.model_dump(mode="json"), f, default_flow_style=False)
        except OSError as e:
            raise StateError(f"Failed to write state file {self.path}: {e}") from e
        logger.debug(f"Saved state to {self.path}")
