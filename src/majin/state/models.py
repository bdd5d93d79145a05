"""Application state shown on the dashboard and settings screens."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

MAX_SELECTED_MODELS = 5


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class UserProfile(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)


class AppState(BaseModel):
    """User profile, theme and the models selected for the next prompt."""

    user: UserProfile | None = None
    theme: Theme = Theme.SYSTEM
    selected_models: list[str] = Field(default_factory=list)

    @field_validator("selected_models")
    @classmethod
    def validate_selected_models(cls, v: list[str]) -> list[str]:
        if len(v) > MAX_SELECTED_MODELS:
            raise ValueError(f"At most {MAX_SELECTED_MODELS} models can be selected")
        if len(set(v)) != len(v):
            raise ValueError("Selected models must be unique")
        return v
