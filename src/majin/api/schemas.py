"""Request bodies accepted by the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from majin.core.types import GenerationResult
from majin.registry.models import ContentType
from majin.state.models import MAX_SELECTED_MODELS, Theme, UserProfile

MAX_PROMPT_LENGTH = 20000


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())


class GenerateTextRequest(_CamelModel):
    """A single ``(model_name, prompt)`` dispatch.

    Missing fields are reported by the dispatcher as 400.
    """

    model_name: str = Field(default="", alias="modelName")
    prompt: str = Field(default="", max_length=MAX_PROMPT_LENGTH)


class FanOutRequest(_CamelModel):
    models: list[str] = Field(min_length=1, max_length=MAX_SELECTED_MODELS)
    prompt: str = Field(min_length=1, max_length=MAX_PROMPT_LENGTH)
    content_type: ContentType = Field(default=ContentType.TEXT, alias="contentType")
    save: bool = False


class SaveResultsRequest(_CamelModel):
    prompt: str = Field(min_length=1)
    content_type: ContentType = Field(default=ContentType.TEXT, alias="contentType")
    results: list[GenerationResult] = Field(default_factory=list)


class SettingsUpdate(_CamelModel):
    user: UserProfile | None = None
    theme: Theme | None = None
    selected_models: list[str] | None = Field(default=None, alias="selectedModels")
