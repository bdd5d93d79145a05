"""Value types shared between the dispatcher, the result store and the API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from majin.core.exceptions import ErrorKind, GenerationError


class GenerationResult(BaseModel):
    """Outcome of one dispatch: either ``text`` or ``error_kind`` plus ``message``."""

    model_config = ConfigDict(protected_namespaces=())

    model_name: str
    text: str | None = None
    error_kind: ErrorKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, model_name: str, text: str) -> GenerationResult:
        return cls(model_name=model_name, text=text)

    @classmethod
    def failure(cls, model_name: str, error: GenerationError) -> GenerationResult:
        return cls(model_name=model_name, error_kind=error.kind, message=error.message)

