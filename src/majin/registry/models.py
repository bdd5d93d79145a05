"""Stored model records."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ContentType(str, Enum):
    """Kind of content a model produces. Only ``text`` has a generation path."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    THREE_D = "3d"


class ModelConfig(BaseModel):
    """A named configuration used to reach one provider.

    Field names follow Python conventions; the stored document and the HTTP
    payloads use the ``apiKey`` and ``type`` spellings.
    """

    model_config = ConfigDict(populate_by_name=True, use_enum_values=False)

    id: str | None = Field(default=None, description="Public string id")
    name: str = Field(min_length=1, description="Unique name; also the vendor model id")
    provider: str = Field(default="", description="Provider tag, matched case-insensitively")
    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("apiKey", "api_key"),
        serialization_alias="apiKey",
        repr=False,
    )
    content_type: ContentType = Field(
        default=ContentType.TEXT,
        validation_alias=AliasChoices("type", "contentType", "content_type"),
        serialization_alias="type",
    )
    description: str | None = None
    active: bool = True

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> ModelConfig:
        """Build a config from a raw MongoDB document, exposing ``_id`` as ``id``."""
        data = dict(document)
        raw_id = data.pop("_id", None)
        if raw_id is not None:
            data["id"] = str(raw_id)
        return cls.model_validate(data)

    def to_document(self) -> dict[str, Any]:
        """Serialize to the stored document shape (without the id)."""
        return self.model_dump(by_alias=True, exclude={"id"}, mode="json")

    def to_public(self) -> dict[str, Any]:
        """Serialize for API responses, id included."""
        return self.model_dump(by_alias=True, mode="json")


# Incoming field spellings mapped to stored document keys
FIELD_ALIASES: dict[str, str] = {
    "name": "name",
    "provider": "provider",
    "apiKey": "apiKey",
    "api_key": "apiKey",
    "type": "type",
    "contentType": "type",
    "content_type": "type",
    "description": "description",
    "active": "active",
}

REQUIRED_FIELDS = ("name", "provider", "apiKey", "type")
