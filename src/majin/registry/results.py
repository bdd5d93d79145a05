"""Persisted fan-out result batches (``results`` collection)."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field
from pymongo import DESCENDING

from majin.core.types import GenerationResult
from majin.registry.connection import MongoConnection, mongo_errors
from majin.registry.models import ContentType
from majin.utils.logging import get_logger

logger = get_logger("registry.results")


class ResultRecord(BaseModel):
    """One prompt together with the completions (or failures) it produced."""

    id: str | None = None
    prompt: str
    content_type: ContentType = ContentType.TEXT
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    results: list[GenerationResult] = Field(default_factory=list)

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> ResultRecord:
        data = dict(document)
        raw_id = data.pop("_id", None)
        if raw_id is not None:
            data["id"] = str(raw_id)
        return cls.model_validate(data)


class ResultsStore:
    def __init__(self, connection: MongoConnection, collection_name: str | None = None):
        self.connection = connection
        self.collection_name = collection_name or connection.config.results_collection

    def save(
        self,
        prompt: str,
        results: Sequence[GenerationResult],
        content_type: ContentType = ContentType.TEXT,
    ) -> str:
        record = ResultRecord(prompt=prompt, content_type=content_type, results=list(results))
        document = record.model_dump(exclude={"id"})
        document["content_type"] = record.content_type.value
        document["results"] = [r.model_dump(mode="json") for r in record.results]
        with mongo_errors("save results"):
            inserted = self.connection.collection(self.collection_name).insert_one(document)
        logger.info("Saved %d results", len(record.results))
        return str(inserted.inserted_id)

    def list_all(self) -> list[ResultRecord]:
        """All saved batches, newest first."""
        with mongo_errors("list results"):
            documents = list(
                self.connection.collection(self.collection_name)
                .find()
                .sort([("created_at", DESCENDING), ("_id", DESCENDING)])
            )
        return [ResultRecord.from_document(doc) for doc in documents]
