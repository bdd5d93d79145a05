"""CRUD over the ``models`` collection."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bson import ObjectId
from pydantic import ValidationError
from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, OperationFailure

from majin.registry.connection import MongoConnection, mongo_errors
from majin.registry.exceptions import (
    DuplicateModelError,
    ModelNotFoundError,
    RegistryValidationError,
)
from majin.registry.models import FIELD_ALIASES, REQUIRED_FIELDS, ModelConfig
from majin.utils.logging import get_logger

logger = get_logger("registry.store")

# Enforces one active record per name atomically on the server
ACTIVE_NAME_INDEX = "unique_active_name"


def _object_id(model_id: str) -> ObjectId:
    if not model_id or not ObjectId.is_valid(model_id):
        raise ModelNotFoundError(str(model_id))
    return ObjectId(model_id)


def _normalize_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Map incoming field names onto stored keys; id keys are dropped."""
    normalized: dict[str, Any] = {}
    unknown = []
    for key, value in fields.items():
        if key in ("id", "_id"):
            continue
        stored = FIELD_ALIASES.get(key)
        if stored is None:
            unknown.append(key)
            continue
        if hasattr(value, "value"):
            value = value.value
        normalized[stored] = value
    if unknown:
        raise RegistryValidationError(f"Unknown model fields: {', '.join(sorted(unknown))}")
    return normalized


class ModelRegistry:
    """Source of truth for ``ModelConfig`` records.

    Every write is a single-document operation; there are no transactions
    and the last writer wins. Two active records may never share a name.
    """

    def __init__(self, connection: MongoConnection, collection_name: str | None = None):
        self.connection = connection
        self.collection_name = collection_name or connection.config.models_collection
        self._indexed_client: Any = None

    @property
    def _collection(self) -> Collection:
        return self.connection.collection(self.collection_name)

    def insert(self, config: ModelConfig | Mapping[str, Any]) -> str:
        """Store a new model and return its generated id."""
        if isinstance(config, ModelConfig):
            fields = config.to_document()
        else:
            fields = _normalize_fields(config)

        missing = [f for f in REQUIRED_FIELDS if not fields.get(f)]
        if missing:
            raise RegistryValidationError(f"Missing required fields: {', '.join(missing)}")

        if fields.get("active") is None:
            fields["active"] = True
        document = self._validated_document(fields)

        with mongo_errors("insert"):
            self._ensure_indexes()
            if document["active"]:
                self._ensure_unique_active_name(document["name"])
            try:
                result = self._collection.insert_one(document)
            except DuplicateKeyError as e:
                raise DuplicateModelError(document["name"]) from e

        model_id = str(result.inserted_id)
        logger.info("Added model %s (%s)", document["name"], model_id)
        return model_id

    def update(self, model_id: str, fields: Mapping[str, Any]) -> ModelConfig:
        """Apply a partial update; the id itself can never be overwritten."""
        oid = _object_id(model_id)
        changes = _normalize_fields(fields)

        with mongo_errors("update"):
            self._ensure_indexes()
            current = self._collection.find_one({"_id": oid})
            if current is None:
                raise ModelNotFoundError(model_id)

            merged = {k: v for k, v in current.items() if k != "_id"}
            merged.update(changes)
            document = self._validated_document(merged)

            if document["active"] and (
                "name" in changes or ("active" in changes and not current.get("active"))
            ):
                self._ensure_unique_active_name(document["name"], exclude=oid)

            if changes:
                try:
                    result = self._collection.update_one(
                        {"_id": oid}, {"$set": {k: document[k] for k in changes}}
                    )
                except DuplicateKeyError as e:
                    raise DuplicateModelError(document["name"]) from e
                if result.matched_count == 0:
                    raise ModelNotFoundError(model_id)

        logger.info("Updated model %s fields=%s", model_id, sorted(changes))
        return ModelConfig.from_document({"_id": oid, **document})

    def set_active(self, model_id: str, active: bool) -> ModelConfig:
        return self.update(model_id, {"active": active})

    def delete(self, model_id: str) -> None:
        oid = _object_id(model_id)
        with mongo_errors("delete"):
            result = self._collection.delete_one({"_id": oid})
        if result.deleted_count == 0:
            raise ModelNotFoundError(model_id)
        logger.info("Deleted model %s", model_id)

    def list_all(self) -> list[ModelConfig]:
        with mongo_errors("list"):
            documents = list(self._collection.find())
        return [ModelConfig.from_document(doc) for doc in documents]

    def get(self, model_id: str) -> ModelConfig:
        oid = _object_id(model_id)
        with mongo_errors("get"):
            document = self._collection.find_one({"_id": oid})
        if document is None:
            raise ModelNotFoundError(model_id)
        return ModelConfig.from_document(document)

    def find_active(self, name: str) -> ModelConfig | None:
        """Return the active config named ``name``, or None."""
        with mongo_errors("lookup"):
            documents = list(
                self._collection.find({"name": name, "active": True}).sort("_id", 1).limit(2)
            )
        if not documents:
            return None
        if len(documents) > 1:
            # Only reachable for records written before the uniqueness rule
            logger.warning("Several active models named %s; using the oldest", name)
        return ModelConfig.from_document(documents[0])

    def _ensure_indexes(self) -> None:
        """Create the partial unique index once per client."""
        client = self.connection.database.client
        if self._indexed_client is client:
            return
        try:
            self._collection.create_index(
                [("name", ASCENDING)],
                name=ACTIVE_NAME_INDEX,
                unique=True,
                partialFilterExpression={"active": True},
            )
        except OperationFailure as e:
            # Existing duplicate active names; the count check still applies
            logger.warning("Could not create %s index: %s", ACTIVE_NAME_INDEX, e)
        self._indexed_client = client

    def _ensure_unique_active_name(self, name: str, exclude: ObjectId | None = None) -> None:
        query: dict[str, Any] = {"name": name, "active": True}
        if exclude is not None:
            query["_id"] = {"$ne": exclude}
        if self._collection.count_documents(query, limit=1) > 0:
            raise DuplicateModelError(name)

    @staticmethod
    def _validated_document(fields: dict[str, Any]) -> dict[str, Any]:
        try:
            return ModelConfig.model_validate(fields).to_document()
        except ValidationError as e:
            raise RegistryValidationError(f"Invalid model record: {e}") from e
