"""Scoped handle around a pooled MongoDB client."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from majin.config.schemas import MongoConfig
from majin.core.exceptions import ConfigError
from majin.registry.exceptions import RegistryConnectionError
from majin.utils.logging import get_logger

logger = get_logger("registry.connection")


@contextmanager
def mongo_errors(operation: str) -> Iterator[None]:
    """Translate driver failures into registry errors."""
    try:
        yield
    except PyMongoError as e:
        logger.error("MongoDB %s failed: %s", operation, e)
        raise RegistryConnectionError(f"MongoDB {operation} failed: {e}") from e


class MongoConnection:
    """Owns one ``MongoClient`` (and its connection pool) for a bounded scope.

    Use it as a context manager, or call ``open()``/``close()`` from an
    application lifespan. Stores receive the connection and ask it for their
    collection on every operation, so they never outlive it.
    """

    def __init__(
        self,
        config: MongoConfig,
        client_factory: Callable[..., Any] = MongoClient,
    ) -> None:
        self.config = config
        self._client_factory = client_factory
        self._client: Any | None = None

    @property
    def is_open(self) -> bool:
        return self._client is not None

    def open(self) -> MongoConnection:
        if self._client is not None:
            return self
        if not self.config.uri:
            raise ConfigError(
                "MongoDB connection string is not configured; "
                "set MONGODB_URI or MAJIN_MONGODB__URI"
            )
        try:
            self._client = self._client_factory(
                self.config.uri,
                serverSelectionTimeoutMS=self.config.server_selection_timeout_ms,
            )
        except PyMongoError as e:
            raise RegistryConnectionError(f"Failed to create MongoDB client: {e}") from e
        logger.info("Opened MongoDB client for database %s", self.config.database)
        return self

    def close(self) -> None:
        if self._client is None:
            return
        try:
            self._client.close()
        finally:
            self._client = None
            logger.info("Closed MongoDB client")

    @property
    def database(self) -> Database:
        if self._client is None:
            raise RegistryConnectionError("MongoDB connection is not open")
        return self._client[self.config.database]

    def collection(self, name: str) -> Collection:
        return self.database[name]

    def __enter__(self) -> MongoConnection:
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
