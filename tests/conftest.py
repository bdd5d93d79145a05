from __future__ import annotations

import asyncio
import os
import sys
import uuid
from pathlib import Path
from unittest.mock import patch

# Add project src/ to sys.path for imports like `majin.*`
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import mongomock
import pytest

from majin.config.config_manager import ConfigManager
from majin.config.env_manager import EnvManager
from majin.config.schemas import MongoConfig
from majin.core.bootstrap import bootstrap
from majin.providers import BaseAdapter, Provider
from majin.registry.connection import MongoConnection
from majin.registry.models import ModelConfig
from majin.registry.results import ResultsStore
from majin.registry.store import ModelRegistry
from majin.state.store import InMemoryStateStore


@pytest.fixture
def mongo_config() -> MongoConfig:
    return MongoConfig(uri="mongodb://localhost:27017")


@pytest.fixture
def connection(mongo_config):
    """An open connection backed by an in-memory mongomock client."""
    conn = MongoConnection(mongo_config, client_factory=mongomock.MongoClient)
    conn.open()
    conn.database.client.drop_database(mongo_config.database)
    yield conn
    conn.close()


@pytest.fixture
def registry(connection) -> ModelRegistry:
    return ModelRegistry(connection)


@pytest.fixture
def results_store(connection) -> ResultsStore:
    return ResultsStore(connection)


@pytest.fixture
def make_model():
    """Build a ModelConfig with sensible defaults."""

    def _make(**overrides) -> ModelConfig:
        fields = {
            "name": "gpt-4o",
            "provider": "openai",
            "api_key": "sk-test-1234567890",
            "content_type": "text",
            "description": "test model",
            "active": True,
        }
        fields.update(overrides)
        return ModelConfig(**fields)

    return _make


class StubAdapter(BaseAdapter):
    """Adapter returning canned replies per model name and recording calls.

    A model without a canned reply echoes the prompt. Exceptions in
    ``replies`` are raised instead of returned.
    """

    display_name = "Stub"

    def __init__(self, replies=None, delay: float = 0.0):
        super().__init__()
        self.provider = Provider.OPENAI
        self.replies = replies or {}
        self.delay = delay
        self.calls: list[tuple[str, str]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def generate(self, config, prompt):
        self.calls.append((config.name, prompt))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            reply = self.replies.get(config.name, prompt)
            if isinstance(reply, Exception):
                raise reply
            return reply
        finally:
            self.in_flight -= 1


@pytest.fixture
def stub_adapter_cls():
    return StubAdapter


@pytest.fixture
def app_context(tmp_path, stub_adapter_cls):
    """A bootstrapped context on mongomock with stub adapters for every provider."""
    adapter = stub_adapter_cls()
    # One client for every open() so data survives between CLI commands
    client = mongomock.MongoClient()
    env = {
        "MAJIN_MONGODB__URI": "mongodb://localhost:27017",
        "MAJIN_MONGODB__DATABASE": f"majin_test_{uuid.uuid4().hex}",
    }
    with patch.dict(os.environ, env, clear=True):
        config_manager = ConfigManager(
            env_manager=EnvManager(env_paths=[tmp_path / ".env"])
        )
        ctx = bootstrap(
            config_manager=config_manager,
            client_factory=lambda *args, **kwargs: client,
            adapters={provider: adapter for provider in Provider},
            state_store=InMemoryStateStore(),
        )
    ctx.register("stub_adapter", adapter)
    return ctx
