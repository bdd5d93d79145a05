"""Application dependencies container."""

from __future__ import annotations

from dataclasses import dataclass, field

from majin.config.config_manager import ConfigManager
from majin.config.schemas import AppConfig
from majin.dispatch.dispatcher import Dispatcher
from majin.dispatch.fanout import FanOut
from majin.registry.connection import MongoConnection
from majin.registry.results import ResultsStore
from majin.registry.store import ModelRegistry
from majin.state.service import StateService


@dataclass
class AppDependencies:
    """Container for the services one Majin process works with.

    Built by ``bootstrap``; the API factory and the CLI commands receive it
    instead of reaching for module-level globals.
    """

    config_manager: ConfigManager
    connection: MongoConnection
    registry: ModelRegistry
    results: ResultsStore
    dispatcher: Dispatcher
    fanout: FanOut
    state: StateService
    _initialized: bool = field(default=False, init=False, repr=False)

    @property
    def config(self) -> AppConfig:
        return self.config_manager.global_config

    def mark_initialized(self) -> None:
        self._initialized = True

    def is_initialized(self) -> bool:
        return self._initialized
