"""Application bootstrap sequence and dependency injection."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from pymongo import MongoClient

from majin.config.config_manager import ConfigManager
from majin.config.env_manager import EnvManager
from majin.config.schemas import AppConfig
from majin.core.app_context import AppContext
from majin.core.dependencies import AppDependencies
from majin.dispatch.dispatcher import Dispatcher
from majin.dispatch.fanout import FanOut
from majin.providers import BaseAdapter, Provider, build_adapters
from majin.registry.connection import MongoConnection
from majin.registry.results import ResultsStore
from majin.registry.store import ModelRegistry
from majin.state.service import StateService
from majin.state.store import StateStore, YamlStateStore
from majin.utils.logging import get_logger, setup_logging

logger = get_logger("core.bootstrap")


def _setup_environment(env_manager: EnvManager) -> None:
    """Load .env files before configuration is read."""
    try:
        env_manager.load_env_files()
    except Exception as e:
        logger.warning("Failed to load .env files: %s", e, exc_info=True)


def bootstrap(
    config_path: str | Path | None = None,
    *,
    log_level: int | None = None,
    config_manager: ConfigManager | None = None,
    client_factory: Callable[..., Any] = MongoClient,
    adapters: Mapping[Provider, BaseAdapter] | None = None,
    state_store: StateStore | None = None,
) -> AppContext:
    """Initialize and wire the application.

    The MongoDB connection is created but not opened; callers open it for
    the scope they need (a CLI command, or the API lifespan).

    Args:
        config_path: Optional YAML configuration file
        log_level: Override log level
        config_manager: Optional pre-configured config manager (for testing)
        client_factory: MongoDB client class (for testing)
        adapters: Provider adapters to use instead of the built-in ones
        state_store: Persistence for AppState (defaults to the YAML file)

    Raises:
        RuntimeError: If application initialization fails
    """
    setup_logging(level=log_level or logging.INFO)

    try:
        logger.debug("Starting application bootstrap")

        if config_manager is None:
            env_manager = EnvManager()
            _setup_environment(env_manager)
            config_manager = ConfigManager(
                config_paths=[config_path] if config_path else [],
                env_manager=env_manager,
            )
        config = config_manager.load_global_config()

        if log_level is None:
            setup_logging(level=getattr(logging, config.log_level, logging.INFO))

        deps = _initialize_dependencies(
            config_manager, config, client_factory, adapters, state_store
        )
        ctx = AppContext(dependencies=deps)
        ctx.register("registry", deps.registry)
        ctx.register("dispatcher", deps.dispatcher)
        ctx.register("fanout", deps.fanout)
        ctx.register("state", deps.state)
        deps.mark_initialized()

        logger.info("Application bootstrap completed successfully")
        return ctx

    except Exception as e:
        logger.critical("Failed to bootstrap application", exc_info=True)
        raise RuntimeError("Failed to initialize application") from e


def _initialize_dependencies(
    config_manager: ConfigManager,
    config: AppConfig,
    client_factory: Callable[..., Any],
    adapters: Mapping[Provider, BaseAdapter] | None,
    state_store: StateStore | None,
) -> AppDependencies:
    connection = MongoConnection(config.mongodb, client_factory=client_factory)
    registry = ModelRegistry(connection)
    dispatcher = Dispatcher(
        registry,
        adapters if adapters is not None else build_adapters(config.providers),
    )
    return AppDependencies(
        config_manager=config_manager,
        connection=connection,
        registry=registry,
        results=ResultsStore(connection),
        dispatcher=dispatcher,
        fanout=FanOut(dispatcher, max_concurrency=config.fanout.max_concurrency),
        state=StateService(state_store or YamlStateStore(config.state_path)),
    )
