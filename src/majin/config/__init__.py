"""Configuration management for Majin."""

from .config_manager import ConfigManager
from .env_manager import EnvManager
from .schemas import (
    AppConfig,
    FanOutConfig,
    MongoConfig,
    ProvidersConfig,
    ServerConfig,
)

__all__ = [
    "AppConfig",
    "ConfigManager",
    "EnvManager",
    "FanOutConfig",
    "MongoConfig",
    "ProvidersConfig",
    "ServerConfig",
]
