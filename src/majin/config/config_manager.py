"""Configuration manager merging defaults, YAML files and environment."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from majin.config.env_manager import EnvManager
from majin.config.schemas import AppConfig
from majin.core.exceptions import ConfigError
from majin.utils.logging import get_logger

logger = get_logger("config.config_manager")


class ConfigManager:
    """Loads the application configuration.

    Layer priority (highest to lowest):
    1. Environment variables (``MAJIN_*``, including values from .env files)
    2. YAML files, later files overriding earlier ones
    3. Schema defaults
    """

    def __init__(
        self,
        config_paths: list[Path | str] | None = None,
        env_manager: EnvManager | None = None,
    ):
        self.env_manager: EnvManager = env_manager or EnvManager()
        self.config_paths = [Path(p).expanduser() for p in (config_paths or [])]
        self._global_config: AppConfig | None = None

    @property
    def global_config(self) -> AppConfig:
        if self._global_config is None:
            return self.load_global_config()
        return self._global_config

    def load_global_config(self) -> AppConfig:
        """Load and merge configuration from all sources.

        Raises:
            ConfigError: If configuration is invalid or a YAML file is unreadable
        """
        logger.info("Loading global configuration")
        config_data: dict[str, Any] = {}

        for config_path in self.config_paths:
            yaml_data = self._load_yaml_file(config_path)
            if yaml_data is not None:
                config_data = self._deep_merge(config_data, yaml_data)
                logger.debug(f"Merged YAML config from {config_path}")

        env_data = self.env_manager.get_config_from_env()
        if env_data:
            config_data = self._deep_merge(config_data, env_data)

        try:
            config = AppConfig.from_dict(config_data)
        except ValidationError as e:
            error_msg = f"Invalid global configuration: {e}"
            logger.error(error_msg)
            raise ConfigError(error_msg) from e

        self._global_config = config
        logger.info("Global configuration loaded and validated successfully")
        return config

    def _load_yaml_file(self, path: Path) -> dict[str, Any] | None:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse YAML config {path}: {e}") from e

        if data is None:
            return None
        if not isinstance(data, dict):
            logger.warning(f"YAML file {path} did not load as dict, skipping")
            return None
        return data

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge ``override`` into a copy of ``base``."""
        merged = base.copy()
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = ConfigManager._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
