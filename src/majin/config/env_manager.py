"""Environment variable management for Majin."""

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from majin.core.exceptions import ConfigError
from majin.utils.logging import get_logger

logger = get_logger("config.env_manager")

# Variable name used by earlier deployments for the registry connection string
LEGACY_MONGODB_URI_VAR = "MONGODB_URI"


class EnvManager:
    """Manages loading and parsing environment variables for configuration."""

    def __init__(self, env_prefix: str = "MAJIN_", env_paths: list[Path] | None = None):
        """Initialize the environment manager.

        Args:
            env_prefix: Prefix for environment variables to load (default: "MAJIN_")
            env_paths: Optional list of .env file paths to load (default: cwd)
        """
        self.env_prefix = env_prefix
        self.env_paths = env_paths or self._get_default_env_paths()

    def with_prefix(self, key: str) -> str:
        """Add the environment prefix to a key if not already present."""
        return key if key.startswith(self.env_prefix) else f"{self.env_prefix}{key}"

    def _get_default_env_paths(self) -> list[Path]:
        """Get default .env file paths to check."""
        return [Path.cwd() / ".env", Path.cwd() / ".env.local"]

    def load_env_files(self) -> None:
        """Load .env files; later files override earlier ones.

        Raises:
            ConfigError: If .env file exists but cannot be loaded
        """
        loaded_any = False
        for env_path in self.env_paths:
            if not env_path.exists():
                continue
            try:
                load_dotenv(env_path, override=loaded_any)
            except Exception as e:
                raise ConfigError(f"Failed to load .env file {env_path}: {e}") from e
            logger.info(f"Loaded environment variables from {env_path}")
            loaded_any = True

        if not loaded_any:
            logger.debug("No .env files found to load")

    def get_config_from_env(self) -> dict[str, Any]:
        """Extract configuration from environment variables.

        ``MAJIN_MONGODB__URI`` becomes ``{"mongodb": {"uri": ...}}``. The bare
        ``MONGODB_URI`` variable is honoured when the prefixed one is absent.

        Raises:
            ConfigError: If environment variable parsing fails
        """
        config_data: dict[str, Any] = {}
        env_count = 0

        try:
            legacy_uri = os.environ.get(LEGACY_MONGODB_URI_VAR)
            if legacy_uri:
                config_data["mongodb"] = {"uri": legacy_uri}

            for key, value in os.environ.items():
                if key.startswith(self.env_prefix):
                    config_key = key[len(self.env_prefix) :].lower()
                    env_count += 1
                    self._set_nested_value(config_data, config_key.split("__"), value)

            if env_count > 0:
                logger.debug(
                    f"Loaded {env_count} environment variables with prefix '{self.env_prefix}'"
                )

        except Exception as e:
            raise ConfigError(f"Failed to parse environment variables: {e}") from e

        return config_data

    def _set_nested_value(
        self, data: dict[str, Any], key_parts: list[str], value: str
    ) -> None:
        """Set a nested dictionary value from key parts."""
        current = data

        for part in key_parts[:-1]:
            if part not in current:
                current[part] = {}
            elif not isinstance(current[part], dict):
                logger.warning(
                    f"Cannot set nested value for {'.'.join(key_parts)}: {part} is not a dictionary"
                )
                return
            current = current[part]

        current[key_parts[-1]] = self._convert_env_value(value)

    def _convert_env_value(self, value: str) -> Any:
        """Convert string environment variable value to bool, int, float or str."""
        if value.lower() in ("true", "false"):
            return value.lower() == "true"

        try:
            if "." not in value and "e" not in value.lower():
                return int(value)
            return float(value)
        except ValueError:
            pass

        return value if value != "null" else None

    def get_env(self, key: str, default: Any = None) -> str | None:
        """Get a prefixed environment variable from the current process."""
        return os.environ.get(self.with_prefix(key), default)
