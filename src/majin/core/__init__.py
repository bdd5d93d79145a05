"""Core functionality for Majin."""

from .exceptions import (
    CLIError,
    ConfigError,
    ErrorKind,
    GenerationError,
    MajinError,
    RegistryError,
    StateError,
)
from .types import GenerationResult

__all__ = [
    "CLIError",
    "ConfigError",
    "ErrorKind",
    "GenerationError",
    "GenerationResult",
    "MajinError",
    "RegistryError",
    "StateError",
]
