"""
Model registry backed by MongoDB.

``ModelRegistry`` owns the stored ``ModelConfig`` records; ``ResultsStore``
keeps the completions produced for each prompt.
"""

from .connection import MongoConnection
from .exceptions import (
    DuplicateModelError,
    ModelNotFoundError,
    RegistryConnectionError,
    RegistryValidationError,
)
from .models import ContentType, ModelConfig
from .results import ResultRecord, ResultsStore
from .store import ModelRegistry

__all__ = [
    "ContentType",
    "DuplicateModelError",
    "ModelConfig",
    "ModelNotFoundError",
    "ModelRegistry",
    "MongoConnection",
    "RegistryConnectionError",
    "RegistryValidationError",
    "ResultRecord",
    "ResultsStore",
]
