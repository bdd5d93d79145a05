"""
Dispatching prompts to provider adapters, singly or fanned out.
"""

from .dispatcher import Dispatcher, ModelLookup
from .exceptions import (
    EmptyCompletionError,
    InvalidRequestError,
    MissingCredentialError,
    ModelUnavailableError,
    UnsupportedProviderError,
)
from .fanout import DEFAULT_MAX_CONCURRENCY, FanOut

__all__ = [
    "DEFAULT_MAX_CONCURRENCY",
    "Dispatcher",
    "EmptyCompletionError",
    "FanOut",
    "InvalidRequestError",
    "MissingCredentialError",
    "ModelLookup",
    "ModelUnavailableError",
    "UnsupportedProviderError",
]
