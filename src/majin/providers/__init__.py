"""
Provider adapters

Importing this package registers one adapter per ``Provider`` member.
"""

# Import adapter modules to trigger decorator registration
from . import (
    anthropic_adapter,  # noqa: F401
    deepseek_adapter,  # noqa: F401
    gemini_adapter,  # noqa: F401
    grok_adapter,  # noqa: F401
    openai_adapter,  # noqa: F401
)
from .anthropic_adapter import AnthropicAdapter
from .base import (
    BaseAdapter,
    Provider,
    build_adapters,
    redact,
    register_adapter,
    registered_adapters,
)
from .deepseek_adapter import DeepSeekAdapter
from .exceptions import ProviderConnectionError, ProviderError
from .gemini_adapter import GeminiAdapter
from .grok_adapter import GrokAdapter
from .http_adapter import ChatCompletionsHTTPAdapter
from .openai_adapter import OpenAIAdapter

__all__ = [
    "AnthropicAdapter",
    "BaseAdapter",
    "ChatCompletionsHTTPAdapter",
    "DeepSeekAdapter",
    "GeminiAdapter",
    "GrokAdapter",
    "OpenAIAdapter",
    "Provider",
    "ProviderConnectionError",
    "ProviderError",
    "build_adapters",
    "redact",
    "register_adapter",
    "registered_adapters",
]
