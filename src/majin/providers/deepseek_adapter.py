"""
DeepSeek adapter (OpenAI-compatible REST endpoint)
"""

from majin.providers.base import Provider, register_adapter
from majin.providers.http_adapter import ChatCompletionsHTTPAdapter


@register_adapter(Provider.DEEPSEEK)
class DeepSeekAdapter(ChatCompletionsHTTPAdapter):
    display_name = "DeepSeek"
    default_base_url = "https://api.deepseek.com/chat/completions"
