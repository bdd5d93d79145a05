"""
xAI Grok adapter (OpenAI-compatible REST endpoint)
"""

from typing import Any

from majin.providers.base import Provider, register_adapter
from majin.providers.http_adapter import ChatCompletionsHTTPAdapter


@register_adapter(Provider.GROK)
class GrokAdapter(ChatCompletionsHTTPAdapter):
    display_name = "Grok"
    default_base_url = "https://api.x.ai/v1/chat/completions"
    error_fallback = "Failed to parse error response from Grok API"

    def extract_text(self, data: Any) -> str | None:
        text = self.first_choice_content(data)
        if text:
            return text
        # Older responses carry the text at the top level
        completion = data.get("completion") if isinstance(data, dict) else None
        return completion if isinstance(completion, str) else text
