"""Unit tests for the adapter base and registry."""

import pytest

from majin.config.schemas import ProviderEndpointConfig, ProvidersConfig
from majin.providers import (
    AnthropicAdapter,
    DeepSeekAdapter,
    GeminiAdapter,
    GrokAdapter,
    OpenAIAdapter,
    Provider,
    build_adapters,
    redact,
    registered_adapters,
)
from majin.providers.base import extract_error_message
from majin.providers.exceptions import ProviderConnectionError, ProviderError


class TestProviderTag:
    @pytest.mark.parametrize("tag", ["openai", "OpenAI", "OPENAI"])
    def test_case_insensitive(self, tag):
        assert Provider.from_tag(tag) is Provider.OPENAI

    @pytest.mark.parametrize("tag", ["", None, "mistral", "open-ai", " openai"])
    def test_unknown(self, tag):
        assert Provider.from_tag(tag) is None


def test_every_provider_has_an_adapter():
    assert registered_adapters() == {
        Provider.OPENAI: OpenAIAdapter,
        Provider.GEMINI: GeminiAdapter,
        Provider.DEEPSEEK: DeepSeekAdapter,
        Provider.ANTHROPIC: AnthropicAdapter,
        Provider.GROK: GrokAdapter,
    }


def test_build_adapters_applies_config():
    config = ProvidersConfig(
        request_timeout=5,
        grok=ProviderEndpointConfig(base_url="http://grok.local/chat"),
    )

    adapters = build_adapters(config)

    assert adapters[Provider.GROK].base_url == "http://grok.local/chat"
    assert adapters[Provider.DEEPSEEK].base_url == "https://api.deepseek.com/chat/completions"
    assert all(a.timeout == 5 for a in adapters.values())


def test_redact():
    assert redact("bad key sk-123 given", "sk-123") == "bad key *** given"
    assert redact("nothing", None) == "nothing"


@pytest.mark.parametrize(
    "body, expected",
    [
        ({"error": {"message": "quota"}}, "quota"),
        ({"error": "denied"}, "denied"),
        ({"message": "top"}, "top"),
        ({"error": {"code": 1}}, None),
        ("not a dict", None),
        (None, None),
    ],
)
def test_extract_error_message(body, expected):
    assert extract_error_message(body) == expected


def test_request_failed_message_and_redaction(make_model):
    adapter = OpenAIAdapter()
    config = make_model(api_key="sk-secret")

    err = adapter.request_failed(config, "Incorrect API key: sk-secret", 401)

    assert isinstance(err, ProviderError)
    assert err.message == "OpenAI API request failed (HTTP 401): Incorrect API key: ***"
    assert err.status_code == 401
    assert err.provider == "openai"


def test_request_failed_fallback(make_model):
    err = GrokAdapter().request_failed(make_model(), None, 500, fallback="nothing parsed")

    assert err.message == "Grok API request failed (HTTP 500): nothing parsed"


def test_connection_failed(make_model):
    err = DeepSeekAdapter().connection_failed(make_model(), TimeoutError())

    assert isinstance(err, ProviderConnectionError)
    assert err.message == "DeepSeek API request failed: TimeoutError"
