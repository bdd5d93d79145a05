"""Unit tests for Dispatcher."""

from unittest.mock import patch

import pytest

from majin.core.exceptions import ErrorKind
from majin.dispatch.dispatcher import INTERNAL_ERROR_MESSAGE, Dispatcher
from majin.dispatch.exceptions import (
    EmptyCompletionError,
    InvalidRequestError,
    MissingCredentialError,
    ModelUnavailableError,
    UnsupportedProviderError,
)
from majin.providers import Provider
from majin.providers.exceptions import ProviderError


async def test_returns_adapter_text_unmodified(dispatcher, registry, stub_adapter, make_model):
    registry.insert(make_model())
    stub_adapter.replies["gpt-4o"] = "  hello\n"

    assert await dispatcher.generate("gpt-4o", "Say hello") == "  hello\n"
    assert stub_adapter.calls == [("gpt-4o", "Say hello")]


async def test_provider_tag_is_case_insensitive(dispatcher, registry, stub_adapter, make_model):
    registry.insert(make_model(provider="OpenAI"))

    assert await dispatcher.generate("gpt-4o", "echo") == "echo"


@pytest.mark.parametrize("model_name, prompt", [("", "p"), ("m", ""), ("", "")])
async def test_invalid_request(dispatcher, stub_adapter, model_name, prompt):
    with patch.object(dispatcher.registry, "find_active") as find_active:
        with pytest.raises(InvalidRequestError):
            await dispatcher.generate(model_name, prompt)

    find_active.assert_not_called()
    assert stub_adapter.calls == []


async def test_unknown_model(dispatcher, stub_adapter):
    with pytest.raises(ModelUnavailableError, match="'ghost' not found or not active"):
        await dispatcher.generate("ghost", "p")

    assert stub_adapter.calls == []


async def test_inactive_model(dispatcher, registry, stub_adapter, make_model):
    registry.insert(make_model(active=False))

    with pytest.raises(ModelUnavailableError):
        await dispatcher.generate("gpt-4o", "p")
    assert stub_adapter.calls == []


async def test_missing_api_key(dispatcher, registry, connection, stub_adapter, make_model):
    document = make_model().to_document()
    document["apiKey"] = ""
    connection.collection("models").insert_one(document)

    with pytest.raises(MissingCredentialError):
        await dispatcher.generate("gpt-4o", "p")
    assert stub_adapter.calls == []


@pytest.mark.parametrize("tag", ["mistral", "Anthropic"])
async def test_unsupported_provider(dispatcher, registry, stub_adapter, make_model, tag):
    # The dispatcher only has an OpenAI adapter installed
    registry.insert(make_model(provider=tag))

    with pytest.raises(UnsupportedProviderError) as exc_info:
        await dispatcher.generate("gpt-4o", "p")

    assert exc_info.value.message == f"Provider '{tag}' not supported."
    assert stub_adapter.calls == []


@pytest.mark.parametrize("reply", [None, ""])
async def test_empty_completion(dispatcher, registry, stub_adapter, make_model, reply):
    registry.insert(make_model())
    stub_adapter.replies["gpt-4o"] = reply

    with pytest.raises(EmptyCompletionError):
        await dispatcher.generate("gpt-4o", "p")


async def test_provider_error_passes_through(dispatcher, registry, stub_adapter, make_model):
    registry.insert(make_model())
    stub_adapter.replies["gpt-4o"] = ProviderError("OpenAI API request failed (HTTP 429): quota")

    with pytest.raises(ProviderError, match="quota"):
        await dispatcher.generate("gpt-4o", "p")


async def test_unexpected_adapter_error_is_masked(dispatcher, registry, stub_adapter, make_model):
    registry.insert(make_model())
    stub_adapter.replies["gpt-4o"] = KeyError("sk-test-1234567890")

    with pytest.raises(ProviderError) as exc_info:
        await dispatcher.generate("gpt-4o", "p")

    assert exc_info.value.message == INTERNAL_ERROR_MESSAGE


async def test_dispatch_returns_results(dispatcher, registry, stub_adapter, make_model):
    registry.insert(make_model())

    ok = await dispatcher.dispatch("gpt-4o", "hi")
    failed = await dispatcher.dispatch("ghost", "hi")

    assert ok.ok and ok.text == "hi" and ok.model_name == "gpt-4o"
    assert not failed.ok
    assert failed.error_kind is ErrorKind.NOT_FOUND
    assert failed.message == "Model 'ghost' not found or not active"


def test_default_adapters_cover_every_provider(registry):
    assert set(Dispatcher(registry).adapters) == set(Provider)
