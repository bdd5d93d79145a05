"""Fixtures for dispatcher and fan-out tests."""

import pytest

from majin.dispatch.dispatcher import Dispatcher
from majin.providers import Provider


@pytest.fixture
def stub_adapter(stub_adapter_cls):
    return stub_adapter_cls()


@pytest.fixture
def dispatcher(registry, stub_adapter):
    return Dispatcher(registry, adapters={Provider.OPENAI: stub_adapter})
