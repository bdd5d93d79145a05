"""Fixtures for API route tests."""

import pytest
from fastapi.testclient import TestClient

from majin.api.app import create_app


@pytest.fixture
def client(app_context):
    with TestClient(create_app(app_context)) as test_client:
        yield test_client


@pytest.fixture
def stub_adapter(app_context):
    return app_context["stub_adapter"]


@pytest.fixture
def add_model(client):
    """Add a model through the API and return its id."""

    def _add(**overrides):
        payload = {
            "name": "gpt-4o",
            "provider": "openai",
            "apiKey": "sk-test-1234567890",
            "type": "text",
            "description": "test",
        }
        payload.update(overrides)
        response = client.post("/api/models", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _add
