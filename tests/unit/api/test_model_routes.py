"""Tests for the model management routes."""


class TestModelRoutes:
    def test_add_and_list(self, client, add_model):
        model_id = add_model()

        response = client.get("/api/models")

        assert response.status_code == 200
        [model] = response.json()
        assert model["id"] == model_id
        assert model["name"] == "gpt-4o"
        assert model["apiKey"] == "sk-test-1234567890"
        assert model["type"] == "text"
        assert model["active"] is True

    def test_add_response(self, client):
        response = client.post(
            "/api/models",
            json={"name": "m", "provider": "grok", "apiKey": "k", "type": "text"},
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Model added successfully"

    def test_add_missing_fields(self, client):
        response = client.post("/api/models", json={"name": "m"})

        assert response.status_code == 400
        assert "Missing required fields" in response.json()["error"]

    def test_add_duplicate_active_name(self, client, add_model):
        add_model()

        response = client.post(
            "/api/models",
            json={"name": "gpt-4o", "provider": "openai", "apiKey": "k2", "type": "text"},
        )

        assert response.status_code == 409

    def test_update(self, client, add_model):
        model_id = add_model()

        response = client.put("/api/models", json={"id": model_id, "active": False})

        assert response.status_code == 200
        assert response.json()["model"]["active"] is False
        assert client.get("/api/models").json()[0]["active"] is False

    def test_update_missing_id(self, client):
        response = client.put("/api/models", json={"name": "x"})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing model ID"}

    def test_update_unknown_id(self, client):
        response = client.put(
            "/api/models", json={"id": "0123456789abcdef01234567", "name": "x"}
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Model not found"}

    def test_delete_twice(self, client, add_model):
        model_id = add_model()

        first = client.request("DELETE", "/api/models", json={"id": model_id})
        second = client.request("DELETE", "/api/models", json={"id": model_id})

        assert first.status_code == 200
        assert client.get("/api/models").json() == []
        assert second.status_code == 404

    def test_delete_missing_id(self, client):
        response = client.request("DELETE", "/api/models", json={})

        assert response.status_code == 400

    def test_deactivated_model_is_not_dispatched(self, client, add_model, stub_adapter):
        model_id = add_model()
        client.put("/api/models", json={"id": model_id, "active": False})

        response = client.post("/api/generate-text", json={"modelName": "gpt-4o", "prompt": "hi"})

        assert response.status_code == 404
        assert stub_adapter.calls == []
