"""Unit tests for ModelRegistry against an in-memory MongoDB."""

from unittest.mock import patch

import pytest
from bson import ObjectId

from majin.registry.exceptions import (
    DuplicateModelError,
    ModelNotFoundError,
    RegistryValidationError,
)
from majin.registry.models import ContentType, ModelConfig
from majin.registry.store import ACTIVE_NAME_INDEX


class TestInsert:
    def test_insert_returns_string_id_and_stores_document(self, registry, connection, make_model):
        model_id = registry.insert(make_model())

        assert ObjectId.is_valid(model_id)
        stored = connection.collection("models").find_one({"_id": ObjectId(model_id)})
        assert stored["name"] == "gpt-4o"
        assert stored["provider"] == "openai"
        assert stored["apiKey"] == "sk-test-1234567890"
        assert stored["type"] == "text"
        assert stored["active"] is True

    def test_insert_from_mapping_accepts_stored_spellings(self, registry):
        model_id = registry.insert(
            {"name": "claude-3", "provider": "anthropic", "apiKey": "k", "type": "text"}
        )

        model = registry.get(model_id)
        assert model.name == "claude-3"
        assert model.api_key == "k"
        assert model.active is True

    def test_insert_missing_required_fields(self, registry):
        with pytest.raises(RegistryValidationError) as exc_info:
            registry.insert({"name": "x", "provider": "openai"})

        assert "apiKey" in exc_info.value.message
        assert "type" in exc_info.value.message

    def test_insert_rejects_unknown_fields(self, registry):
        with pytest.raises(RegistryValidationError, match="Unknown model fields: color"):
            registry.insert(
                {"name": "x", "provider": "openai", "apiKey": "k", "type": "text", "color": "red"}
            )

    def test_insert_rejects_invalid_content_type(self, registry):
        with pytest.raises(RegistryValidationError):
            registry.insert({"name": "x", "provider": "openai", "apiKey": "k", "type": "smell"})

    def test_insert_duplicate_active_name(self, registry, make_model):
        registry.insert(make_model())

        with pytest.raises(DuplicateModelError) as exc_info:
            registry.insert(make_model(api_key="other"))

        assert exc_info.value.name == "gpt-4o"

    def test_insert_inactive_duplicate_is_allowed(self, registry, make_model):
        registry.insert(make_model())
        registry.insert(make_model(active=False))

        assert len(registry.list_all()) == 2


class TestReadAndDelete:
    def test_list_all_includes_inactive(self, registry, make_model):
        registry.insert(make_model(name="a"))
        registry.insert(make_model(name="b", active=False))

        names = sorted(m.name for m in registry.list_all())
        assert names == ["a", "b"]

    def test_list_all_exposes_string_ids(self, registry, make_model):
        model_id = registry.insert(make_model())

        [model] = registry.list_all()
        assert model.id == model_id

    def test_find_active_ignores_inactive(self, registry, make_model):
        registry.insert(make_model(active=False))

        assert registry.find_active("gpt-4o") is None

    def test_find_active_returns_config(self, registry, make_model):
        registry.insert(make_model())

        model = registry.find_active("gpt-4o")
        assert isinstance(model, ModelConfig)
        assert model.provider == "openai"

    def test_find_active_is_exact_match(self, registry, make_model):
        registry.insert(make_model())

        assert registry.find_active("GPT-4O") is None
        assert registry.find_active("gpt-4") is None

    def test_find_active_prefers_oldest_legacy_duplicate(self, registry, connection, make_model):
        # Records written directly, bypassing the uniqueness check
        collection = connection.collection("models")
        first = make_model(description="first").to_document()
        second = make_model(description="second").to_document()
        collection.insert_one(first)
        collection.insert_one(second)

        assert registry.find_active("gpt-4o").description == "first"

    def test_delete_then_delete_again(self, registry, make_model):
        model_id = registry.insert(make_model())

        registry.delete(model_id)
        assert registry.list_all() == []

        with pytest.raises(ModelNotFoundError):
            registry.delete(model_id)

    def test_delete_malformed_id(self, registry):
        with pytest.raises(ModelNotFoundError, match="Model not found: not-an-id"):
            registry.delete("not-an-id")

    def test_get_missing(self, registry):
        with pytest.raises(ModelNotFoundError):
            registry.get(str(ObjectId()))


class TestUpdate:
    def test_update_partial_fields(self, registry, make_model):
        model_id = registry.insert(make_model())

        updated = registry.update(model_id, {"description": "new", "type": ContentType.IMAGE})

        assert updated.description == "new"
        assert updated.content_type is ContentType.IMAGE
        assert updated.api_key == "sk-test-1234567890"
        assert registry.get(model_id).description == "new"

    def test_deactivate_then_reactivate(self, registry, make_model):
        model_id = registry.insert(make_model())

        registry.update(model_id, {"active": False})
        assert registry.find_active("gpt-4o") is None

        registry.set_active(model_id, True)
        assert registry.find_active("gpt-4o").id == model_id

    def test_update_ignores_id_fields(self, registry, make_model):
        model_id = registry.insert(make_model())

        updated = registry.update(model_id, {"id": "x", "_id": "y", "description": "d"})

        assert updated.id == model_id

    def test_update_missing_model(self, registry):
        with pytest.raises(ModelNotFoundError):
            registry.update(str(ObjectId()), {"description": "d"})

    def test_update_rename_onto_active_name(self, registry, make_model):
        registry.insert(make_model(name="a"))
        other = registry.insert(make_model(name="b"))

        with pytest.raises(DuplicateModelError):
            registry.update(other, {"name": "a"})

    def test_activate_onto_active_name(self, registry, make_model):
        registry.insert(make_model())
        inactive = registry.insert(make_model(active=False))

        with pytest.raises(DuplicateModelError):
            registry.set_active(inactive, True)

    def test_update_same_record_keeps_name(self, registry, make_model):
        model_id = registry.insert(make_model())

        updated = registry.update(model_id, {"name": "gpt-4o", "provider": "OpenAI"})

        assert updated.provider == "OpenAI"

    def test_deactivate_keeps_other_fields(self, registry, make_model):
        model_id = registry.insert(make_model())
        before = registry.get(model_id)

        registry.update(model_id, {"active": False})

        [after] = registry.list_all()
        assert after.active is False
        assert after.model_dump(exclude={"active"}) == before.model_dump(exclude={"active"})


class TestActiveNameIndex:
    def test_first_write_creates_partial_unique_index(self, registry, connection, make_model):
        registry.insert(make_model())

        indexes = connection.collection("models").index_information()
        assert ACTIVE_NAME_INDEX in indexes
        assert indexes[ACTIVE_NAME_INDEX]["unique"] is True

    def test_concurrent_insert_rejected_by_index(self, registry, make_model):
        # Both writers pass the pre-check before either has inserted
        with patch.object(registry, "_ensure_unique_active_name"):
            registry.insert(make_model())
            with pytest.raises(DuplicateModelError) as exc_info:
                registry.insert(make_model(api_key="other"))

        assert exc_info.value.name == "gpt-4o"
        assert len(registry.list_all()) == 1

    def test_concurrent_activation_rejected_by_index(self, registry, make_model):
        registry.insert(make_model())
        inactive = registry.insert(make_model(active=False))

        with patch.object(registry, "_ensure_unique_active_name"):
            with pytest.raises(DuplicateModelError):
                registry.set_active(inactive, True)

        assert registry.get(inactive).active is False

    def test_inactive_duplicates_not_covered_by_index(self, registry, make_model):
        with patch.object(registry, "_ensure_unique_active_name"):
            registry.insert(make_model(active=False))
            registry.insert(make_model(active=False))
            registry.insert(make_model())

        assert len(registry.list_all()) == 3
