"""Tests for using StorageType as a pydantic field."""
import pytest
from pydantic import BaseModel, ValidationError

from datastore_manager.storage.types import StorageType


class StoreConfig(BaseModel):
    """Persisted configuration naming a storage type."""

    name: str
    storage_type: StorageType


class TestPydanticIntegration:
    """Test cases for validation and serialization."""

    def test_validate_from_raw_value(self) -> None:
        """Test that strings are accepted as raw values."""
        config = StoreConfig(name="prefs", storage_type="UserDefaults")
        assert config.storage_type == StorageType.USER_DEFAULTS

    def test_validate_from_instance(self) -> None:
        """Test that descriptors pass through unchanged."""
        config = StoreConfig(name="tokens", storage_type=StorageType.GENERIC_KEYCHAIN)
        assert config.storage_type is StorageType.GENERIC_KEYCHAIN

    def test_json_uses_raw_value(self) -> None:
        """Test that JSON output carries the raw value, not the category."""
        config = StoreConfig(name="docs", storage_type=StorageType.DOCUMENT_DIRECTORY)
        assert config.model_dump_json() == (
            '{"name":"docs","storage_type":"FileManager.documentDirectory"}'
        )
        assert config.model_dump(mode="json")["storage_type"] == "FileManager.documentDirectory"

    def test_python_dump_keeps_descriptor(self) -> None:
        """Test that python-mode dumps keep the descriptor object."""
        config = StoreConfig(name="cache", storage_type=StorageType.CACHE)
        assert config.model_dump()["storage_type"] == StorageType.CACHE

    def test_json_round_trip(self) -> None:
        """Test reloading persisted configuration."""
        original = StoreConfig(name="shared", storage_type=StorageType.SHARED_CLOUD_DATABASE)
        restored = StoreConfig.model_validate_json(original.model_dump_json())
        assert restored == original

    def test_unknown_raw_value_survives(self) -> None:
        """Test that identifiers from newer releases are kept."""
        config = StoreConfig.model_validate_json(
            '{"name":"future","storage_type":"SQLite.applicationSupportDirectory"}'
        )
        assert not config.storage_type.is_known
        assert config.model_dump_json() == (
            '{"name":"future","storage_type":"SQLite.applicationSupportDirectory"}'
        )

    def test_rejects_non_string(self) -> None:
        """Test that other types are rejected."""
        with pytest.raises(ValidationError):
            StoreConfig(name="bad", storage_type=42)

    def test_json_schema_is_string(self) -> None:
        """Test the generated JSON schema."""
        schema = StoreConfig.model_json_schema()
        assert schema["properties"]["storage_type"]["type"] == "string"
