"""Presentation models for storage types."""
from pydantic import BaseModel

from datastore_manager.storage.types import StorageType


class StorageTypeInfo(BaseModel):
    """Storage type as shown in a picker or settings screen."""

    raw_value: str
    category: str
    debug_category: str

    @classmethod
    def from_storage_type(cls, storage_type: StorageType) -> "StorageTypeInfo":
        """Build from a storage type, rendering both category labels."""
        return cls(
            raw_value=storage_type.raw_value,
            category=storage_type.description,
            debug_category=storage_type.debug_description,
        )


def describe_storage_types() -> list[StorageTypeInfo]:
    """Describe every known storage type, in ``all_cases`` order."""
    return [
        StorageTypeInfo.from_storage_type(storage_type)
        for storage_type in StorageType.all_cases()
    ]
