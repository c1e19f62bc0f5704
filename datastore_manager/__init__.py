"""Data store manager - storage type descriptors for persistence facades."""
from datastore_manager.core.exceptions import (
    DataStoreError,
    StorageTypeError,
    StorageTypeNotFoundError,
)
from datastore_manager.storage.types import UNKNOWN_REPRESENTATION_MESSAGE, StorageType

__version__ = "0.1.0"

__all__ = [
    "DataStoreError",
    "StorageType",
    "StorageTypeError",
    "StorageTypeNotFoundError",
    "UNKNOWN_REPRESENTATION_MESSAGE",
]
