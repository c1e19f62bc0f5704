"""Storage module - storage type descriptors."""
from datastore_manager.storage.types import UNKNOWN_REPRESENTATION_MESSAGE, StorageType

__all__ = ["StorageType", "UNKNOWN_REPRESENTATION_MESSAGE"]
