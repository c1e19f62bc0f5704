"""Domain exceptions for the data store manager."""
from typing import Any


class DataStoreError(Exception):
    """Base exception for all data store manager errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


# Storage type errors
class StorageTypeError(DataStoreError):
    """Error resolving a storage type."""

    pass


class StorageTypeNotFoundError(StorageTypeError, LookupError):
    """Raw value does not match any known storage type."""

    def __init__(self, raw_value: str) -> None:
        super().__init__(
            message=f"Unknown storage type: {raw_value!r}",
            details={"raw_value": raw_value},
        )
        self.raw_value = raw_value
