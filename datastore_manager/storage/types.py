"""Storage type descriptors.

``StorageType`` identifies which backend a data store operation targets.
It behaves like an enumeration but stays open: any string can be wrapped
in a ``StorageType`` so identifiers written by newer releases survive a
round trip, while ``from_raw_value`` only accepts the identifiers this
release knows about.

Example:
    storage_type = StorageType.from_raw_value("FileManager.documentDirectory")
    assert storage_type == StorageType.DOCUMENT_DIRECTORY
    assert str(storage_type) == "FileManager"

    # Identifiers from a newer release are still accepted
    future = StorageType("SQLite.applicationSupport")
    assert not future.is_known
"""
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from datastore_manager.core.exceptions import StorageTypeNotFoundError

UNKNOWN_REPRESENTATION_MESSAGE = (
    "Use a representation that was unknown when this code was compiled."
)


class StorageType:
    """Storage backend targeted by the data store manager.

    Two storage types are equal when their raw values are equal. The
    known constants are class attributes; ``all_cases`` lists them in a
    fixed order.
    """

    __slots__ = ("_raw_value",)

    USER_DEFAULTS: ClassVar["StorageType"]
    DOCUMENT_DIRECTORY: ClassVar["StorageType"]
    USER_DIRECTORY: ClassVar["StorageType"]
    LIBRARY_DIRECTORY: ClassVar["StorageType"]
    APPLICATION_DIRECTORY: ClassVar["StorageType"]
    CORE_SERVICE_DIRECTORY: ClassVar["StorageType"]
    TEMPORARY_DIRECTORY: ClassVar["StorageType"]
    CACHE: ClassVar["StorageType"]
    CORE_DATA: ClassVar["StorageType"]
    GENERIC_KEYCHAIN: ClassVar["StorageType"]
    INTERNET_KEYCHAIN: ClassVar["StorageType"]
    PRIVATE_CLOUD_DATABASE: ClassVar["StorageType"]
    PUBLIC_CLOUD_DATABASE: ClassVar["StorageType"]
    SHARED_CLOUD_DATABASE: ClassVar["StorageType"]
    UBIQUITOUS_CLOUD_STORE: ClassVar["StorageType"]

    def __init__(self, raw_value: str) -> None:
        """Wrap a raw value, known or not.

        Args:
            raw_value: Backing identifier, stored verbatim
        """
        object.__setattr__(self, "_raw_value", raw_value)

    @classmethod
    def from_raw_value(cls, raw_value: str) -> "StorageType":
        """Look up the known storage type with this raw value.

        Matching is exact and case-sensitive.

        Args:
            raw_value: Identifier to look up

        Returns:
            The matching constant

        Raises:
            StorageTypeNotFoundError: If no known storage type matches
        """
        for storage_type in cls.all_cases():
            if storage_type.raw_value == raw_value:
                return storage_type
        raise StorageTypeNotFoundError(raw_value)

    @classmethod
    def all_cases(cls) -> list["StorageType"]:
        """Get every known storage type, in declaration order."""
        return [
            cls.USER_DEFAULTS,
            cls.DOCUMENT_DIRECTORY,
            cls.USER_DIRECTORY,
            cls.LIBRARY_DIRECTORY,
            cls.APPLICATION_DIRECTORY,
            cls.CORE_SERVICE_DIRECTORY,
            cls.TEMPORARY_DIRECTORY,
            cls.CACHE,
            cls.CORE_DATA,
            cls.GENERIC_KEYCHAIN,
            cls.INTERNET_KEYCHAIN,
            cls.PRIVATE_CLOUD_DATABASE,
            cls.PUBLIC_CLOUD_DATABASE,
            cls.SHARED_CLOUD_DATABASE,
            cls.UBIQUITOUS_CLOUD_STORE,
        ]

    @classmethod
    def categories(cls) -> list[str]:
        """Get distinct category names in order of first appearance."""
        seen: list[str] = []
        for storage_type in cls.all_cases():
            if storage_type.description not in seen:
                seen.append(storage_type.description)
        return seen

    @classmethod
    def cases_in_category(cls, category: str) -> list["StorageType"]:
        """Get the known storage types rendered as ``category``."""
        return [
            storage_type
            for storage_type in cls.all_cases()
            if storage_type.description == category
        ]

    @property
    def raw_value(self) -> str:
        """The backing identifier; the only stable persisted form."""
        return self._raw_value

    @property
    def is_known(self) -> bool:
        """Whether this is one of the known constants."""
        return self._raw_value in _CATEGORIES

    @property
    def description(self) -> str:
        """Category name, e.g. ``FileManager`` for every search path."""
        category = _CATEGORIES.get(self._raw_value)
        if category is None:
            return _unknown_representation()
        return category

    @property
    def debug_description(self) -> str:
        """Category name for diagnostics."""
        category = _DEBUG_CATEGORIES.get(self._raw_value)
        if category is None:
            return _unknown_representation()
        return category

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._raw_value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StorageType):
            return NotImplemented
        return self._raw_value == other._raw_value

    def __hash__(self) -> int:
        return hash(self._raw_value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type["StorageType"], tuple[str]]:
        return (type(self), (self._raw_value,))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from a raw value string and serialize back to it."""
        from_raw_value = core_schema.no_info_after_validator_function(
            cls, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_raw_value,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_raw_value]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda storage_type: storage_type.raw_value,
                when_used="json",
            ),
        )


def _unknown_representation() -> str:
    """Flag rendering of a storage type this release does not know."""
    # Imported here: config depends on this module
    from datastore_manager.core.assertions import assertion_failure

    assertion_failure(UNKNOWN_REPRESENTATION_MESSAGE)
    return UNKNOWN_REPRESENTATION_MESSAGE


# UserDefaults
StorageType.USER_DEFAULTS = StorageType("UserDefaults")

# FileManager search paths
StorageType.DOCUMENT_DIRECTORY = StorageType("FileManager.documentDirectory")  # ~/Documents
StorageType.USER_DIRECTORY = StorageType("FileManager.userDirectory")  # /Users
StorageType.LIBRARY_DIRECTORY = StorageType("FileManager.libraryDirectory")  # /Library
StorageType.APPLICATION_DIRECTORY = StorageType("FileManager.applicationDirectory")  # /Applications
# /System/Library/CoreServices
StorageType.CORE_SERVICE_DIRECTORY = StorageType("FileManager.coreServiceDirectory")
StorageType.TEMPORARY_DIRECTORY = StorageType("FileManager.temporaryDirectory")  # /tmp

# In-memory cache and object graph
StorageType.CACHE = StorageType("NSCache")
StorageType.CORE_DATA = StorageType("CoreData")

# Keychain item classes
StorageType.GENERIC_KEYCHAIN = StorageType("SecItem.kSecClassGenericPassword")
StorageType.INTERNET_KEYCHAIN = StorageType("SecItem.kSecClassInternetPassword")

# CloudKit database scopes
StorageType.PRIVATE_CLOUD_DATABASE = StorageType("CKContainer.privateCloudDatabase")
StorageType.PUBLIC_CLOUD_DATABASE = StorageType("CKContainer.publicCloudDatabase")
StorageType.SHARED_CLOUD_DATABASE = StorageType("CKContainer.sharedCloudDatabase")

# iCloud key-value store
StorageType.UBIQUITOUS_CLOUD_STORE = StorageType("NSUbiquitousKeyValueStore")


# Raw value -> category, for str()
_CATEGORIES: dict[str, str] = {
    "UserDefaults": "UserDefaults",
    "FileManager.documentDirectory": "FileManager",
    "FileManager.userDirectory": "FileManager",
    "FileManager.libraryDirectory": "FileManager",
    "FileManager.applicationDirectory": "FileManager",
    "FileManager.coreServiceDirectory": "FileManager",
    "FileManager.temporaryDirectory": "FileManager",
    "NSCache": "NSCache",
    "CoreData": "CoreData",
    "SecItem.kSecClassGenericPassword": "SecItem",
    "SecItem.kSecClassInternetPassword": "SecItem",
    "CKContainer.privateCloudDatabase": "CKContainer",
    "CKContainer.publicCloudDatabase": "CKContainer",
    "CKContainer.sharedCloudDatabase": "CKContainer",
    "NSUbiquitousKeyValueStore": "NSUbiquitousKeyValueStore",
}

# Raw value -> category, for diagnostics. Same labels today.
_DEBUG_CATEGORIES: dict[str, str] = dict(_CATEGORIES)
