"""Pytest configuration and fixtures."""
from collections.abc import Generator

import pytest
import structlog

from datastore_manager.core.config import Settings, settings
from datastore_manager.storage.types import StorageType


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        environment="development",
        debug=False,
    )


@pytest.fixture
def debug_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make assertion failures raise."""
    monkeypatch.setattr(settings, "debug", True)


@pytest.fixture
def release_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make assertion failures log and return."""
    monkeypatch.setattr(settings, "debug", False)


@pytest.fixture
def unknown_storage_type() -> StorageType:
    """A storage type from a hypothetical newer release."""
    return StorageType("SQLite.applicationSupportDirectory")


@pytest.fixture
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults after a test configures it."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
