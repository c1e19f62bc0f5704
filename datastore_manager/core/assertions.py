"""Development-time assertion hook."""
from datastore_manager.core.config import settings
from datastore_manager.core.logging import get_logger

logger = get_logger(__name__)


def assertion_failure(message: str) -> None:
    """Report a programmer error.

    The failure is always logged. In debug mode it also raises
    ``AssertionError``; otherwise it returns and the caller carries on
    with its fallback value.

    Args:
        message: Diagnostic message describing the violated contract

    Raises:
        AssertionError: If ``settings.debug`` is enabled
    """
    logger.error("Assertion failure", message=message)

    if settings.debug:
        raise AssertionError(message)
