"""Structured logging setup using structlog."""
import logging
import sys
from typing import Any

import structlog

from datastore_manager.core.config import settings


def setup_logging() -> None:
    """Configure structlog and the stdlib root logger from settings.

    Console output is rendered for humans unless ``log_json`` is set,
    in which case one JSON object is emitted per line.
    """
    level = getattr(logging, settings.log_level)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    renderer: structlog.typing.Processor
    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Get a structured logger bound to the given name."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Bind key/value pairs to every log line in the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop all context bound with ``log_context``."""
    structlog.contextvars.clear_contextvars()
