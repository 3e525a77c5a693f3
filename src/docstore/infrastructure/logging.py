"""Structured logging for the document store.

Log events are structlog key/value records. Executor calls bind the
operation and collection name into contextvars for their duration, so
every event emitted underneath (including adapter events) carries them.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Any, Generator

import structlog
from structlog.types import Processor

_RENDERERS = ("json", "console")


def setup_logging(level: str = "INFO", log_format: str = "json") -> None:
    """Configure structlog for the process.

    Args:
        level: Minimum level name, e.g. ``"DEBUG"``
        log_format: ``"json"`` for one JSON object per line, ``"console"``
            for coloured human readable output

    Raises:
        ValueError: If the level or format is unknown.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level!r}")
    if log_format not in _RENDERERS:
        raise ValueError(f"Unknown log format: {log_format!r}")

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, optionally bound to some context."""
    logger = structlog.get_logger(name)
    return logger.bind(**initial_context) if initial_context else logger


@contextmanager
def operation_context(operation: str, collection: str) -> Generator[None, None, None]:
    """Bind ``operation`` and ``collection`` to every log event in the block."""
    tokens = structlog.contextvars.bind_contextvars(operation=operation, collection=collection)
    try:
        yield
    finally:
        structlog.contextvars.reset_contextvars(**tokens)
