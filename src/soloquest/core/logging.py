"""Structured logging for SoloQuest.

Everything logs through structlog. Call :func:`configure_logging` once at
startup; with no arguments it reads the level and output format from
:class:`~soloquest.core.config.Settings` (console output in debug mode, JSON
lines otherwise).

Example:
    >>> from soloquest.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Character saved", character_id="abc", level=3)
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


_APP_NAME = "soloquest"


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Tag every entry with the application name."""
    event_dict.setdefault("app", _APP_NAME)
    return event_dict


def _resolve_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def configure_logging(
    *,
    level: str | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """Configure application-wide logging.

    Args:
        level: Logging level name. Defaults to ``Settings.log_level``.
        json_format: Emit JSON lines instead of console output. Defaults to
            True unless ``Settings.debug`` is set.
        log_file: Optional path that also receives standard library records.
    """
    if level is None or json_format is None:
        from soloquest.core.config import get_settings

        settings = get_settings()
        level = level or settings.log_level
        json_format = settings.is_production if json_format is None else json_format

    numeric_level = _resolve_level(level)
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
    ]
    if json_format:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(exception_formatter=structlog.dev.plain_traceback))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        level=numeric_level,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger, typically ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent log entries.

    Example:
        >>> bind_context(character_id="abc123")
        >>> logger.info("Level up committed")  # Will include character_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Bind context variables for the duration of a block only."""
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "log_context",
]
