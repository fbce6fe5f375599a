"""
Structured logging for nonempty.

Configures structlog the same way for every process that embeds the library:
a shared processor chain, JSON rendering for log aggregation and a colored
console renderer for development.

The sequence operations themselves never log. Logging belongs to the ambient
layer: settings-driven configuration and the process-wide random source.

Architecture:
    ::

        configure_logging(level="INFO", json_format=None, service="nonempty")
            │
            ▼
        structlog processor chain:
          1. TimeStamper (iso)
          2. merge_contextvars
          3. add_log_level / add_logger_name
          4. add_service_metadata
          5. JSONRenderer (or ConsoleRenderer on a TTY)

Examples:
    >>> from nonempty.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=True)
    >>> logger = get_logger(__name__)
    >>> logger.debug("random_source_created", seeded=True)

Tags:
    logging, structlog, observability, json-logging, nonempty
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from nonempty.core.errors import InvalidConfigError
from nonempty.core.settings import LOG_LEVELS

if TYPE_CHECKING:
    from nonempty.core.settings import NonEmptySettings


# Store service name for metadata
_SERVICE_NAME = "nonempty"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def _resolve_level(level: str) -> int:
    name = level.strip().upper()
    if name not in LOG_LEVELS:
        raise InvalidConfigError("log_level", level)
    return getattr(logging, name)


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "nonempty",
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name to include in logs
        add_timestamp: Include ISO timestamp in logs

    Raises:
        InvalidConfigError: If ``level`` is not a standard level name.
    """
    global _SERVICE_NAME

    level_number = _resolve_level(level)
    _SERVICE_NAME = service

    if json_format is None:
        json_format = not sys.stdout.isatty()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
    ]

    if add_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level_number),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level_number,
    )


def configure_from_settings(settings: NonEmptySettings | None = None) -> None:
    """Apply :class:`NonEmptySettings` (or the cached ones) to logging."""
    if settings is None:
        from nonempty.core.settings import get_settings

        settings = get_settings()

    configure_logging(
        level=settings.log_level,
        json_format=settings.json_logs,
        service=settings.service_name,
    )
    get_logger(__name__).debug(
        "logging_configured",
        level=settings.log_level,
        json_logs=settings.json_logs,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger (usually ``get_logger(__name__)``)."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context to include in all subsequent logs."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific keys from logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound context."""
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Context manager for scoped logging context.

    Example:
        with LogContext(batch="orders"):
            logger.info("shuffle_started")
        # Context cleared here
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs

    def __enter__(self) -> LogContext:
        bind_context(**self._context)
        return self

    def __exit__(self, *args: Any) -> None:
        unbind_context(*self._context.keys())


__all__ = [
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
    "LogContext",
]
