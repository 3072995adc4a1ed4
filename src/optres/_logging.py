"""Structured logging for optres.

Library loggers are structlog BoundLoggers wrapping the stdlib logger of
the emitting module, so events follow whatever stdlib level and handlers
the host application installs and stay silent otherwise.

configure_logging() gives the "optres" logger its own handler with
structlog's ProcessorFormatter; the root logger is never modified.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

__all__ = [
    'LIBRARY_LOGGER',
    'configure_logging',
    'get_logger',
]

LIBRARY_LOGGER = 'optres'

_HANDLER_NAME = 'optres.structlog'


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
    ]


def _get_structlog_processors() -> list[Any]:
    """Get the full processor chain for structlog loggers."""
    return [
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    """Get the appropriate renderer based on output format."""
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Route optres events to a stream with structlog's ProcessorFormatter.

    Only the ``optres`` logger is touched: its previous optres handler is
    replaced, it stops propagating to the root, and the host's root
    handlers and level are left as they are. structlog's global
    configuration is only installed if the host has not configured it.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.
        stream: Destination stream. Defaults to stderr.

    Returns:
        The installed handler.
    """
    if not structlog.is_configured():
        structlog.configure(
            processors=_get_structlog_processors(),
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=False,
        )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(formatter)
    handler.set_name(_HANDLER_NAME)

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for existing in library_logger.handlers[:]:
        if existing.get_name() == _HANDLER_NAME:
            library_logger.removeHandler(existing)
    library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    library_logger.propagate = False
    return handler


def get_logger(name: str) -> Any:
    """Get a structlog logger bound to the stdlib logger ``name``.

    Args:
        name: Logger name, usually the caller's ``__name__``.

    Returns:
        A structlog BoundLogger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
