"""
Library logging.

Events are structlog event dicts handed to the stdlib ``offset_page`` logger,
so they follow whatever the host application configured and stay silent when
nothing is configured. ``configure_logging`` is an opt-in handler for scripts
and tests that want output without setting up stdlib logging themselves.
"""

import logging
import sys
from typing import IO

import structlog

LIBRARY_LOGGER = "offset_page"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())

_handler: logging.Handler | None = None


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.wrap_logger(
        logging.getLogger(name or LIBRARY_LOGGER),
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(debug: bool | None = None, stream: IO[str] | None = None) -> logging.Handler:
    """
    Attach a rendering handler to the ``offset_page`` logger.

    DEBUG level when ``debug`` is true, INFO otherwise; ``debug=None`` reads
    ``Settings.debug``. ``Settings.log_format`` picks the renderer, defaulting
    to console output in debug mode and JSON lines otherwise. Calling it again
    replaces the previous handler.
    """
    global _handler

    from offset_page.core.config import get_settings

    settings = get_settings()
    if debug is None:
        debug = settings.debug
    log_format = settings.log_format or ("console" if debug else "json")
    renderer = structlog.dev.ConsoleRenderer() if log_format == "console" else structlog.processors.JSONRenderer()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    logger = logging.getLogger(LIBRARY_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    # Rendered here; the host's root handlers would print the raw event dict
    logger.propagate = False
    _handler = handler
    return handler


def reset_logging() -> None:
    """Undo ``configure_logging`` and hand records back to the host's logging setup."""
    global _handler

    logger = logging.getLogger(LIBRARY_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def bind_context(**values) -> None:
    structlog.contextvars.bind_contextvars(**values)
