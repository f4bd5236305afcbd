"""Logging configuration helpers."""

from __future__ import annotations

import logging

import structlog

from .config import Settings, get_settings


_CONFIGURED = False


def configure_logging(settings: Settings | None = None, force: bool = False) -> None:
    """Configure structlog once.

    An application that already configured structlog keeps its setup unless
    ``force`` is given.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return
    if structlog.is_configured() and not force:
        _CONFIGURED = True
        return

    settings = settings or get_settings()
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.getLogger("linkscope").setLevel(settings.log_level)
    _CONFIGURED = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger backed by the stdlib logger ``name``.

    Nothing is configured here. Processors are bound lazily, so loggers created
    at import time pick up whatever ``configure_logging`` sets later, and until
    then stdlib levels keep library calls quiet.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or "linkscope"),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


__all__ = ["configure_logging", "get_logger"]
