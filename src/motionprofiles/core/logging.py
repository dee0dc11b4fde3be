"""
Structured logging for motionprofiles.

Builders log one event per profile (``global_search_profile_built`` and so
on) through structlog. Output goes to stderr and, when ``log_file`` is set,
to a file as well; both share one renderer chosen by ``LoggingSettings``.

Usage::

    from motionprofiles.core.config import LoggingSettings
    from motionprofiles.core.logging import configure_logging, get_logger

    configure_logging(LoggingSettings(level="DEBUG", json_output=True))
    logger = get_logger(__name__)
    logger.info("profiles_built", threads=8)
"""

import logging
import sys
from typing import Optional

import structlog

from motionprofiles.core.config import LoggingSettings

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _build_handlers(settings: LoggingSettings) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file))
    return handlers


def _build_formatter(settings: LoggingSettings) -> structlog.stdlib.ProcessorFormatter:
    renderer: structlog.types.Processor
    if settings.json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Route structlog events through stdlib handlers.

    Safe to call again; the previous handlers are closed and replaced.

    Args:
        settings: Level, renderer and log file; defaults to INFO console output
    """
    settings = settings or LoggingSettings()

    formatter = _build_formatter(settings)
    handlers = _build_handlers(settings)
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, settings.level),
        handlers=handlers,
        force=True,
    )

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named after the calling module."""
    return structlog.get_logger(name)
