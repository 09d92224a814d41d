"""Structured logging for the content utilities, built on structlog.

Development runs get colored console output; production runs emit JSON lines
so the site's log collector can index record ids and skip reasons.

Usage:
    from site_content.core.logging import configure_logging, get_logger

    configure_logging()  # once, at process start
    logger = get_logger(__name__)
    record_logger(logger, "video", "abc").warning("video_record_skipped", reason="MISSING_FIELD")
"""

import logging
import sys
from os import getenv
from typing import Any, cast

import structlog
from structlog.types import Processor


def _is_development(development: bool | None) -> bool:
    if development is not None:
        return development
    return getenv("ENVIRONMENT", "development").lower() != "production"


def configure_logging(
    development: bool | None = None,
    log_level: str | None = None,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        development: Console rendering when True, JSON when False. Falls back
            to the ENVIRONMENT variable ("production" selects JSON).
        log_level: DEBUG, INFO, WARNING or ERROR. Falls back to LOG_LEVEL,
            then INFO.
    """
    development = _is_development(development)
    if log_level is None:
        log_level = getenv("LOG_LEVEL", "INFO")
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: Processor
    if development:
        renderer = structlog.dev.ConsoleRenderer(colors=True)
        processors = [*shared_processors, renderer]
    else:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
        processors = [*shared_processors, structlog.processors.format_exc_info, renderer]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )
    logging.getLogger().setLevel(numeric_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, usually named after the calling module."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


def record_logger(
    logger: structlog.stdlib.BoundLogger,
    kind: str,
    record_id: str | None = None,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """Bind the identity of one CMS record to ``logger``.

    Every line from the returned logger carries ``record_kind`` and
    ``record_id`` (None when the record had no readable id), so skipped
    records can be traced back to the CMS document.

    Example:
        record_logger(logger, "video", "abc", position=3).warning("video_record_skipped")
    """
    return logger.bind(record_kind=kind, record_id=record_id, **context)


def bind_contextvars(**kwargs: Any) -> None:
    """Attach key/value pairs to every subsequent log line in this context.

    Example:
        bind_contextvars(page="ben-ria-the-gioi", locale="vi")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_contextvars() -> None:
    """Drop all bound context, e.g. at the end of a page build."""
    structlog.contextvars.clear_contextvars()


def unbind_contextvars(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)
