"""
Logging configuration for the stack trace parser.

Uses structlog on top of the standard library logging module so that
applications embedding the parser keep control of handlers and levels.
"""
import logging
import sys
from typing import Optional

import structlog

from .config import ParserSettings


def configure_logging(level: Optional[str] = None, format_json: Optional[bool] = None) -> None:
    """
    Configure structlog for the parser.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable

    Arguments left as None fall back to LOG_LEVEL and LOG_JSON.
    """
    settings = ParserSettings.from_env()
    if level is None:
        level = settings.log_level
    if format_json is None:
        format_json = settings.log_json

    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger, typically for `__name__`.

    Events always go through the stdlib logger of the same name, so nothing is
    printed until the host application (or configure_logging) sets up handlers.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
