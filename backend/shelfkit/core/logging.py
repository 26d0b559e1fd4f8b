"""
SHELFKIT - Logging Configuration
structlog rendering for the stdlib loggers of the shelfkit package

Applications call ``setup_logging()`` once at startup; helper modules keep
logging through ``logging.getLogger(__name__)``.
"""
from typing import Optional
import logging
import sys

import structlog

from shelfkit.core.config import settings


ROOT_LOGGER_NAME = "shelfkit"

SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def build_formatter(log_format: str) -> structlog.stdlib.ProcessorFormatter:
    """
    Build the handler formatter for a log format.

    Args:
        log_format: "json" for one JSON object per line, anything else for
            console output

    Returns:
        ProcessorFormatter rendering both stdlib and structlog records

    Log Output Example (json):
```
        {"event": "Read 2048 bytes from label.jpg", "level": "debug", "logger": "shelfkit.utils.images", "timestamp": "..."}
```
    """
    if log_format.lower() == "json":
        renderers = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=False)]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
    )


def setup_logging(
    level: Optional[str] = None,
    log_format: Optional[str] = None
) -> logging.Logger:
    """
    Configure the ``shelfkit`` logger.

    Replaces any handler installed by a previous call, so calling it
    twice never duplicates output. structlog loggers are routed through
    the same handler.

    Args:
        level: Logging level name (default from settings)
        log_format: "text" or "json" (default from settings)

    Returns:
        The configured ``shelfkit`` logger

    Example:
        >>> logger = setup_logging(level="DEBUG", log_format="json")
    """
    level = (level or settings.LOG_LEVEL).upper()
    log_format = log_format or settings.LOG_FORMAT

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(build_formatter(log_format))

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger
