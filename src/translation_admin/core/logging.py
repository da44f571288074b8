"""structlog setup over the standard logging module.

Local runs get a coloured console renderer; every other environment emits
one JSON object per line. The request-id middleware binds ``request_id``
through structlog contextvars, so every event logged while serving a
request carries it.
"""

import logging
import sys
from typing import Any

import structlog

from translation_admin.core.config import Settings, settings

# Libraries whose INFO output drowns the application events
QUIET_LOGGERS = ("multipart", "httpx", "httpcore", "sqlalchemy.engine")


def _log_level(config: Settings) -> int:
    if config.LOG_LEVEL:
        return getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)
    return logging.DEBUG if config.DEBUG else logging.INFO


def setup_logging(config: Settings = settings) -> None:
    level = _log_level(config)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    json_logs = config.LOG_JSON if config.LOG_JSON is not None else config.ENVIRONMENT != "local"
    processors: list[Any]
    if json_logs:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
