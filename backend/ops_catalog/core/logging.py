"""Centralized logging configuration using Loguru for the store.

This module configures Loguru and installs an intercept handler so code
that uses the standard library ``logging`` (SQLAlchemy, aiosqlite) is routed
through Loguru. The log level comes from ``settings.LOG_LEVEL``.
"""

import logging
import sys

from loguru import logger
from ops_catalog.config.config import settings

LOG_LEVEL = settings.LOG_LEVEL.upper()

# Remove any previously configured handlers to avoid duplicate logs
logger.remove()

logger.add(
    sys.stdout,
    level=LOG_LEVEL,
    format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name} | {message}",
    backtrace=True,
    diagnose=False,
)


class InterceptHandler(logging.Handler):
    """Handler to route stdlib logging records into Loguru.

    This preserves caller information so Loguru logs reflect the originating
    module/line rather than the interception point.
    """

    def emit(
        self, record: logging.LogRecord
    ) -> None:  # pragma: no cover - simple routing
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # NOTE: Walk frames to skip logging internals and find original caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


logging.basicConfig(handlers=[InterceptHandler()], level=LOG_LEVEL)

# NOTE: third-party loggers stay at WARNING or above; SQL statements only
# appear when the engine is built with echo=True.
ROUTED_LOGGER_LEVEL = max(logging.getLevelName(LOG_LEVEL), logging.WARNING)

ROUTED_LOGGERS = (
    "sqlalchemy.engine",
    # echo=True logs here and adds its own stdout handler if this one has none
    "sqlalchemy.engine.Engine",
    "sqlalchemy.pool",
    "aiosqlite",
    "asyncio",
)

for name in ROUTED_LOGGERS:
    logging.getLogger(name).handlers = [InterceptHandler()]
    logging.getLogger(name).setLevel(ROUTED_LOGGER_LEVEL)
    logging.getLogger(name).propagate = False

# Usage: from ops_catalog.core.logging import logger
