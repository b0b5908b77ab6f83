"""Structured logging for creatorledger."""

import logging
import os
import sys
from typing import Optional, Union

import structlog

LOG_LEVEL_ENV_VAR = "CREATORLEDGER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
PACKAGE_LOGGER = "creatorledger"


def resolve_log_level(level: Union[int, str, None] = None) -> int:
    """Resolve a level name or number, falling back to the environment."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def configure_logging(level: Union[int, str, None] = None) -> None:
    """Configure structlog to render key/value lines on stderr.

    Args:
        level: Level name or number. If None, reads CREATORLEDGER_LOG_LEVEL,
            then defaults to WARNING.

    Raises:
        ValueError: If the level name is unknown
    """
    resolved = resolve_log_level(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(resolved)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(
                key_order=["timestamp", "level", "logger", "event"]
            ),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None):
    """Get a logger bound to a module name."""
    return structlog.get_logger(name)
