"""
Logging configuration module.
Installs loguru sinks described by a LoggingConfig.
"""

import sys
from typing import Optional

from loguru import logger

from typed_env.core.config import LoggingConfig
from typed_env.core.constants import DEFAULT_LOG_FORMAT, LOG_RETENTION, LOG_ROTATION


def setup_logging(
    config: Optional[LoggingConfig] = None,
    format: str = DEFAULT_LOG_FORMAT,
) -> None:
    """
    Replace loguru's sinks with the ones described by config.

    Tracebacks never include local variable values (diagnose=False);
    locals around a lookup may hold environment values.

    Args:
        config: Level and optional log file; LoggingConfig() when omitted
        format: Log message format
    """
    config = config or LoggingConfig()
    logger.remove()

    logger.add(sys.stderr, format=format, level=config.level, colorize=True, diagnose=False)

    if config.log_file:
        logger.add(
            config.log_file,
            format=format,
            level=config.level,
            rotation=LOG_ROTATION,
            retention=LOG_RETENTION,
            diagnose=False,
        )
    logger.debug(f"Logging configured at {config.level}")


def get_logger():
    """Return the shared loguru logger."""
    return logger
