"""
Logging configuration module.
Provides standardized logging setup using loguru.
"""

import sys
from typing import Optional
from loguru import logger

from linkedin_groups.core.constants import LOG_FORMAT, LOG_LEVEL_DEFAULT


def setup_logging(
    level: str = LOG_LEVEL_DEFAULT,
    format: str = LOG_FORMAT,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure loguru logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Log message format
        log_file: Optional file path to write logs
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format=format,
        level=level.upper(),
        colorize=True,
    )

    if log_file:
        logger.add(
            log_file,
            format=format,
            level=level.upper(),
            rotation="10 MB",
            retention="7 days",
        )
