"""
Logging Utilities

The library only creates named loggers; scripts that want console
output call setup_logging() once at startup.
"""

import logging
import sys
from typing import Optional

from config.settings import STREAM_LOG_FORMAT, STREAM_LOG_LEVEL


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Send cfstream logs to stdout.

    Args:
        level: Log level name (default: STREAM_LOG_LEVEL from settings)

    Returns:
        The configured "cfstream" logger
    """
    logger = logging.getLogger("cfstream")
    logger.setLevel((level or STREAM_LOG_LEVEL).upper())

    # Avoid duplicate handlers when called twice
    if not any(getattr(h, "_cfstream_console", False) for h in logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(STREAM_LOG_FORMAT))
        console_handler._cfstream_console = True  # type: ignore[attr-defined]
        logger.addHandler(console_handler)

    return logger
