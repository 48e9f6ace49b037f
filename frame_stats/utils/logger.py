"""
Logging configuration for frame stats.

Console logging for hosts that embed the stat cache without their own
logging setup.
"""

import logging
import sys
from typing import Optional


def get_logger(name: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (defaults to 'frame_stats')
        level: Log level name; only applied when the handler is first attached

    Returns:
        Configured logger instance
    """
    logger_name = name or "frame_stats"
    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel((level or "INFO").upper())

    return logger
