"""
Logging Utility Module.

This module provides logging configuration for the application.
"""

import logging
import sys

from order_processing.core.config import get_settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance for the specified name.

    This function creates and returns a logger with the specified name,
    configured according to the application's logging settings.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if it hasn't been done yet
    if not logger.handlers:
        log_level = getattr(logging, get_settings().LOG_LEVEL, logging.INFO)
        logger.setLevel(log_level)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(console_handler)

        # Prevent propagation to root logger to avoid duplicate logs
        logger.propagate = False

    return logger
