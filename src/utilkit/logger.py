"""
Logging utilities.
"""

import logging
from typing import Optional

PACKAGE_LOGGER = 'utilkit'

# Library code leaves handler configuration to the application
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name or PACKAGE_LOGGER)


def set_log_level(level: str) -> None:
    """
    Set the logging level of the package logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if isinstance(numeric_level, int):
        logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)
