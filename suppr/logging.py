"""Logging configuration for the suppr package."""
import logging
import sys
from typing import Union

from suppr.config import Config


def setup_logger(name: str, level: Union[int, str, None] = None) -> logging.Logger:
    """
    Set up a logger with the specified name and log level.

    The handler writes to stderr; stdout is reserved for the report.

    Args:
        name: The name of the logger
        level: The logging level (default: Config.LOG_LEVEL)

    Returns:
        Configured logger instance
    """
    if level is None:
        level = Config.LOG_LEVEL
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Don't add handlers if they're already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(Config.LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(handler)
    else:
        for handler in logger.handlers:
            handler.setLevel(level)

    return logger
