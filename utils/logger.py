"""
Shared logger utility for the analytics engine.
Provides a consistent logger configuration for demos and host applications.
"""

import logging
import os

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Returns a logger with the specified name, configured with a standard format.
    The level comes from ``ANALYTICS_LOG_LEVEL`` (INFO when unset or unknown).
    If no name is provided, returns the root logger.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt=DEFAULT_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    level_name = os.getenv("ANALYTICS_LOG_LEVEL", "INFO").upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    return logger
