"""Logging configuration for the update server."""

import logging
import sys

LOGGER_NAME = "jex_update"


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Configure and return the package logger.

    Args:
        level: Logging level name (e.g. "INFO") or numeric level

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    # Clear any existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)

    return logger

