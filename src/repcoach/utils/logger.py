"""Logging configuration."""

import logging
import sys

from ..config import get_settings


def setup_logger(name: str = __name__) -> logging.Logger:
    """Set up a logger with the configured level and a stdout handler."""
    level = getattr(logging, get_settings().log_level.upper(), logging.INFO)
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
