"""
Logging setup for the Lead Intent Scoring Engine.

Modules log through ``logging.getLogger(__name__)``; ``setup_logging``
attaches a single console handler to the package logger.
"""

import logging
import sys
from typing import Optional

from .config.settings import LOG_LEVEL

PACKAGE_LOGGER = "lead_scoring"
HANDLER_NAME = "lead_scoring.console"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            defaults to the LOG_LEVEL environment setting

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO))

    # Calling twice must not duplicate output
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
