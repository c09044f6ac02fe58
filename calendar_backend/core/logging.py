"""
Logging setup for the calendar backend.

Every module logs through a named logger under the "calendar_backend"
namespace (e.g. "calendar_backend.services.calendar"). This module attaches
a single console handler to that namespace so the whole app shares one format.
"""

import logging
import sys

ROOT_LOGGER_NAME = "calendar_backend"

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the application logger.

    Safe to call more than once: the handler is only attached the first time,
    later calls just update the level.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)

    Returns:
        The configured root application logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
