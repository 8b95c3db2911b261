"""Shared logger for the equation package."""
import logging
import sys
from typing import Optional


LOGGER_NAME: str = "equation"
LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)
# Library default: stay silent unless the host application configures logging
logger.addHandler(logging.NullHandler())

_stream_handler: Optional[logging.Handler] = None


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """
    Attach a formatted stream handler to the package logger.

    Calling this more than once only updates the level, it never stacks handlers.

    :param int | str level: Logging level, as a number or a level name

    :return: The configured package logger
    :rtype: logging.Logger
    """
    global _stream_handler
    logger.setLevel(level)
    if _stream_handler is None or _stream_handler not in logger.handlers:
        _stream_handler = logging.StreamHandler(sys.stderr)
        _stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_stream_handler)
    return logger
