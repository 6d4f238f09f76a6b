"""Logging setup for the CLI."""

import logging
from typing import Union

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Send log records to stderr, replacing any handlers already installed."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(fmt=DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    stream_handler.setLevel(level)
    root_logger.addHandler(stream_handler)

    logger = logging.getLogger("riokeys")
    logger.setLevel(level)
    return logger
