"""Utility functions"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def singleton(cls):
    """Class decorator returning the first instance on every call."""
    instance = None

    def get_instance(*args, **kwargs):
        nonlocal instance
        if instance is None:
            instance = cls(*args, **kwargs)
        return instance

    return get_instance


def configure_logger(level: str = "WARNING", log_file: Optional[Union[str, Path]] = None):
    """Configure the logger for the application."""
    logger.remove()

    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)

    if log_file is not None:
        logger.add(
            str(log_file),
            rotation="10 MB",
            level=level.upper(),
            format=LOG_FORMAT,
        )

    return logger
