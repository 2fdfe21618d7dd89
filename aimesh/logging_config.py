"""
Logging Configuration
Sets up the package logger for aimesh.
"""
import logging
import sys
from typing import Optional

from .config import DEFAULT_LOG_LEVEL


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'aimesh' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG). Defaults to AIMESH_LOG_LEVEL.
        log_file: Optional path to save logs to a file.
    """
    level = DEFAULT_LOG_LEVEL if level is None else level

    logger = logging.getLogger("aimesh")
    logger.setLevel(level)

    # avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
