"""
Logging setup for halftone.

Everything logs through the dedicated "halftone" logger rather than the root
logger, so hosts embedding the simulation keep control of their own output.
"""

from __future__ import annotations
import logging
import os
from typing import Optional

from halftone.core.config import DEFAULT_LOG_FORMAT, LoggingConfig

LOGGER_NAME = "halftone"


def setup_logging(
    level: str | int = "INFO",
    fmt: str = DEFAULT_LOG_FORMAT,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the "halftone" logger.

    Logs go to the console and, if log_file is given, to that file as well.
    Calling this again replaces the previous handlers.

    Returns:
        The configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    formatter = logging.Formatter(fmt)

    if logger.hasHandlers():
        logger.handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at level {logging.getLevelName(logger.level)}")
    return logger


def setup_logging_from_config(config: LoggingConfig) -> logging.Logger:
    """setup_logging() driven by a LoggingConfig."""
    return setup_logging(config.level, config.format, config.log_file)
