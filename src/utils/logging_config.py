"""Logging configuration for the date utilities."""

import logging
import sys
from pathlib import Path

from config.settings_pydantic import settings

LOGGER_NAME = "workdate"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    log_level: str | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure the package logger.

    Calling it again only updates the level; handlers are attached once.

    Args:
        log_level: Logging level name. If None, uses settings.log_level.
        log_file: Optional path to log file. If None, uses settings.log_file
            and logs to console only when that is unset too.

    Returns:
        Configured logger instance.

    Raises:
        ValueError: If the level name is unknown.
    """
    level_name = (log_level or settings.log_level).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = log_file or settings.log_file
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
