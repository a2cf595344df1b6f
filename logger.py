"""Logging configuration for taskcat.

Log records go to a per-day file under the configured log directory and,
unless disabled, to the console.
"""

import logging
from datetime import date
from typing import Optional
from config import Config

LOGGER_NAME = "taskcat"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(message)s"


def _reset_handlers(logger: logging.Logger) -> None:
    # Close before removing so repeated setup does not leak open log files
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def setup_logging(
    config: Config, console: bool = True, day: Optional[date] = None
) -> logging.Logger:
    """Set up application logging.

    Args:
        config: Application configuration with log level, directory and prefix.
        console: Also log to stderr.
        day: Day used in the log file name. Defaults to today.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)
    _reset_handlers(logger)

    file_handler = logging.FileHandler(config.log_file_for(day or date.today()))
    file_handler.setFormatter(
        logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger."""
    return logging.getLogger(LOGGER_NAME)
