"""Logging configuration for brewbot."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from brewbot.utils.config import Config

FILE_FORMAT = "%(asctime)s - %(threadName)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"


def setup_logging(config: Config, console_output: bool = False) -> None:
    """
    Set up logging for brewbot.

    The file log records everything at DEBUG, including the thread that ran
    each dispatch. The console, when enabled, follows ``config.log_level``.
    Calling this again replaces the handlers installed by the previous call.

    Args:
        config: Application configuration
        console_output: Whether to output logs to console (default: False)
    """
    brewbot_logger = logging.getLogger("brewbot")
    brewbot_logger.setLevel(logging.DEBUG)
    for handler in list(brewbot_logger.handlers):
        brewbot_logger.removeHandler(handler)
        handler.close()

    config.logging_dir.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(config.log_file, maxBytes=100000, backupCount=3)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    file_handler.setLevel(logging.DEBUG)
    brewbot_logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        console_handler.setLevel(config.log_level)
        brewbot_logger.addHandler(console_handler)
