"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from brewbot.utils.config import Config
from brewbot.utils.logging import setup_logging


@pytest.fixture
def brewbot_logger():
    logger = logging.getLogger("brewbot")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_file_handler_only_by_default(test_config, brewbot_logger):
    """setup_logging() should only log to file unless asked for console output."""
    setup_logging(test_config)

    handlers = brewbot_logger.handlers
    assert [type(h) for h in handlers] == [RotatingFileHandler]
    assert handlers[0].baseFilename == str(test_config.log_file)
    assert test_config.logging_dir.is_dir()


def test_console_output_uses_configured_level(tmp_path, admin_config, brewbot_logger):
    """The console handler should follow the configured log level."""
    config = Config(workspace=tmp_path, admin=admin_config, log_level="warning")

    setup_logging(config, console_output=True)

    console = [h for h in brewbot_logger.handlers if type(h) is logging.StreamHandler]
    assert len(console) == 1
    assert console[0].level == logging.WARNING


def test_repeated_setup_replaces_handlers(test_config, brewbot_logger):
    """Calling setup_logging() twice should not duplicate handlers."""
    setup_logging(test_config, console_output=True)
    setup_logging(test_config, console_output=True)

    assert len(brewbot_logger.handlers) == 2


def test_writes_to_log_file(test_config, brewbot_logger):
    """Records from brewbot modules should land in the log file."""
    setup_logging(test_config)

    logging.getLogger("brewbot.core.test").info("brewing")
    for handler in brewbot_logger.handlers:
        handler.flush()

    contents = test_config.log_file.read_text()
    assert "brewing" in contents
    assert "MainThread" in contents
