"""Tests for the package logger helpers."""

import logging
from unittest.mock import patch

import pytest
from ham_autobind import get_logger, enable_console_logging, disable_console_logging
from ham_autobind.log import ROOT_LOGGER_NAME


def _handler_names(logger):
    return [h.get_name() for h in logger.handlers]


class TestLogger:
    """Test cases for get_logger / enable_console_logging."""

    def teardown_method(self):
        """Clean up console handler."""
        disable_console_logging()

    def test_root_logger(self):
        """Test the package logger and its null handler."""
        logger = get_logger()
        assert logger.name == ROOT_LOGGER_NAME
        assert f"{ROOT_LOGGER_NAME}-null" in _handler_names(logger)

    def test_module_logger_is_child(self):
        """Test that module loggers nest under the package logger."""
        assert get_logger("ham_autobind.descriptors").name == "ham_autobind.descriptors"
        assert get_logger("myapp").name == "ham_autobind.myapp"

    def test_null_handler_added_once(self):
        """Test that the null handler is not duplicated."""
        get_logger()
        get_logger()
        names = _handler_names(get_logger())
        assert names.count(f"{ROOT_LOGGER_NAME}-null") == 1

    def test_enable_console_is_idempotent(self):
        """Test that enabling twice keeps one console handler."""
        enable_console_logging()
        logger = enable_console_logging(level=logging.INFO)

        names = _handler_names(logger)
        assert names.count(f"{ROOT_LOGGER_NAME}-console") == 1
        assert logger.level == logging.INFO

    def test_custom_format(self):
        """Test console handler with custom format string."""
        logger = enable_console_logging(fmt="%(levelname)s: %(message)s")
        console = [h for h in logger.handlers if h.get_name() == f"{ROOT_LOGGER_NAME}-console"][0]
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
        assert console.format(record) == "INFO: hello"

    def test_disable_console(self):
        """Test removing the console handler."""
        enable_console_logging()
        disable_console_logging()
        assert f"{ROOT_LOGGER_NAME}-console" not in _handler_names(get_logger())
        assert get_logger().level == logging.NOTSET

    def test_console_handler_failure(self):
        """Test error handling for console handler creation failure."""
        with patch("logging.StreamHandler", side_effect=ValueError("no stream")):
            with pytest.raises(RuntimeError, match="Failed to create console handler"):
                enable_console_logging()

    def test_disable_restores_application_level(self):
        """Test that disabling restores the level set before enabling."""
        logger = get_logger()
        logger.setLevel(logging.WARNING)
        try:
            enable_console_logging()
            assert logger.level == logging.DEBUG
            disable_console_logging()
            assert logger.level == logging.WARNING
        finally:
            logger.setLevel(logging.NOTSET)

    def test_disable_keeps_level_without_console(self):
        """Test that disabling without a console handler leaves the level alone."""
        logger = get_logger()
        logger.setLevel(logging.ERROR)
        try:
            disable_console_logging()
            assert logger.level == logging.ERROR
        finally:
            logger.setLevel(logging.NOTSET)

    def test_disable_keeps_level_changed_after_enable(self):
        """Test that a level changed after enabling survives disabling."""
        logger = enable_console_logging()
        try:
            logger.setLevel(logging.CRITICAL)
            disable_console_logging()
            assert logger.level == logging.CRITICAL
        finally:
            logger.setLevel(logging.NOTSET)
