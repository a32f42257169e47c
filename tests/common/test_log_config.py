"""Tests for src/common/log_config.py"""

import logging
import sys

from src.common.log_config import setup_logging


class TestSetupLogging:
    def teardown_method(self):
        """Reset logger between tests."""
        logger = logging.getLogger("src")
        logger.handlers.clear()
        logger.setLevel(logging.WARNING)

    def test_default_level_is_info(self):
        logger = setup_logging()
        assert logger is logging.getLogger("src")
        assert logger.level == logging.INFO

    def test_verbose_sets_debug(self):
        assert setup_logging(verbose=True).level == logging.DEBUG

    def test_quiet_sets_warning(self):
        assert setup_logging(quiet=True).level == logging.WARNING

    def test_repeated_calls_keep_one_stderr_handler(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr

    def test_format_is_level_name_message(self):
        logger = setup_logging()
        record = logging.LogRecord("src.catalog", logging.WARNING, __file__, 1, "Parsed %d", (3,), None)
        assert logger.handlers[0].format(record) == "WARNING  src.catalog: Parsed 3"
