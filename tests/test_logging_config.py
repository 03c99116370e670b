"""Tests for logging_config.py."""

import logging

from docweave.builder import logger as builder_logger
from docweave.comments.docfile import logger as docfile_logger
from docweave.logging_config import get_logger, setup_logging


class TestGetLogger:
    def test_root_logger(self):
        assert get_logger().name == "docweave"

    def test_prefixed(self):
        assert get_logger("builder").name == "docweave.builder"
        assert get_logger("docweave.config").name == "docweave.config"

    def test_module_loggers_under_docweave(self):
        assert builder_logger.name == "docweave.builder"
        assert docfile_logger.name == "docweave.comments.docfile"


class TestSetupLogging:
    def test_levels(self):
        assert setup_logging(verbose=True).level == logging.DEBUG
        assert setup_logging(quiet=True).level == logging.ERROR
        assert setup_logging().level == logging.WARNING

    def test_log_file_receives_records(self, tmp_path):
        log_file = tmp_path / "docweave.log"
        setup_logging(log_file=str(log_file))
        get_logger("builder").warning("Skipping member with unknown id prefix: Q:X")
        for handler in logging.getLogger().handlers:
            handler.flush()
        content = log_file.read_text()
        assert "docweave.builder - WARNING - Skipping member with unknown id prefix: Q:X" in content

    def test_debug_filtered_at_default_level(self, tmp_path):
        log_file = tmp_path / "docweave.log"
        setup_logging(log_file=str(log_file))
        get_logger("builder").debug("hidden")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hidden" not in log_file.read_text()
