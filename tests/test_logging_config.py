"""Tests for logging setup."""

import logging

from rich.logging import RichHandler

from d3js_report.logging_config import get_logger, setup_logging


class TestSetupLogging:
    def test_levels(self):
        assert setup_logging().level == logging.WARNING
        assert setup_logging(verbose=True).level == logging.DEBUG
        assert setup_logging(quiet=True, verbose=True).level == logging.ERROR

    def test_rich_handler_on_package_logger_only(self):
        root_handlers = list(logging.getLogger().handlers)
        logger = setup_logging()
        assert logger.name == "d3js_report"
        assert [type(h) for h in logger.handlers] == [RichHandler]
        assert not logger.propagate
        assert logging.getLogger().handlers == root_handlers

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        setup_logging(log_file=str(tmp_path / "a.log"))
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "d3js.log"
        logger = setup_logging(log_file=str(log_file))
        get_logger("staging").warning("staged %s", "chord")
        for handler in logger.handlers:
            handler.flush()
        assert "d3js_report.staging - WARNING - staged chord" in log_file.read_text()


class TestGetLogger:
    def test_root(self):
        assert get_logger().name == "d3js_report"

    def test_namespacing(self):
        assert get_logger("plugin").name == "d3js_report.plugin"
        assert get_logger("d3js_report.exporters").name == "d3js_report.exporters"
