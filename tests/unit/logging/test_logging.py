"""
Unit tests for the logging package.
"""

import json
import logging

import pytest

from httpfacade.logging import (
    FacadeLogger,
    LoggingConfig,
    LoggingManager,
    StructuredFormatter,
    configure_logging,
    get_logger,
)


@pytest.mark.unit
class TestLoggingConfig:
    """Test LoggingConfig normalization."""

    def test_string_level(self):
        assert LoggingConfig(level="debug").level == logging.DEBUG

    def test_single_output_becomes_list(self):
        assert LoggingConfig(output="file").output == ["file"]


@pytest.mark.unit
class TestStructuredFormatter:
    """Test JSON formatting."""

    def test_includes_correlation_and_context(self):
        record = logging.LogRecord("httpfacade.test", logging.INFO, __file__, 1, "hello", None, None)
        record.correlation_id = "abc123"
        record.extra_context = {"uri": "http://x"}

        entry = json.loads(StructuredFormatter(version="1.0").format(record))

        assert entry["message"] == "hello"
        assert entry["service"] == "httpfacade"
        assert entry["version"] == "1.0"
        assert entry["correlation_id"] == "abc123"
        assert entry["uri"] == "http://x"


@pytest.mark.unit
class TestFacadeLogger:
    """Test the logger wrapper."""

    def test_context_passed_as_extra(self, caplog):
        logger = FacadeLogger("httpfacade.test", correlation_id="cid")
        logger.add_context(component="client")

        with caplog.at_level(logging.DEBUG, logger="httpfacade.test"):
            logger.debug("GET http://x", status_code=200)

        record = caplog.records[0]
        assert record.correlation_id == "cid"
        assert record.extra_context == {"component": "client", "status_code": 200}

    def test_with_context_copies(self):
        logger = FacadeLogger("httpfacade.test")
        child = logger.with_context(uri="http://x")

        assert child.correlation_id == logger.correlation_id
        assert child.extra_context == {"uri": "http://x"}
        assert logger.extra_context == {}

    def test_temp_context_restored(self):
        logger = FacadeLogger("httpfacade.test")

        with logger.temp_context(attempt=1):
            assert logger.extra_context == {"attempt": 1}

        assert logger.extra_context == {}

    def test_disabled_level_skips_record(self, caplog):
        logger = FacadeLogger("httpfacade.quiet")

        with caplog.at_level(logging.WARNING, logger="httpfacade.quiet"):
            logger.debug("not shown")

        assert caplog.records == []


@pytest.mark.unit
class TestLoggingManager:
    """Test global logging configuration."""

    def test_singleton(self):
        assert LoggingManager() is LoggingManager()

    def test_get_logger(self):
        assert isinstance(get_logger("httpfacade.x"), FacadeLogger)

    def test_json_file_output(self, temp_dir, reset_logging):
        log_file = temp_dir / "logs" / "facade.log"
        configure_logging(LoggingConfig(level="INFO", format_type="json", output="file", file_path=log_file))

        get_logger("httpfacade.test").info("written", uri="http://x")
        for handler in reset_logging.handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["message"] == "written"
        assert entry["uri"] == "http://x"

    def test_reconfigure_replaces_handlers(self, reset_logging):
        configure_logging(LoggingConfig(output=["console"]))
        configure_logging(LoggingConfig(output=["console"]))

        assert len(reset_logging.handlers) == 1
        assert reset_logging.package_logger.handlers.count(reset_logging.handlers[0]) == 1

    def test_root_logger_untouched(self, reset_logging):
        root_handlers = list(logging.getLogger().handlers)

        configure_logging(LoggingConfig(output=["console"]))

        assert logging.getLogger().handlers == root_handlers
