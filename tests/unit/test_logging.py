"""
Unit tests for logging module.
"""

import logging

from cloudscape_server.core.logging import (
    CloudscapeFormatter,
    StructuredLogger,
    get_logger,
    setup_logging,
)


def make_record(level=logging.INFO, msg="Test message") -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestCloudscapeFormatter:
    """Test custom formatter."""

    def test_format_basic_log(self):
        """Test basic log formatting."""
        result = CloudscapeFormatter().format(make_record())
        assert "ℹ️" in result
        assert "Test message" in result

    def test_format_with_extra_data(self):
        """Test formatting with extra data."""
        record = make_record()
        record.extra_data = {"uri": "cloudscape://component/button", "count": 3}
        result = CloudscapeFormatter().format(record)
        assert "uri=cloudscape://component/button" in result
        assert "count=3" in result

    def test_format_error_level(self):
        """Test error emoji."""
        result = CloudscapeFormatter().format(make_record(logging.ERROR, "Boom"))
        assert "❌" in result


class TestStructuredLogger:
    """Test structured logger."""

    def test_logger_creation(self):
        """Test logger creation."""
        logger = StructuredLogger("test_logger")
        assert logger.logger.name == "test_logger"

    def test_extra_data_reaches_handlers(self, caplog):
        """Test keyword arguments are attached to the record."""
        logger = get_logger("cloudscape.test")
        with caplog.at_level(logging.INFO, logger="cloudscape.test"):
            logger.info("Reading resource", uri="cloudscape://pattern/empty-state")

        record = caplog.records[-1]
        assert record.getMessage() == "Reading resource"
        assert record.extra_data == {"uri": "cloudscape://pattern/empty-state"}

    def test_disabled_level_is_skipped(self, caplog):
        """Test messages below the level are not emitted."""
        logger = get_logger("cloudscape.quiet")
        with caplog.at_level(logging.WARNING, logger="cloudscape.quiet"):
            logger.debug("hidden", detail="x")
        assert not [r for r in caplog.records if r.name == "cloudscape.quiet"]


class TestSetupLogging:
    """Test logging setup."""

    def setup_method(self):
        """Remember the root logger state."""
        root_logger = logging.getLogger()
        self.saved_handlers = root_logger.handlers[:]
        self.saved_level = root_logger.level

    def teardown_method(self):
        """Restore the root logger state."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            if handler not in self.saved_handlers:
                handler.close()
            root_logger.removeHandler(handler)
        for handler in self.saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(self.saved_level)

    def test_setup_logging_default(self):
        """Test default logging setup."""
        setup_logging()
        root_logger = logging.getLogger()
        assert root_logger.level == logging.INFO
        assert any(
            isinstance(h.formatter, CloudscapeFormatter) for h in root_logger.handlers
        )

    def test_setup_logging_with_file(self, tmp_path):
        """Test logging setup with file output."""
        log_file = tmp_path / "logs" / "server.log"
        setup_logging(level="DEBUG", log_file=log_file)

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert log_file.parent.exists()
        assert any(isinstance(h, logging.FileHandler) for h in root_logger.handlers)
