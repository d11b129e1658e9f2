"""
Unit tests for logging and exception utilities.
"""

import json
import logging

import pytest

from eca_advisor.utils.exceptions import (
    AdvisorError,
    ConfigurationError,
    ErrorCode,
    InvalidInputError,
)
from eca_advisor.utils.logging_config import (
    JSONFormatter,
    LoggingConfig,
    Timer,
    get_logger,
    set_correlation_id,
    setup_logging,
)


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_base_error_string(self):
        """Test formatted error string."""
        error = AdvisorError(
            "something broke",
            details={"step": "classify"},
            cause=OSError("disk"),
        )

        text = str(error)
        assert text.startswith("[UNKNOWN_ERROR] something broke")
        assert "step" in text
        assert "OSError: disk" in text

    def test_invalid_input(self):
        """Test invalid input error metadata."""
        error = InvalidInputError("file handle is required", argument="source")

        assert isinstance(error, AdvisorError)
        assert isinstance(error, ValueError)
        assert error.error_code == ErrorCode.INVALID_INPUT
        assert error.details == {"argument": "source"}

    def test_configuration_error_to_dict(self):
        """Test serialization of configuration errors."""
        error = ConfigurationError("bad section", config_key="logging", expected_type="mapping")

        data = error.to_dict()

        assert data["error_type"] == "ConfigurationError"
        assert data["error_code"] == ErrorCode.CONFIGURATION_ERROR.value
        assert data["details"] == {"config_key": "logging", "expected_type": "mapping"}
        assert data["cause"] is None


class TestLogging:
    """Tests for logging configuration."""

    def test_get_logger_namespace(self):
        """Test loggers live under the package namespace."""
        assert get_logger("eca_advisor.recommendation.engine").name == "eca_advisor.recommendation.engine"
        assert get_logger("cli").name == "eca_advisor.cli"

    def test_json_formatter_extras(self):
        """Test structured fields are included."""
        set_correlation_id("abc12345")
        record = logging.LogRecord(
            "eca_advisor.test", logging.INFO, __file__, 1, "classified %s", ("a.txt",), None
        )
        record.category = "text"
        record.duration_ms = 1.5

        data = json.loads(JSONFormatter().format(record))

        assert data["message"] == "classified a.txt"
        assert data["level"] == "INFO"
        assert data["correlation_id"] == "abc12345"
        assert data["category"] == "text"
        assert data["duration_ms"] == 1.5
        assert "file_path" not in data

    def test_setup_logging_file_output(self, tmp_path):
        """Test file handler writes JSON lines."""
        setup_logging(LoggingConfig(
            level="INFO", log_dir=tmp_path, console_output=False, file_output=True
        ))

        get_logger("test").info("hello file")
        for handler in logging.getLogger("eca_advisor").handlers:
            handler.flush()

        lines = (tmp_path / "eca_advisor.log").read_text().splitlines()
        assert json.loads(lines[-1])["message"] == "hello file"

    def test_setup_logging_level(self):
        """Test level is applied to the package logger."""
        setup_logging(LoggingConfig(level="debug", console_output=False))

        root_logger = logging.getLogger("eca_advisor")
        assert root_logger.level == logging.DEBUG
        assert root_logger.propagate is False

    def test_timer_logs_duration(self, caplog):
        """Test Timer records the operation and duration."""
        logger = get_logger("timing")

        with caplog.at_level(logging.INFO, logger="eca_advisor"):
            with Timer(logger, "recommend") as timer:
                pass

        assert timer.duration_ms is not None
        record = caplog.records[-1]
        assert record.operation == "recommend"
        assert record.duration_ms == pytest.approx(timer.duration_ms)
