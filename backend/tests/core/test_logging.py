"""Tests for the logging module.

This module tests the logging system including:
- Structured JSON logging
- Colored console formatting
- Handler configuration in setup_logging
"""

import json
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from hrflow.core.config import Settings
from hrflow.core.logging import (
    ColoredConsoleFormatter,
    JSONFormatter,
    get_logger,
    setup_logging,
)


def make_record(msg: str = "Test message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJSONFormatter:
    """Test JSON log formatting."""

    def test_json_formatter_creates_valid_json(self) -> None:
        """Test that JSON formatter creates valid JSON output."""
        formatter = JSONFormatter(service_name="TestAPI")

        log_entry = json.loads(formatter.format(make_record()))

        assert log_entry["level"] == "INFO"
        assert log_entry["logger"] == "test.logger"
        assert log_entry["message"] == "Test message"
        assert log_entry["service"] == "TestAPI"
        assert log_entry["timestamp"].endswith("Z")

    def test_json_formatter_includes_context(self) -> None:
        """Test that JSON formatter includes context."""
        formatter = JSONFormatter()
        record = make_record()
        record.context = {"workflow_id": "wf-1", "steps": 5}

        log_entry = json.loads(formatter.format(record))

        assert log_entry["context"] == {"workflow_id": "wf-1", "steps": 5}

    def test_json_formatter_adds_source_for_errors(self) -> None:
        """Test that ERROR records carry their source location."""
        formatter = JSONFormatter()

        log_entry = json.loads(formatter.format(make_record(level=logging.ERROR)))

        assert log_entry["source"]["line"] == 42
        assert log_entry["source"]["file"] == "test.py"

    def test_json_formatter_includes_exception(self) -> None:
        """Test that exception info is serialized."""
        formatter = JSONFormatter()
        try:
            raise ValueError("bad duration")
        except ValueError:
            record = logging.LogRecord(
                name="test.logger",
                level=logging.ERROR,
                pathname="test.py",
                lineno=1,
                msg="Failed",
                args=(),
                exc_info=sys.exc_info(),
            )

        log_entry = json.loads(formatter.format(record))

        assert log_entry["exception"]["type"] == "ValueError"
        assert log_entry["exception"]["message"] == "bad duration"


class TestColoredConsoleFormatter:
    """Test the development console formatter."""

    def test_appends_context(self) -> None:
        """Test that context is rendered after the message."""
        record = make_record()
        record.context = {"workflow_id": "wf-1"}

        output = ColoredConsoleFormatter().format(record)

        assert 'Test message | Context: {"workflow_id": "wf-1"}' in output

    def test_does_not_modify_original_record(self) -> None:
        """Test that other handlers see the untouched record."""
        record = make_record()
        record.context = {"workflow_id": "wf-1"}

        ColoredConsoleFormatter().format(record)

        assert record.levelname == "INFO"
        assert record.msg == "Test message"


@pytest.mark.usefixtures("restore_root_logger")
class TestSetupLogging:
    """Test logging setup function."""

    def test_setup_logging_creates_log_directory(self, tmp_path: Path) -> None:
        """Test that setup_logging creates log directory if it doesn't exist."""
        log_file = tmp_path / "logs" / "test.log"

        setup_logging(log_file=str(log_file), enable_console=False)

        assert log_file.parent.exists()

    def test_setup_logging_configures_log_level(self) -> None:
        """Test that setup_logging configures log level correctly."""
        logger = setup_logging(log_level="DEBUG", enable_console=False)

        assert logger.level == logging.DEBUG

    def test_no_file_handler_without_log_file(self) -> None:
        """Test that only a console handler is attached by default."""
        logger = setup_logging()

        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        assert len(logger.handlers) == 1

    @pytest.mark.parametrize(
        ("debug", "formatter_type"),
        [(True, ColoredConsoleFormatter), (False, JSONFormatter)],
    )
    def test_console_formatter_follows_debug_flag(self, debug, formatter_type) -> None:
        """Test that the debug argument picks the console layout."""
        logger = setup_logging(debug=debug)

        assert type(logger.handlers[0].formatter) is formatter_type

    def test_file_handler_writes_json(self, tmp_path: Path) -> None:
        """Test that the file handler writes JSON lines."""
        log_file = tmp_path / "logs" / "test.log"
        logger = setup_logging(log_file=str(log_file), enable_console=False)

        get_logger("hrflow.test").info("Simulation started", extra={"context": {"steps": 3}})
        for handler in logger.handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        entry = json.loads(lines[-1])
        assert entry["message"] == "Simulation started"
        assert entry["context"] == {"steps": 3}


class TestConfigIntegration:
    """Test logging configuration integration with settings."""

    def test_log_level_from_settings(self) -> None:
        """Test that log level can be configured via settings."""
        settings = Settings(LOG_LEVEL="DEBUG")
        assert settings.LOG_LEVEL == "DEBUG"

    def test_log_file_from_settings(self) -> None:
        """Test that log file can be configured via settings."""
        settings = Settings(LOG_FILE="/var/log/hrflow.log")
        assert settings.LOG_FILE == "/var/log/hrflow.log"

    def test_json_format_from_settings(self) -> None:
        """Test that JSON format can be configured via settings."""
        settings = Settings(LOG_JSON_FORMAT=False)
        assert settings.LOG_JSON_FORMAT is False
