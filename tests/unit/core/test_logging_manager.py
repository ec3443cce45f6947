"""
Tests for logging_manager module.

Covers the TextnoteLogger file layout, the NullLogger stand-in, and the
safe_logger helper used by pipeline functions.
"""
import logging
from unittest.mock import MagicMock

import pytest

from textnote.core.exceptions import EmptyInputError
from textnote.core.logging_manager import (
    NullLogger,
    TextnoteLogger,
    format_cli_error,
    safe_logger,
)


def _flush(logger: TextnoteLogger) -> None:
    for handler in logger.main_logger.handlers + logger.error_logger.handlers:
        handler.flush()


class TestNullLogger:
    """Tests for NullLogger class."""

    def test_logging_methods_are_no_ops(self):
        """Every log method should accept its arguments and do nothing."""
        logger = NullLogger()
        logger.log_operation("archive_start", {"due": 2})
        logger.log_debug("debug message", {"key": "value"})
        logger.log_info("info message")
        logger.log_warning("warning message")
        logger.log_error(ValueError("boom"), {"file": "x.txt"})

    def test_log_cli_error_returns_formatted(self):
        """NullLogger.log_cli_error should still produce the terminal message."""
        result = NullLogger().log_cli_error(ValueError("test error"))
        assert result == "Error: ValueError: test error"


class TestSafeLogger:
    """Tests for safe_logger function."""

    def test_returns_logger_when_provided(self):
        mock_logger = MagicMock(spec=TextnoteLogger)
        assert safe_logger(mock_logger) is mock_logger

    def test_returns_null_logger_when_none(self):
        assert isinstance(safe_logger(None), NullLogger)

    def test_null_logger_is_singleton(self):
        assert safe_logger(None) is safe_logger(None)

    def test_calls_reach_real_logger(self):
        mock_logger = MagicMock(spec=TextnoteLogger)
        safe_logger(mock_logger).log_info("hello", {"a": 1})
        mock_logger.log_info.assert_called_once_with("hello", {"a": 1})


class TestTextnoteLogger:
    """Tests for the file-backed logger."""

    def test_creates_log_directory(self, tmp_dir):
        log_dir = tmp_dir / "logs" / "nested"
        TextnoteLogger(log_dir, component_name="unit")
        assert log_dir.is_dir()

    def test_logger_names(self, tmp_dir):
        logger = TextnoteLogger(tmp_dir, component_name="unit")
        assert logger.main_logger.name == "textnote.unit"
        assert logger.error_logger.name == "textnote.unit.errors"
        assert logger.error_logger.propagate is False

    def test_writes_component_log(self, tmp_dir):
        logger = TextnoteLogger(tmp_dir, component_name="unit")
        logger.log_operation("archive_start", {"due": 3})
        logger.log_debug("parsed note")
        _flush(logger)

        content = (tmp_dir / "unit.log").read_text(encoding="utf-8")
        assert 'OPERATION - archive_start: {"due": 3}' in content
        assert "DEBUG - parsed note" in content

    def test_errors_go_to_errors_log(self, tmp_dir):
        logger = TextnoteLogger(tmp_dir, component_name="unit")
        logger.log_error(EmptyInputError("empty"), {"file": "2024-01-01.txt"})
        _flush(logger)

        errors = (tmp_dir / "errors.log").read_text(encoding="utf-8")
        assert "EmptyInputError: empty" in errors
        assert "file=2024-01-01.txt" in errors
        assert "EmptyInputError" not in (tmp_dir / "unit.log").read_text(encoding="utf-8")

    def test_recreating_does_not_duplicate_handlers(self, tmp_dir):
        first = TextnoteLogger(tmp_dir, component_name="unit")
        count = len(first.main_logger.handlers)
        second = TextnoteLogger(tmp_dir, component_name="unit")
        assert len(second.main_logger.handlers) == count

    def test_console_handler_warns_only(self, tmp_dir):
        logger = TextnoteLogger(tmp_dir, component_name="unit")
        consoles = [
            h for h in logger.main_logger.handlers
            if type(h) is logging.StreamHandler
        ]
        assert len(consoles) == 1
        assert consoles[0].level == logging.WARNING

    def test_log_cli_error_message(self, tmp_dir):
        logger = TextnoteLogger(tmp_dir, component_name="unit")
        message = logger.log_cli_error(EmptyInputError("cannot parse Document from empty input"))
        assert message == "Error: EmptyInputError: cannot parse Document from empty input"

    def test_log_cli_error_with_traceback(self, tmp_dir):
        logger = TextnoteLogger(tmp_dir, component_name="unit")
        try:
            raise KeyError("TODO")
        except KeyError as e:
            message = logger.log_cli_error(e, show_traceback=True)
        assert message.startswith("Error: KeyError:")
        assert "Traceback" in message


@pytest.mark.parametrize(
    "error, expected",
    [
        (ValueError("bad"), "Error: ValueError: bad"),
        (EmptyInputError("empty"), "Error: EmptyInputError: empty"),
    ],
)
def test_format_cli_error(error, expected):
    assert format_cli_error(error) == expected
