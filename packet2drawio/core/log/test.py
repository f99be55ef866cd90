"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import LOG_FORMAT, get_logger, parse_level, setup_logging


@pytest.fixture
def fresh_root(monkeypatch):
    """Root logger without handlers, restored after the test."""
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(root, "handlers", [])
    yield root
    root.setLevel(level)


class TestLogging:
    """Test core logging API."""

    def test_get_logger(self) -> None:
        """Verify logger instance creation."""
        logger = get_logger("test")
        assert logger.name == "test"
        assert isinstance(logger, logging.Logger)

    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "packet2drawio"

    def test_parse_level(self) -> None:
        """Level names are case-insensitive."""
        assert parse_level("debug") == logging.DEBUG
        assert parse_level(" WARNING ") == logging.WARNING

    def test_parse_level_unknown_uses_default(self) -> None:
        """Unknown names fall back to the default."""
        assert parse_level("chatty") == logging.INFO
        assert parse_level("chatty", default=logging.ERROR) == logging.ERROR


class TestSetupLogging:
    """Tests for setup_logging on a fresh root logger."""

    def test_installs_stream_handler(self, fresh_root) -> None:
        """One handler on the given stream, with the standard format."""
        stream = StringIO()
        setup_logging(level=logging.WARNING, stream=stream)

        assert len(fresh_root.handlers) == 1
        handler = fresh_root.handlers[0]
        assert handler.stream is stream
        assert handler.formatter._fmt == LOG_FORMAT
        assert fresh_root.level == logging.WARNING

    def test_writes_formatted_messages(self, fresh_root) -> None:
        """Records reach the stream as name - level - message."""
        stream = StringIO()
        setup_logging(level=logging.INFO, stream=stream)
        get_logger("fmt").info("hello")

        assert "fmt - INFO - hello" in stream.getvalue()

    def test_level_name(self, fresh_root) -> None:
        """Level names, as read from the environment, are accepted."""
        assert setup_logging(level="error", stream=StringIO()) == logging.ERROR
        assert fresh_root.level == logging.ERROR

    def test_unknown_level_name_defaults_to_info(self, fresh_root) -> None:
        """Unrecognised names give INFO."""
        assert setup_logging(level="loud", stream=StringIO()) == logging.INFO

    def test_verbose_forces_debug(self, fresh_root) -> None:
        """verbose wins over the configured level."""
        stream = StringIO()
        assert setup_logging(level="ERROR", stream=stream, verbose=True) == (
            logging.DEBUG
        )
        get_logger("verbose").debug("detail")
        assert "verbose - DEBUG - detail" in stream.getvalue()
