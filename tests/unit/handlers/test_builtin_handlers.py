"""Tests for the built-in handler factories."""

import logging
import logging.handlers
import sys

import pytest
from rich.logging import RichHandler

from monolog_factory.exceptions import HandlerConstructionError
from monolog_factory.formatters import StructuredFormatter
from monolog_factory.handlers import get_handler_registry
from monolog_factory.handlers.builtin import (
    file_handler,
    null_handler,
    rich_handler,
    rotating_file_handler,
    stream_handler,
    syslog_handler,
    timed_rotating_file_handler,
    watched_file_handler,
)


@pytest.mark.unit
class TestStreamHandler:

    def test_defaults_to_stderr(self):
        handler = stream_handler()

        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
        assert handler.level == logging.NOTSET

    def test_stdout_and_level(self):
        handler = stream_handler(stream="stdout", level=logging.WARNING)

        assert handler.stream is sys.stdout
        assert handler.level == logging.WARNING

    def test_default_formatter_is_line_format(self):
        handler = stream_handler()

        assert "%(levelname)8s" in handler.formatter._fmt
        assert not isinstance(handler.formatter, StructuredFormatter)

    def test_unknown_stream(self):
        with pytest.raises(ValueError):
            stream_handler(stream="stdin")


@pytest.mark.unit
class TestFileHandlers:

    def test_file_handler_creates_directory(self, temp_dir):
        target = temp_dir / "logs" / "nested" / "app.log"

        handler = file_handler(filename=str(target), level=logging.INFO)
        try:
            assert target.parent.is_dir()
            assert handler.level == logging.INFO
            assert handler.baseFilename == str(target)
        finally:
            handler.close()

    def test_file_handler_writes(self, temp_dir):
        target = temp_dir / "app.log"
        handler = file_handler(filename=str(target))
        record = logging.LogRecord("app", logging.ERROR, __file__, 1, "disk full", (), None)

        handler.handle(record)
        handler.close()

        assert "disk full" in target.read_text(encoding="utf-8")

    def test_filename_required(self):
        with pytest.raises(ValueError):
            file_handler(filename="")

    def test_delay_does_not_open(self, temp_dir):
        target = temp_dir / "delayed.log"

        handler = file_handler(filename=str(target), delay=True)
        handler.close()

        assert not target.exists()

    def test_rotating_file_handler(self, temp_dir):
        handler = rotating_file_handler(
            filename=str(temp_dir / "rotating.log"), max_bytes=1024, backup_count=3
        )
        try:
            assert isinstance(handler, logging.handlers.RotatingFileHandler)
            assert handler.maxBytes == 1024
            assert handler.backupCount == 3
        finally:
            handler.close()

    def test_timed_rotating_file_handler(self, temp_dir):
        handler = timed_rotating_file_handler(
            filename=str(temp_dir / "timed.log"), when="midnight", backup_count=7, utc=True
        )
        try:
            assert isinstance(handler, logging.handlers.TimedRotatingFileHandler)
            assert handler.when == "MIDNIGHT"
            assert handler.backupCount == 7
            assert handler.utc is True
        finally:
            handler.close()

    def test_watched_file_handler(self, temp_dir):
        handler = watched_file_handler(filename=str(temp_dir / "watched.log"))
        try:
            assert isinstance(handler, logging.handlers.WatchedFileHandler)
        finally:
            handler.close()


@pytest.mark.unit
class TestOtherHandlers:

    def test_syslog_udp(self):
        handler = syslog_handler(host="127.0.0.1", port=5514, facility="local0", level=40)
        try:
            assert isinstance(handler, logging.handlers.SysLogHandler)
            assert handler.address == ("127.0.0.1", 5514)
            assert handler.facility == logging.handlers.SysLogHandler.LOG_LOCAL0
            assert handler.level == 40
        finally:
            handler.close()

    def test_syslog_unknown_facility(self):
        with pytest.raises(ValueError):
            syslog_handler(facility="nonsense")

    def test_syslog_facility_must_be_a_name(self):
        with pytest.raises(ValueError):
            syslog_handler(facility=1)

    def test_syslog_numeric_facility_through_registry(self):
        with pytest.raises(HandlerConstructionError) as exc_info:
            get_handler_registry().create("SysLogHandler", {"facility": 1})

        assert exc_info.value.class_name == "SysLogHandler"

    def test_null_handler(self):
        handler = null_handler(level=logging.CRITICAL)

        assert isinstance(handler, logging.NullHandler)
        assert handler.level == logging.CRITICAL

    def test_rich_handler(self):
        handler = rich_handler(level=logging.INFO, show_path=False)

        assert isinstance(handler, RichHandler)
        assert handler.level == logging.INFO
        assert handler.formatter._fmt == "%(message)s"
