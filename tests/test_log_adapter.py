"""Tests for the stdlib logging adapter."""

from __future__ import annotations

import logging
import logging.handlers

import pytest

from user_settings.domain.models.enums import LogLevel
from user_settings.infrastructure.log.log_adapter import StdLoggerAdapter, start_queue_logging


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture()
def std_logger(request: pytest.FixtureRequest) -> logging.Logger:
    logger = logging.getLogger(f"user_settings.tests.{request.node.name}")
    logger.propagate = False
    yield logger
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)


class TestStdLoggerAdapter:
    def test_warning_with_error(self, std_logger: logging.Logger) -> None:
        handler = _ListHandler()
        std_logger.addHandler(handler)
        error = OSError("disk full")

        StdLoggerAdapter(std_logger).log(
            LogLevel.WARNING, "Failed to access the %s user settings", "p_n.xml", exc=error
        )

        (record,) = handler.records
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "Failed to access the p_n.xml user settings: disk full"
        assert record.exc_info[1] is error

    def test_message_without_error(self, std_logger: logging.Logger) -> None:
        handler = _ListHandler()
        std_logger.addHandler(handler)
        std_logger.setLevel(logging.DEBUG)

        StdLoggerAdapter(std_logger).log(LogLevel.DEBUG, "Saved the %s user settings", "p_n.xml")

        (record,) = handler.records
        assert record.levelno == logging.DEBUG
        assert record.getMessage() == "Saved the p_n.xml user settings"
        assert record.exc_info is None

    def test_default_logger_name(self) -> None:
        assert StdLoggerAdapter().logger.name == "user_settings"

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            (LogLevel.DEBUG, logging.DEBUG),
            (LogLevel.INFO, logging.INFO),
            (LogLevel.WARNING, logging.WARNING),
            (LogLevel.ERROR, logging.ERROR),
        ],
    )
    def test_level_mapping(self, level: LogLevel, expected: int) -> None:
        assert level.stdlib_level == expected


class TestQueueLogging:
    def test_records_reach_original_handlers(self, std_logger: logging.Logger) -> None:
        handler = _ListHandler()
        std_logger.addHandler(handler)

        listener = start_queue_logging(std_logger)
        try:
            assert [type(h) for h in std_logger.handlers] == [logging.handlers.QueueHandler]
            StdLoggerAdapter(std_logger).log(LogLevel.WARNING, "queued %s", "entry")
        finally:
            listener.stop()

        assert [r.getMessage() for r in handler.records] == ["queued entry"]

    def test_level_threshold(self, std_logger: logging.Logger) -> None:
        handler = _ListHandler()
        std_logger.addHandler(handler)

        listener = start_queue_logging(std_logger, level=logging.WARNING)
        try:
            StdLoggerAdapter(std_logger).log(LogLevel.DEBUG, "hidden")
        finally:
            listener.stop()

        assert handler.records == []
