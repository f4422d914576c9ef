"""Tests for the JSON logger and configuration parsing."""

import json
import logging
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telegraph.logger import LOGGER_NAME, TelegraphLogger, _JsonFormatter


@pytest.fixture
def fresh_logger():
    TelegraphLogger.reset()
    yield
    TelegraphLogger.reset()


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="telegraph.client", level=logging.DEBUG, pathname=__file__, lineno=1,
        msg="Sending %s", args=("request",), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    def test_standard_fields(self) -> None:
        entry = json.loads(_JsonFormatter().format(_record()))
        assert entry["level"] == "DEBUG"
        assert entry["logger"] == "telegraph.client"
        assert entry["message"] == "Sending request"
        assert "timestamp" in entry

    def test_extra_fields_merged(self) -> None:
        entry = json.loads(_JsonFormatter().format(_record(api_endpoint="sendMessage", status_code=200)))
        assert entry["api_endpoint"] == "sendMessage"
        assert entry["status_code"] == 200

    def test_single_line(self) -> None:
        assert "\n" not in _JsonFormatter().format(_record(note="a\nb"))


class TestTelegraphLogger:
    def test_get_logger_returns_namespace(self) -> None:
        assert TelegraphLogger.get_logger().name == LOGGER_NAME
        assert TelegraphLogger.get_logger("client").name == "telegraph.client"

    def test_get_logger_adds_no_handlers(self, fresh_logger) -> None:
        child = TelegraphLogger.get_logger("files")
        assert child.handlers == []
        assert logging.getLogger(LOGGER_NAME).handlers == []

    def test_sdk_loggers_are_children(self) -> None:
        parent = logging.getLogger(LOGGER_NAME)
        assert TelegraphLogger.get_logger("client").parent is parent

    def test_configure_console_only_by_default(self, fresh_logger) -> None:
        logger = TelegraphLogger.configure()
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_configure_once(self, fresh_logger) -> None:
        TelegraphLogger.configure()
        logger = TelegraphLogger.configure(logging.DEBUG)
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_rotating_file(self, fresh_logger, tmp_path) -> None:
        logger = TelegraphLogger.configure(logging.DEBUG, str(tmp_path / "logs"))
        assert len(logger.handlers) == 2
        TelegraphLogger.get_logger("client").debug("hello", extra={"api_endpoint": "getMe"})
        for handler in logger.handlers:
            handler.flush()
        lines = (tmp_path / "logs" / "telegraph.log").read_text(encoding="utf-8").splitlines()
        entry = json.loads(lines[-1])
        assert entry["api_endpoint"] == "getMe"
        assert entry["logger"] == "telegraph.client"

    def test_reset_detaches_handlers(self, fresh_logger) -> None:
        TelegraphLogger.configure()
        TelegraphLogger.reset()
        logger = logging.getLogger(LOGGER_NAME)
        assert logger.handlers == []
        assert logger.level == logging.NOTSET


class TestConfigParsing:
    def test_timeout(self) -> None:
        from telegraph.config import DEFAULT_TIMEOUT, _parse_timeout

        assert _parse_timeout("25") == 25
        assert _parse_timeout(None) == DEFAULT_TIMEOUT
        assert _parse_timeout("soon") == DEFAULT_TIMEOUT
        assert _parse_timeout("-3") == DEFAULT_TIMEOUT

    def test_log_level(self) -> None:
        from telegraph.config import _parse_log_level

        assert _parse_log_level("debug") == logging.DEBUG
        assert _parse_log_level("WARNING") == logging.WARNING
        assert _parse_log_level("chatty") == logging.INFO
        assert _parse_log_level(None) == logging.INFO
