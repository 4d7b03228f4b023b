"""Tests for observability/logger.py and the builder's log output."""
import io
import json
import logging
import sys

import pytest

from thumborurl import Thumbor
from thumborurl.builder import log as builder_log


class TestStructuredFormatter:
    def _get_record(
        self,
        msg,
        level=logging.INFO,
        exc_info=None,
        stack_info=None,
        extra_fields=None,
    ):
        record = logging.LogRecord(
            name="test",
            level=level,
            pathname="",
            lineno=0,
            msg=msg,
            args=(),
            exc_info=exc_info,
        )
        if extra_fields is not None:
            record.extra_fields = extra_fields
        if stack_info is not None:
            record.stack_info = stack_info
        return record

    def test_basic_format(self):
        from thumborurl.observability.logger import StructuredFormatter

        fmt = StructuredFormatter()
        record = self._get_record("hello world")
        result = json.loads(fmt.format(record))
        assert result["message"] == "hello world"
        assert result["level"] == "INFO"
        assert result["logger"] == "test"
        assert "ts" in result

    def test_extra_fields_merged(self):
        from thumborurl.observability.logger import StructuredFormatter

        fmt = StructuredFormatter()
        record = self._get_record("msg", extra_fields={"mode": "hmac", "meta": False})
        result = json.loads(fmt.format(record))
        assert result["mode"] == "hmac"
        assert result["meta"] is False

    def test_exception_info_included(self):
        from thumborurl.observability.logger import StructuredFormatter

        fmt = StructuredFormatter()
        try:
            raise ValueError("test error")
        except ValueError:
            exc_info = sys.exc_info()
        record = self._get_record("error msg", exc_info=exc_info)
        result = json.loads(fmt.format(record))
        assert "ValueError" in result["exception"]

    def test_stack_info_included(self):
        from thumborurl.observability.logger import StructuredFormatter

        fmt = StructuredFormatter()
        record = self._get_record("msg", stack_info="Stack Trace Here")
        result = json.loads(fmt.format(record))
        assert result["stack_info"] == "Stack Trace Here"


class TestGetLogger:
    def test_returns_logger_with_handler(self):
        from thumborurl.observability.logger import get_logger

        logger = get_logger("test.observability.unique1")
        assert isinstance(logger, logging.Logger)
        assert len(logger.handlers) > 0
        assert logger.propagate is False

    def test_string_level(self):
        from thumborurl.observability.logger import get_logger

        logger = get_logger("test.observability.unique2", level="WARNING")
        assert logger.level == logging.WARNING

    def test_idempotent_no_duplicate_handlers(self):
        from thumborurl.observability.logger import get_logger

        name = "test.observability.unique3"
        logger1 = get_logger(name)
        handler_count = len(logger1.handlers)
        logger2 = get_logger(name)
        assert logger2 is logger1
        assert len(logger2.handlers) == handler_count

    def test_custom_stream(self):
        from thumborurl.observability.logger import get_logger

        stream = io.StringIO()
        logger = get_logger("test.observability.stream_unique", stream=stream)
        logger.info("test message", extra={"extra_fields": {"key": "val"}})
        line = json.loads(stream.getvalue().strip())
        assert line["message"] == "test message"
        assert line["key"] == "val"


# ===========================================================================
# Builder logging
# ===========================================================================


class _Collector(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture()
def collected():
    handler = _Collector()
    builder_log.addHandler(handler)
    try:
        yield handler.records
    finally:
        builder_log.removeHandler(handler)


class TestBuilderLogging:
    def test_silent_by_default(self, collected):
        Thumbor(key="test").build_image("a.com/b.png").resize(10, 10).to_url()
        assert collected == []

    def test_debug_log_urls(self, collected):
        thumbor = Thumbor(key="test", debug_log_urls=True)
        url = thumbor.build_image("a.com/b.png").resize(10, 10).to_url()
        assert len(collected) == 1
        record = collected[0]
        assert record.levelno == logging.DEBUG
        assert record.getMessage() == "URL built"
        assert record.extra_fields == {
            "op": "to_url_safe",
            "mode": "hmac",
            "meta": False,
            "url": url,
        }

    def test_unsafe_meta_logged(self, collected):
        Thumbor(debug_log_urls=True).build_image("a.com/b.png").to_meta()
        assert collected[0].extra_fields["op"] == "to_meta_unsafe"
        assert collected[0].extra_fields["mode"] == "unsafe"
        assert collected[0].extra_fields["meta"] is True

    def test_key_never_logged(self, collected):
        thumbor = Thumbor(key="super-secret-key", debug_log_urls=True)
        image = thumbor.build_image("a.com/b.png").legacy()
        image.to_url()
        image.to_meta()
        for record in collected:
            assert "super-secret-key" not in json.dumps(record.extra_fields)

    def test_legacy_warns_once(self, collected):
        image = Thumbor(key="test").build_image("a.com/b.png")
        image.legacy().legacy()
        warnings = [r for r in collected if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].extra_fields["image"] == "a.com/b.png"

    def test_legacy_from_config_does_not_warn(self, collected):
        Thumbor(key="test", legacy=True).build_image("a.com/b.png").legacy()
        assert collected == []
