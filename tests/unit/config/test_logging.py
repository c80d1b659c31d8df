"""JsonFormatter output and configure_logging idempotency."""

import json
import logging
import sys

import pytest

from app.config.logging import JsonFormatter, configure_logging
from app.core.context import correlation_id_ctx


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("test.logger", logging.INFO, __file__, 1, msg, None, None)


def test_json_formatter_fields():
    out = json.loads(JsonFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["message"] == "hello"
    assert out["logger"] == "test.logger"
    assert "timestamp" in out
    assert out["correlation_id"] is None


def test_json_formatter_includes_correlation_id():
    token = correlation_id_ctx.set("corr-42")
    try:
        out = json.loads(JsonFormatter().format(_record()))
    finally:
        correlation_id_ctx.reset(token)
    assert out["correlation_id"] == "corr-42"


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord("t", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
    out = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: boom" in out["exc_info"]


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def test_configure_logging_is_idempotent(clean_root_logger):
    configure_logging("DEBUG")
    configure_logging("WARNING")
    json_handlers = [h for h in clean_root_logger.handlers if isinstance(h.formatter, JsonFormatter)]
    assert len(json_handlers) == 1
    assert clean_root_logger.level == logging.WARNING
