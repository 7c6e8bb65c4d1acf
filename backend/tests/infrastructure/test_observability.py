"""Structured Logging — tests for the JSON formatter."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.test", logging.INFO, __file__, 1, msg, None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "app.test"
    assert payload["message"] == "hello"
    assert "timestamp" in payload


def test_json_formatter_surfaces_space_fields():
    payload = json.loads(JSONFormatter().format(
        _record(space_id="known-space", user_id="known-owner", error_code="SPACE_NOT_EMPTY"),
    ))
    assert payload["space_id"] == "known-space"
    assert payload["user_id"] == "known-owner"
    assert payload["error_code"] == "SPACE_NOT_EMPTY"


def test_json_formatter_skips_unknown_and_none_extras():
    payload = json.loads(JSONFormatter().format(_record(space_id=None, other="x")))
    assert "space_id" not in payload
    assert "other" not in payload


def test_json_formatter_includes_exception_text():
    try:
        raise ValueError("boom")
    except ValueError:
        import sys
        record = _record()
        record.exc_info = sys.exc_info()
    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in payload["exception"]


def test_setup_logging_replaces_its_own_handler():
    root = logging.getLogger()
    level = root.level
    try:
        first = setup_logging("DEBUG", "json")
        second = setup_logging("WARNING", "text")

        assert first not in root.handlers
        assert second in root.handlers
        assert root.level == logging.WARNING
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        root.removeHandler(second)
        root.setLevel(level)
