import json
import logging

from core.logging import JsonFormatter, get_logger


def test_get_logger_idempotent() -> None:
    logger1 = get_logger("test.logger")
    handlers_before = list(logger1.handlers)
    logger2 = get_logger("test.logger")
    assert logger1 is logger2
    assert len(logger1.handlers) == len(handlers_before)


def test_json_formatter_extra_whitelist() -> None:
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom %s", ("a",), None)
    record.query_date = "2030-01-01"
    record.not_whitelisted = "nope"
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "boom a"
    assert payload["level"] == "ERROR"
    assert payload["query_date"] == "2030-01-01"
    assert "not_whitelisted" not in payload
    assert payload["ts"].endswith("Z")
