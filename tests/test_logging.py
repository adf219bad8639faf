import json
import logging

from ledger.core.logging import JsonFormatter, configure_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("ledger.test", logging.WARNING, __file__, 1, "Transfer rejected: %s", ("Insufficient funds",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    payload = json.loads(JsonFormatter().format(_record(sender="abcde...12345", error="InsufficientFunds")))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "ledger.test"
    assert payload["message"] == "Transfer rejected: Insufficient funds"
    assert payload["sender"] == "abcde...12345"
    assert payload["error"] == "InsufficientFunds"
    assert "args" not in payload and "msg" not in payload


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging(level="debug", json_logs=True)

        assert root.level == logging.DEBUG
        assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
