"""Structured Logging: JSON formatter fields and setup idempotence."""

import json
import logging

from b2b_gate.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "b2b_gate.test", logging.INFO, __file__, 1, "decided %s", ("x",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "b2b_gate.test"
    assert payload["message"] == "decided x"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(product_id=11, decision="active", unrelated="skip"),
    ))
    assert payload["product_id"] == 11
    assert payload["decision"] == "active"
    assert "unrelated" not in payload


def test_setup_logging_replaces_previous_handler():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        assert len(logging.root.handlers) <= len(handlers) + 1
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.handlers[:] = handlers
        logging.root.setLevel(level)
