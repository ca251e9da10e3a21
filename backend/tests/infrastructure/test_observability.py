"""Structured Logging — JSON formatter output and setup idempotence."""

import json
import logging

from people_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "people_api.test", logging.INFO, __file__, 1, "Person created", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "people_api.test"
    assert log["message"] == "Person created"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(_record(person_id=3, secret="x")))
    assert log["person_id"] == 3
    assert "secret" not in log


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG", "json")
    setup_logging("DEBUG", "text")
    ours = [h for h in logging.root.handlers if h.get_name() == "people_api"]
    assert len(ours) == 1
    assert logging.root.level == logging.DEBUG
