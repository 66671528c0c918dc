"""Structured Logging — verifies JSON formatter output and extra fields."""

import json
import logging

from app.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.services.position_service", logging.INFO, __file__, 1,
        "Position delete affected 1 row(s)", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "app.services.position_service"
    assert log["message"] == "Position delete affected 1 row(s)"
    assert "timestamp" in log


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(position_id=5, affected_rows=1, unrelated="x"),
    ))
    assert log["position_id"] == 5
    assert log["affected_rows"] == 1
    assert "unrelated" not in log
