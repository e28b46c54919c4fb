"""JSONFormatter / setup_logging — structured log output."""

import json
import logging
from datetime import datetime, timezone

from task_manager.infrastructure.observability import (
    HANDLER_NAME, JSONFormatter, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "task_manager.test", logging.INFO, __file__, 1, "Task %s", ("created",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "task_manager.test"
    assert payload["message"] == "Task created"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(task_id=7, operation="insert", unrelated="x"),
    ))
    assert payload["task_id"] == 7
    assert payload["operation"] == "insert"
    assert "unrelated" not in payload


def test_json_formatter_skips_none_extras():
    payload = json.loads(JSONFormatter().format(_record(task_id=None)))
    assert "task_id" not in payload


def test_setup_logging_installs_json_handler():
    before = list(logging.root.handlers)
    before_level = logging.root.level
    try:
        setup_logging("debug", "json")
        added = [h for h in logging.root.handlers if h not in before]
        assert len(added) == 1
        assert isinstance(added[0].formatter, JSONFormatter)
        assert logging.root.level == logging.DEBUG
    finally:
        for handler in logging.root.handlers[:]:
            if handler not in before:
                logging.root.removeHandler(handler)
        logging.root.setLevel(before_level)


def test_json_formatter_timestamp_is_record_creation_time_in_utc():
    record = _record()
    record.created = 1_700_000_000.25
    payload = json.loads(JSONFormatter().format(record))
    stamp = datetime.fromisoformat(payload["timestamp"])
    assert stamp == datetime.fromtimestamp(1_700_000_000.25, timezone.utc)
    assert stamp.utcoffset().total_seconds() == 0


def test_setup_logging_replaces_its_handler_on_repeat_calls():
    before = list(logging.root.handlers)
    before_level = logging.root.level
    try:
        first = setup_logging("info", "json")
        second = setup_logging("info", "text")
        ours = [h for h in logging.root.handlers if h.get_name() == HANDLER_NAME]
        assert ours == [second]
        assert first not in logging.root.handlers
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        for handler in logging.root.handlers[:]:
            if handler not in before:
                logging.root.removeHandler(handler)
        logging.root.setLevel(before_level)
