"""Structured Logging — JSON lines for task operations and request errors.

Invariants:
    - Each line carries the record's own creation time (UTC), level, logger, message
    - Task context (task_id, operation, error_code) and request context
      (method, path) are added only when the record carries them
    - setup_logging owns exactly one root handler: repeated calls (one per app
      lifespan) replace it instead of stacking duplicates
"""

import logging
import json
from datetime import datetime, timezone

HANDLER_NAME = "task_manager"

TASK_FIELDS = ("task_id", "operation", "error_code")
REQUEST_FIELDS = ("method", "path")


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def __init__(self, fields: tuple[str, ...] = TASK_FIELDS + REQUEST_FIELDS):
        super().__init__()
        self._fields = fields

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (name, getattr(record, name))
            for name in self._fields
            if getattr(record, name, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the application's root handler."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
        existing.close()

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
