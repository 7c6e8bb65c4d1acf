"""Structured Logging — one JSON object per log line.

Invariants:
    - Each line has timestamp (from the record, UTC), level, logger and message
    - space_id, user_id, error_code and path are copied from `extra=` when set
    - setup_logging() is idempotent: calling it again swaps the app handler,
      it never stacks a second one

Design Decisions:
    - stdlib logging with a custom Formatter; routes and services only ever call
      logging.getLogger(__name__)
    - fmt="text" gives a plain single-line format for local development
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("space_id", "user_id", "error_code", "path")
_TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, getattr(record, key))
            for key in _EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class _AppHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed earlier."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the app handler on the root logger and set the root level."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _AppHandler)]:
        root.removeHandler(existing)

    handler = _AppHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
