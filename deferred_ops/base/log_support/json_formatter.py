"""JSON line formatter for the ``deferred_ops`` loggers.

Events written by ``log_event`` are already JSON objects; their keys are
merged into the output line instead of being nested as an escaped string.
Any ``extra=`` attributes on the record are carried over as well.
"""
from __future__ import annotations

import contextlib
import json
import logging
from datetime import datetime, timezone

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

_RECORD_INTERNALS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object (timestamp, level, logger, payload)."""

    def format(self, record: logging.LogRecord) -> str:
        line = {
            "ts": datetime.now(timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        text = record.getMessage()
        payload = None
        with contextlib.suppress(ValueError):
            payload = json.loads(text)
        if isinstance(payload, dict):
            line.update(payload)
        else:
            line["msg"] = text
        for key, value in vars(record).items():
            if key.startswith("_") or key in _RECORD_INTERNALS:
                continue
            line.setdefault(key, value)
        if record.exc_info:
            line["exc"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO"]
