"""JSON logging formatter used by the client logging setup.

:class:`JsonFormatter` serializes the standard logging fields and merges
non-internal extra attributes from the ``LogRecord``. Messages that are
themselves JSON objects (as produced by ``log_event``) are hoisted to the top
level instead of being double encoded.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
import contextlib

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

_RECORD_INTERNALS = frozenset(
    {
        "msg",
        "args",
        "levelname",
        "levelno",
        "name",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }
)


class JsonFormatter(logging.Formatter):
    """Lightweight JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # pragma: no cover - trivial formatting
        base = {
            "ts": datetime.now(timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        msg_text = record.getMessage()
        base["msg"] = msg_text
        with contextlib.suppress(ValueError):
            parsed = json.loads(msg_text)
            if isinstance(parsed, dict):
                base.update(parsed)
        if record.exc_info:
            base["exc"] = self.formatException(record.exc_info)
        for k, v in record.__dict__.items():
            if k.startswith("_") or k in _RECORD_INTERNALS:
                continue
            if k not in base:
                base[k] = v
        return json.dumps(base, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO"]
