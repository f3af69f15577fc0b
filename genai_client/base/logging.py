"""Structured logging utilities for the client.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid ad-hoc logger setup across the client core, endpoints and streams.

All loggers live under the shared ``genai`` logger. Child loggers
(``genai.client``, ``genai.stream``) carry no handlers of their own and
propagate to it. The level is read from ``GENAI_LOG_LEVEL``.

``normalized_log_event`` wraps ``log_event`` and guarantees the canonical keys
``phase``, ``status``, ``latency_ms``, ``error_code`` and ``emitted`` so
downstream filtering does not depend on which call site emitted the event.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "genai"
LOG_LEVEL_ENV = "GENAI_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_genai_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_genai_console_handler"
_FILE_HANDLER_ATTR = "_genai_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _console_handler(json_mode: bool, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize (once) and refresh the shared ``genai`` logger.

    On repeated calls the level is re-read from the environment and the console
    handler is pointed at the current ``sys.stderr`` so that stream swaps (for
    example by test capture) are honored.
    """
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        logger.setLevel(desired_level)
        for handler in list(logger.handlers):
            if not getattr(handler, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream = getattr(handler, "stream", None)
            if stream is None or getattr(stream, "closed", False):
                # A closed stream cannot be flushed by setStream; swap the handler.
                logger.removeHandler(handler)
                with contextlib.suppress(ValueError, OSError):
                    handler.close()
                logger.addHandler(_console_handler(json_mode, desired_level))
                continue
            handler.setLevel(desired_level)
            if isinstance(handler, logging.StreamHandler) and stream is not sys.stderr:
                with contextlib.suppress(ValueError, OSError):
                    handler.setStream(sys.stderr)
            if json_mode != isinstance(handler.formatter, JsonFormatter):
                handler.setFormatter(_formatter(json_mode))
        return logger

    logger.setLevel(desired_level)
    logger.handlers[:] = [_console_handler(json_mode, desired_level)]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return a logger attached to the shared ``genai`` hierarchy.

    ``name`` should be ``"genai"`` or a dotted child such as ``"genai.client"``.
    Child loggers never get handlers of their own; they propagate to the base
    logger so each record is emitted exactly once.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared ``genai`` logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    file_path: Optional[str]
        When provided, a rotating file handler writing to ``file_path`` is
        attached (or reused if one already targets that path). When ``None``,
        any file handler previously attached by this function is removed.
    json_mode: bool
        JSON formatter (default) or plain text formatter for the handlers.

    Returns
    -------
    logging.Logger
        The configured base logger. Handlers added by callers are left alone.
    """
    logger = get_logger(BASE_LOGGER_NAME, json_mode=json_mode)

    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level) if isinstance(level, str) else level)
        for handler in logger.handlers:
            handler.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for handler in managed:
            logger.removeHandler(handler)
            handler.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)

    existing: Optional[logging.FileHandler] = None
    for handler in managed:
        if getattr(handler, "baseFilename", None) == abs_path:
            existing = handler  # type: ignore[assignment]
        else:
            logger.removeHandler(handler)
            handler.close()

    if existing is None:
        # 10MB x 5 backups
        fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(fh, _FILE_HANDLER_ATTR, True)
        fh.setLevel(logger.level)
        fh.setFormatter(_formatter(json_mode))
        logger.addHandler(fh)
    else:
        existing.setFormatter(_formatter(json_mode))
        existing.setLevel(logger.level)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON message.

    Parameters
    ----------
    logger: logging.Logger
        Logger obtained from ``get_logger``.
    event: str
        Event name (e.g. ``request.start``).
    ctx: LogContext | None
        Request context; merged shallowly.
    level: int
        Logging level of the emitted record.
    keep_none: bool
        When ``True``, keys whose value is ``None`` are kept (as JSON ``null``).
    **fields: Any
        Arbitrary serializable key/value pairs.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = (
    "phase",
    "status",
    "latency_ms",
    "emitted",
)


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    status: int | None = None,
    latency_ms: float | None = None,
    error_code: str | None = None,
    emitted: int | None = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit an event carrying the normalized key set.

    ``error_code`` is omitted when ``None``; the other normalized keys are
    always present. ``extra_fields`` never overwrite a normalized value.
    """
    base_fields: Dict[str, Any] = {
        "phase": phase,
        "status": status,
        "latency_ms": round(latency_ms, 3) if latency_ms is not None else None,
        "emitted": emitted,
    }
    if error_code is not None:
        base_fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is None or k in base_fields:
            continue
        base_fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "LogContext",
    "BASE_LOGGER_NAME",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
