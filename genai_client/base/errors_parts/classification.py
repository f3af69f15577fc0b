"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction, status-to-code mapping, and message-based
heuristics as a fallback for transport exceptions that carry no status.
"""
from __future__ import annotations

from typing import Optional

import httpx

from .api_error import (
    ChatCompletionStreamNotSupportedError,
    CompletionStreamNotSupportedError,
    TooManyEmptyStreamMessagesError,
    UploadBatchFileError,
)
from .error_code import ErrorCode


def _extract_status(exc: Exception) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.http_status_code``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "http_status_code"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:  # pragma: no cover - simple mapping
    """Substring heuristic mapping for exceptions without a status."""
    PATTERN_GROUPS = (
        (ErrorCode.TIMEOUT, ("timeout",)),
        (ErrorCode.TIMEOUT, ("timed out",)),
        (ErrorCode.AUTH, ("unauthorized",)),
        (ErrorCode.AUTH, ("api key",)),
        (ErrorCode.NOT_FOUND, ("not found",)),
        (ErrorCode.UNAVAILABLE, ("connection refused",)),
        (ErrorCode.UNAVAILABLE, ("unavailable",)),
        (ErrorCode.VALIDATION, ("invalid",)),
        (ErrorCode.VALIDATION, ("malformed",)),
    )
    for code, patterns in PATTERN_GROUPS:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. Library errors with a fixed category.
        2. Timeout exceptions (``httpx`` and builtin).
        3. HTTP status mapping; unmapped 5xx statuses are ``SERVER_ERROR``.
        4. Transport errors (``httpx.TransportError``) are ``TRANSIENT``.
        5. Substring heuristics.
        6. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, TooManyEmptyStreamMessagesError):
        return ErrorCode.STREAM
    if isinstance(exc, (CompletionStreamNotSupportedError, ChatCompletionStreamNotSupportedError)):
        return ErrorCode.UNSUPPORTED
    if isinstance(exc, UploadBatchFileError) and isinstance(exc.__cause__, Exception):
        return classify_exception(exc.__cause__)
    if isinstance(exc, (httpx.TimeoutException, TimeoutError)):
        return ErrorCode.TIMEOUT
    status = _extract_status(exc)
    if status is not None:
        by_status = ErrorCode.for_status(status)
        if by_status is not None:
            return by_status
    if isinstance(exc, httpx.TransportError):
        return ErrorCode.TRANSIENT
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "_extract_status",
]
