"""Failure categories reported in the ``error_code`` field of client log events.

Each category is tied to the HTTP statuses the API answers with, or to the
library or transport error that produced it. The string values are what log
consumers see, so they do not change between releases.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Category of a failed API call.

    Members and their triggers:

    - ``AUTH``: 401 or 403; a missing or rejected API key.
    - ``RATE_LIMIT``: 429.
    - ``TIMEOUT``: 408, 504, or an ``httpx`` timeout.
    - ``TRANSIENT``: 502, or a connection-level ``httpx.TransportError``.
    - ``UNSUPPORTED``: ``stream=True`` passed to a non-streaming endpoint.
    - ``VALIDATION``: 400 or 422; the API rejected the request body.
    - ``NOT_FOUND``: 404; unknown model, file or batch ID.
    - ``CONFLICT``: 409, e.g. cancelling a batch that already finished.
    - ``SERVER_ERROR``: 500 and any other 5xx without its own category.
    - ``UNAVAILABLE``: 503; the service or deployment is overloaded.
    - ``STREAM``: too many non-data lines between two stream chunks.
    - ``UNKNOWN``: nothing above matched.
    """

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    UNSUPPORTED = "unsupported"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    STREAM = "stream"
    UNKNOWN = "unknown"

    @classmethod
    def for_status(cls, status: int) -> Optional["ErrorCode"]:
        """Category of an HTTP failure status, or ``None`` for unmapped 4xx."""
        code = _STATUS_CODES.get(status)
        if code is None and status >= 500:
            return cls.SERVER_ERROR
        return code


_STATUS_CODES = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


__all__ = ["ErrorCode"]
