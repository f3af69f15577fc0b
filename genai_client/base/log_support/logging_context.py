"""Per-call fields attached to every request and stream log event.

A :class:`LogContext` is built from the outgoing ``httpx.Request`` before it
is sent and picks up the server-assigned request ID once a response arrives,
so ``request.start``, ``request.end``, ``stream.finalize`` and the failure
events of one call can be joined by ``path`` and ``request_id``.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

import httpx

REQUEST_ID_HEADER = "x-request-id"


@dataclass
class LogContext:
    """Fields shared by the log events of one API call.

    ``stream`` is only set for SSE calls. ``None`` values, including unset
    ``extra`` entries, are left out of :meth:`to_dict`.
    """

    api_type: Optional[str] = None
    model: Optional[str] = None
    method: Optional[str] = None
    path: Optional[str] = None
    stream: Optional[bool] = None
    request_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_request(
        cls,
        request: httpx.Request,
        *,
        api_type: Optional[str] = None,
        model: Optional[str] = None,
        stream: bool = False,
    ) -> "LogContext":
        # Azure deployments carry the api-version in the query; only the path is logged.
        return cls(
            api_type=api_type,
            model=model,
            method=request.method,
            path=request.url.path,
            stream=True if stream else None,
        )

    def bind_response(self, response: httpx.Response) -> None:
        """Record the request ID the API assigned to ``response``."""
        self.request_id = response.headers.get(REQUEST_ID_HEADER) or self.request_id

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext", "REQUEST_ID_HEADER"]
