"""
Shared pieces of the response DTOs.

Every decoded response keeps the HTTP headers it arrived with, which gives
callers access to request IDs and rate limit counters without a second
round trip.
"""

from __future__ import annotations

from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, PrivateAttr

RATE_LIMIT_HEADER_PREFIX = "x-ratelimit-"


class RateLimitHeaders(BaseModel):
    """Parsed ``x-ratelimit-*`` response headers (``None`` when absent)."""

    limit_requests: Optional[int] = None
    limit_tokens: Optional[int] = None
    remaining_requests: Optional[int] = None
    remaining_tokens: Optional[int] = None
    reset_requests: Optional[str] = None
    reset_tokens: Optional[str] = None


def _int_header(headers: httpx.Headers, name: str) -> Optional[int]:
    raw = headers.get(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


class APIResponse(BaseModel):
    """Base class of all response DTOs.

    Unknown fields returned by the API are accepted and kept so newer server
    versions do not break decoding.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    _headers: httpx.Headers = PrivateAttr(default_factory=httpx.Headers)

    def set_header(self, headers: httpx.Headers) -> None:
        self._headers = httpx.Headers(headers)

    def header(self) -> httpx.Headers:
        """Return the HTTP headers of the response this object was decoded from."""
        return self._headers

    def rate_limit_headers(self) -> RateLimitHeaders:
        h = self._headers
        return RateLimitHeaders(
            limit_requests=_int_header(h, f"{RATE_LIMIT_HEADER_PREFIX}limit-requests"),
            limit_tokens=_int_header(h, f"{RATE_LIMIT_HEADER_PREFIX}limit-tokens"),
            remaining_requests=_int_header(h, f"{RATE_LIMIT_HEADER_PREFIX}remaining-requests"),
            remaining_tokens=_int_header(h, f"{RATE_LIMIT_HEADER_PREFIX}remaining-tokens"),
            reset_requests=h.get(f"{RATE_LIMIT_HEADER_PREFIX}reset-requests"),
            reset_tokens=h.get(f"{RATE_LIMIT_HEADER_PREFIX}reset-tokens"),
        )


class Usage(BaseModel):
    """Token accounting attached to completion, chat and embedding responses."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


__all__ = ["APIResponse", "RateLimitHeaders", "Usage"]
