"""Timeout configuration for the default HTTP transport.

The pooled ``httpx`` clients created by :mod:`genai_client.base.http` take
their timeouts from here. Callers supplying their own ``httpx.Client`` keep
whatever timeouts they configured on it.

Supported environment variables (all optional, positive floats):
    GENAI_TIMEOUT_HTTP_SECONDS
        Connect/read/write timeout for regular requests.
    GENAI_TIMEOUT_STREAM_SECONDS
        Idle read timeout between two lines of a streaming response.

The configuration is cached and recomputed only when one of the variables
changes, so repeated lookups do not re-parse the environment.
"""
from __future__ import annotations

from dataclasses import dataclass
import os

import httpx

HTTP_TIMEOUT_ENV = "GENAI_TIMEOUT_HTTP_SECONDS"
STREAM_TIMEOUT_ENV = "GENAI_TIMEOUT_STREAM_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Timeout for regular (non-streaming) requests.
        stream_timeout_seconds: Idle timeout while waiting for the next line
            of a streaming response.
    """

    http_timeout_seconds: float = 30.0
    stream_timeout_seconds: float = 60.0

    def request_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.http_timeout_seconds)

    def stream_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.http_timeout_seconds, read=self.stream_timeout_seconds)


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, returning ``default`` otherwise."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join([os.getenv(HTTP_TIMEOUT_ENV, ""), os.getenv(STREAM_TIMEOUT_ENV, "")])
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float(HTTP_TIMEOUT_ENV, defaults.http_timeout_seconds),
        stream_timeout_seconds=_parse_env_float(STREAM_TIMEOUT_ENV, defaults.stream_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
]
