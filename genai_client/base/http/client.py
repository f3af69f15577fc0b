"""Shared HTTP client pool.

Purpose:
    Provide a thread-safe pool of reusable ``httpx.Client`` instances used
    when a :class:`~genai_client.config.ClientConfig` carries no transport of
    its own. Reusing clients keeps connections alive across calls.

Timeout strategy:
    - ``purpose="request"`` clients use ``TimeoutConfig.request_timeout()``.
    - ``purpose="stream"`` clients use ``TimeoutConfig.stream_timeout()`` so
      the read timeout bounds the idle gap between two SSE lines rather than
      the whole stream.
    Timeouts are read when a client is first created and cached with it.

Lifecycle & cleanup:
    - Clients are cached by ``(base_url, purpose)``.
    - All clients are closed at interpreter exit via ``atexit``. Tests may call
      :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

STREAM_PURPOSE = "stream"

# Internal cache keyed by (base_url, purpose)
_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: Optional API base URL associated with the client. ``None``
            groups clients under a shared key.
        purpose: Pool discriminator; ``"stream"`` selects streaming timeouts,
            anything else the regular request timeouts.

    Returns:
        A reusable ``httpx.Client`` instance.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        cfg = get_timeout_config()
        timeout = cfg.stream_timeout() if purpose == STREAM_PURPOSE else cfg.request_timeout()
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients", "STREAM_PURPOSE"]
