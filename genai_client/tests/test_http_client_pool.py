"""Unit tests for shared httpx client pool.

Covers:
- Same key (base_url, purpose) returns the same instance.
- Different purpose yields different instances with their own timeouts.
- Closed clients are replaced.
- A client without an explicit transport uses the pool.
"""
from __future__ import annotations

import httpx

from genai_client import new_client
from genai_client.base.http import STREAM_PURPOSE, close_all_clients, get_httpx_client


def setup_function(_):
    # Ensure a clean slate for each test
    close_all_clients()


def teardown_function(_):
    close_all_clients()


def test_same_key_returns_same_instance():
    c1 = get_httpx_client("https://api.example.com", purpose="request")
    c2 = get_httpx_client("https://api.example.com", purpose="request")
    assert c1 is c2, "Expected pooled client instances to be identical for same key"


def test_different_purpose_returns_different_instances():
    c1 = get_httpx_client(None, purpose="request")
    c2 = get_httpx_client(None, purpose=STREAM_PURPOSE)
    assert c1 is not c2, "Different purposes should not share the same client instance"
    assert c2.timeout.read == 60.0  # nosec B101 - test assertion
    assert c1.timeout.read == 30.0  # nosec B101 - test assertion


def test_closed_client_is_replaced():
    c1 = get_httpx_client(None, purpose="request")
    c1.close()
    c2 = get_httpx_client(None, purpose="request")
    assert c2 is not c1 and not c2.is_closed  # nosec B101 - test assertion


def test_client_without_transport_uses_pool():
    client = new_client("tok")
    assert client._http_client() is get_httpx_client(None, purpose="request")  # nosec B101 - test assertion
    assert client._http_client(stream=True) is get_httpx_client(None, purpose=STREAM_PURPOSE)  # nosec B101 - test assertion


def test_configured_transport_wins():
    own = httpx.Client()
    try:
        client = new_client("tok", http_client=own)
        assert client._http_client() is own  # nosec B101 - test assertion
        assert client._http_client(stream=True) is own  # nosec B101 - test assertion
    finally:
        own.close()
