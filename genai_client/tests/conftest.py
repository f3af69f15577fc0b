"""Shared fixtures for the client test suite.

The wire is faked with ``httpx.MockTransport``: tests register a handler,
receive a ``Client`` bound to it, and inspect the requests the handler saw.
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Tuple

import httpx
import pytest

from genai_client import Client, default_azure_config, default_config
from genai_client.base.http import close_all_clients
from genai_client.config import reset_config_cache

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """Mock transport remembering every request it served."""

    def __init__(self, handler: Handler) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep developer environment variables and cached config out of tests."""
    for name in (
        "OPENAI_API_KEY",
        "AZURE_OPENAI_API_KEY",
        "OPENAI_TOKEN",
        "OPENAI_BASE_URL",
        "OPENAI_ORG_ID",
        "OPENAI_API_TYPE",
        "OPENAI_API_VERSION",
        "OPENAI_ENGINE",
        "OPENAI_EMPTY_MESSAGES_LIMIT",
        "GENAI_CONFIG_FILE",
        "GENAI_LOG_LEVEL",
        "GENAI_TIMEOUT_HTTP_SECONDS",
        "GENAI_TIMEOUT_STREAM_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", "/nonexistent/.env")
    reset_config_cache()
    yield
    reset_config_cache()
    close_all_clients()


@pytest.fixture()
def make_client() -> Callable[..., Tuple[Client, RecordingTransport]]:
    """Return a factory ``(handler, **options) -> (client, transport)``."""

    def _make(handler: Handler, **options):
        transport = RecordingTransport(handler)
        http_client = httpx.Client(transport=transport)
        client = Client(default_config("test-token", http_client=http_client, **options))
        return client, transport

    return _make


@pytest.fixture()
def make_azure_client() -> Callable[..., Tuple[Client, RecordingTransport]]:
    """Like ``make_client`` for an Azure deployment ``my-deployment``."""

    def _make(handler: Handler, **options):
        transport = RecordingTransport(handler)
        cfg = default_azure_config(
            "azure-key",
            "https://res.openai.azure.com/",
            "my-deployment",
            http_client=httpx.Client(transport=transport),
            **options,
        )
        return Client(cfg), transport

    return _make
