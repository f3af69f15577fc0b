"""Client for the generative-AI REST API.

Summary:
- One method per API operation (models, completions, chat, embeddings, files,
  batches), each mapping onto a single HTTP call; streaming variants return a
  :class:`~genai_client.base.streaming.StreamReader`.
- Requests, headers, URL layout and response decoding are shared in
  :class:`~genai_client.client_parts.core.ClientCore`; the mixins only choose
  method, path, body and result type.

Construction:
- ``new_client(token, **options)`` for the public API.
- ``new_azure_client(token, base_url, engine, **options)`` for Azure-style
  deployments.
- ``Client.from_env(**overrides)`` resolves settings through
  :func:`~genai_client.config.get_client_config` (config file, environment,
  overrides).
- ``Client(config)`` for a fully prepared :class:`ClientConfig`.

``options`` replace single ``ClientConfig`` fields, e.g.
``new_client(token, org_id="org-1", http_client=httpx.Client(...))``.
"""

from __future__ import annotations

from typing import Any

from .client_parts import (
    BatchesMixin,
    ChatMixin,
    ClientCore,
    CompletionsMixin,
    EmbeddingsMixin,
    FilesMixin,
    ModelsMixin,
)
from .config import ClientConfig, default_azure_config, default_config, get_client_config


class Client(
    ModelsMixin,
    CompletionsMixin,
    ChatMixin,
    EmbeddingsMixin,
    FilesMixin,
    BatchesMixin,
    ClientCore,
):
    """API client bound to one :class:`ClientConfig`.

    The client holds no per-call state and may be shared between threads as
    long as its ``httpx.Client`` may.
    """

    def __init__(self, config: ClientConfig) -> None:
        super().__init__(config)

    @classmethod
    def from_env(cls, **overrides: Any) -> "Client":
        return cls(get_client_config(overrides))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"


def new_client(auth_token: str, **options: Any) -> Client:
    """Create a client for the public API."""
    return Client(default_config(auth_token, **options))


def new_azure_client(auth_token: str, base_url: str, engine: str, **options: Any) -> Client:
    """Create a client for an Azure-style deployment."""
    return Client(default_azure_config(auth_token, base_url, engine, **options))


__all__ = ["Client", "new_client", "new_azure_client"]
