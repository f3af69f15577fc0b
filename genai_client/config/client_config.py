"""Client configuration record and its constructors.

``ClientConfig`` holds everything the client core needs to address and
authenticate against the API. The two constructors mirror the two API
flavors: the public API (``default_config``) and proxy-style Azure
deployments (``default_azure_config``). Keyword overrides replace single
fields, so callers only spell out what differs from the defaults.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional, Union

import httpx

from .defaults import (
    AZURE_DEFAULT_API_VERSION,
    DEFAULT_EMPTY_MESSAGES_LIMIT,
    OPENAI_DEFAULT_BASE_URL,
)


class APIType(str, Enum):
    """API flavor; decides URL layout and the auth header."""

    OPEN_AI = "OPEN_AI"
    AZURE = "AZURE"
    AZURE_AD = "AZURE_AD"

    @classmethod
    def parse(cls, value: Union[str, "APIType", None]) -> "APIType":
        """Coerce a string such as ``"azure"`` or ``"open_ai"`` into a member.

        ``None`` and ``""`` map to ``OPEN_AI``.

        Raises:
            ValueError: For unknown flavors.
        """
        if isinstance(value, cls):
            return value
        if not value:
            return cls.OPEN_AI
        normalized = str(value).strip().upper().replace("-", "_")
        if normalized == "OPENAI":
            return cls.OPEN_AI
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"unknown api type: {value!r}") from None

    @property
    def is_azure(self) -> bool:
        return self in (APIType.AZURE, APIType.AZURE_AD)


@dataclass
class ClientConfig:
    """Settings of one :class:`~genai_client.client.Client`.

    Attributes:
        auth_token: Bearer token (public API, Azure AD) or API key (Azure).
        base_url: API root, e.g. ``https://api.openai.com/v1``.
        api_type: API flavor.
        org_id: Organization sent in ``OpenAI-Organization`` when non-empty.
        api_version: ``api-version`` query value for Azure deployments.
        engine: Azure deployment name.
        http_client: Transport; ``None`` selects the shared pooled clients.
        empty_messages_limit: Non-data stream lines tolerated per chunk.
    """

    auth_token: str = field(default="", repr=False)
    base_url: str = OPENAI_DEFAULT_BASE_URL
    api_type: APIType = APIType.OPEN_AI
    org_id: str = ""
    api_version: str = ""
    engine: str = ""
    http_client: Optional[httpx.Client] = field(default=None, repr=False, compare=False)
    empty_messages_limit: int = DEFAULT_EMPTY_MESSAGES_LIMIT

    def __post_init__(self) -> None:
        self.api_type = APIType.parse(self.api_type)
        if self.api_type.is_azure and not self.api_version:
            self.api_version = AZURE_DEFAULT_API_VERSION
        self.empty_messages_limit = int(self.empty_messages_limit)
        if self.empty_messages_limit < 0:
            raise ValueError("empty_messages_limit must be >= 0")

    def with_options(self, **overrides: Any) -> "ClientConfig":
        """Return a copy with the given fields replaced (``None`` values ignored)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def default_config(auth_token: str, **overrides: Any) -> ClientConfig:
    """Configuration for the public API."""
    return ClientConfig(
        auth_token=auth_token,
        base_url=OPENAI_DEFAULT_BASE_URL,
        api_type=APIType.OPEN_AI,
    ).with_options(**overrides)


def default_azure_config(auth_token: str, base_url: str, engine: str, **overrides: Any) -> ClientConfig:
    """Configuration for an Azure-style deployment at ``base_url``."""
    return ClientConfig(
        auth_token=auth_token,
        base_url=base_url,
        api_type=APIType.AZURE,
        api_version=AZURE_DEFAULT_API_VERSION,
        engine=engine,
    ).with_options(**overrides)


__all__ = ["APIType", "ClientConfig", "default_config", "default_azure_config"]
