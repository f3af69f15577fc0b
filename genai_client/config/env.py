"""genai_client.config.env
======================

Environment variable names and small lookup helpers for client settings.

Design Notes
------------
- ``ENV_FIELD_MAP`` maps ``ClientConfig`` field names to the environment
  variables read for them.
- The API key accepts several variable names; ``API_KEY_ENV_CANDIDATES`` lists
  them in priority order (canonical first).
- Helpers never raise on unset variables; callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

API_KEY_ENV = "OPENAI_API_KEY"  # pragma: allowlist secret - variable name, not a secret

# Ordered tuple of acceptable env var names for the token (canonical first)
API_KEY_ENV_CANDIDATES: Tuple[str, ...] = (
    API_KEY_ENV,
    "AZURE_OPENAI_API_KEY",
    "OPENAI_TOKEN",
)

# ClientConfig field -> env var
ENV_FIELD_MAP: Dict[str, str] = {
    "base_url": "OPENAI_BASE_URL",
    "org_id": "OPENAI_ORG_ID",
    "api_type": "OPENAI_API_TYPE",
    "api_version": "OPENAI_API_VERSION",
    "engine": "OPENAI_ENGINE",
    "empty_messages_limit": "OPENAI_EMPTY_MESSAGES_LIMIT",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and ignores surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_api_key_env_candidates() -> Iterable[str]:
    """Yield acceptable environment variable names for the API token."""
    yield from API_KEY_ENV_CANDIDATES


def resolve_api_key() -> Tuple[Optional[str], Optional[str]]:
    """Resolve the API token from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)`` for the first non-empty candidate, or
        ``(None, None)`` when nothing is set.
    """
    for name in get_api_key_env_candidates():
        if val := os.environ.get(name):
            return val, name
    return None, None


def env_overrides() -> Dict[str, str]:
    """Return the ``ClientConfig`` fields set through the environment."""
    out: Dict[str, str] = {}
    for field_name, env_name in ENV_FIELD_MAP.items():
        val = os.getenv(env_name)
        if val is not None and val != "":
            out[field_name] = val
    token, _ = resolve_api_key()
    if token:
        out["auth_token"] = token
    return out


__all__ = [
    "API_KEY_ENV",
    "API_KEY_ENV_CANDIDATES",
    "ENV_FIELD_MAP",
    "is_placeholder",
    "get_api_key_env_candidates",
    "resolve_api_key",
    "env_overrides",
]
