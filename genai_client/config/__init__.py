"""Unified configuration layer for the client.

Goals
-----
* Centralize defaults (base URL, API version, stream limits).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``GENAI_CONFIG_FILE``
    3. Environment variables (``OPENAI_API_KEY``, ``OPENAI_BASE_URL``, ...)
    4. In-code overrides passed to :func:`get_client_config`
* Provide a single call site: ``get_client_config()``.

External Config File (Optional)
-------------------------------
JSON is tried first, then YAML. Only known ``ClientConfig`` fields are read;
everything else is ignored. Example:

```
api_type: azure
base_url: https://example-resource.openai.azure.com/
engine: my-deployment
api_version: 2023-05-15
```

A ``.env`` file (``DOTENV_FILE``, default ``.env``) is loaded once before the
environment is read. It only fills variables that are unset or hold
placeholder values.
"""
from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional
import json
import os

import yaml

from .client_config import APIType, ClientConfig, default_azure_config, default_config
from .env import env_overrides, is_placeholder, resolve_api_key

CONFIG_FILE_ENV = "GENAI_CONFIG_FILE"

_CONFIG_FIELDS = frozenset(f.name for f in fields(ClientConfig)) - {"http_client"}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Parse KEY=VALUE lines of the dotenv file into ``os.environ``.

    Comments and blank lines are ignored. Existing variables are replaced only
    when their current value looks like a placeholder.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = {k: v for k, v in data.items() if k in _CONFIG_FIELDS and v is not None}
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the cached config file and dotenv state (tests, reloads)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


def get_client_config(overrides: Optional[Dict[str, Any]] = None) -> ClientConfig:
    """Return the merged :class:`ClientConfig`.

    Merge order (later wins): defaults -> config file -> env vars -> overrides.
    When the resolved flavor is Azure and no API version was given, the Azure
    default version is used.
    """
    _load_dotenv_once()
    merged: Dict[str, Any] = {}
    merged |= _load_external_config()
    merged |= env_overrides()
    if overrides:
        merged |= {k: v for k, v in overrides.items() if v is not None}

    unknown = set(merged) - _CONFIG_FIELDS - {"http_client"}
    if unknown:
        raise ValueError(f"unknown client config fields: {sorted(unknown)}")

    return ClientConfig(**merged)


__all__ = [
    "APIType",
    "ClientConfig",
    "default_config",
    "default_azure_config",
    "get_client_config",
    "reset_config_cache",
    "resolve_api_key",
    "CONFIG_FILE_ENV",
]
