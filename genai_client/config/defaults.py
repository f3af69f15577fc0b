"""genai_client.config.defaults
==========================

Central place for small, stable default values used across the package.
These defaults can be overridden via environment variables, an external
config file or explicit arguments, but provide sensible fallbacks for local
development and tests.

This module intentionally imports nothing from the rest of the package to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Public API ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"

# ---- Azure-style deployments ----
AZURE_DEFAULT_API_VERSION = "2023-05-15"
AZURE_API_PREFIX = "openai"
AZURE_DEPLOYMENTS_PREFIX = "deployments"
AZURE_API_KEY_HEADER = "api-key"  # pragma: allowlist secret - header name, not a secret

# ---- Headers ----
ORGANIZATION_HEADER = "OpenAI-Organization"

# ---- Streaming ----
# Consecutive non-data lines tolerated while waiting for one stream chunk.
DEFAULT_EMPTY_MESSAGES_LIMIT = 300

# ---- Batches ----
BATCH_DEFAULT_COMPLETION_WINDOW = "24h"
BATCH_DEFAULT_FILE_NAME = "@batchinput.jsonl"

# ---- Models ----
GPT3_ADA = "ada"
GPT3_BABBAGE_002 = "babbage-002"
GPT3_DAVINCI_002 = "davinci-002"
GPT35_TURBO = "gpt-3.5-turbo"
GPT35_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"
GPT4 = "gpt-4"
GPT4O = "gpt-4o"
GPT4O_MINI = "gpt-4o-mini"
ADA_EMBEDDING_V2 = "text-embedding-ada-002"
SMALL_EMBEDDING_3 = "text-embedding-3-small"
LARGE_EMBEDDING_3 = "text-embedding-3-large"


__all__ = [
    "OPENAI_DEFAULT_BASE_URL",
    "AZURE_DEFAULT_API_VERSION",
    "AZURE_API_PREFIX",
    "AZURE_DEPLOYMENTS_PREFIX",
    "AZURE_API_KEY_HEADER",
    "ORGANIZATION_HEADER",
    "DEFAULT_EMPTY_MESSAGES_LIMIT",
    "BATCH_DEFAULT_COMPLETION_WINDOW",
    "BATCH_DEFAULT_FILE_NAME",
    "GPT3_ADA",
    "GPT3_BABBAGE_002",
    "GPT3_DAVINCI_002",
    "GPT35_TURBO",
    "GPT35_TURBO_INSTRUCT",
    "GPT4",
    "GPT4O",
    "GPT4O_MINI",
    "ADA_EMBEDDING_V2",
    "SMALL_EMBEDDING_3",
    "LARGE_EMBEDDING_3",
]
