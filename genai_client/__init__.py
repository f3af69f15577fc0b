"""genai_client package

Client library for an OpenAI-style generative-AI REST API: completions,
chat, embeddings, file uploads and batch jobs, with Server-Sent-Event
streaming and structured error decoding.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`Client`, :func:`new_client`, :func:`new_azure_client`
    - Configuration: :class:`ClientConfig`, :class:`APIType`,
      :func:`default_config`, :func:`default_azure_config`,
      :func:`get_client_config`
    - Errors: :class:`GenAIError` and subclasses, :class:`ErrorCode`,
      :func:`classify_exception`
    - Streaming: :class:`StreamReader`
    - DTOs: everything in :mod:`genai_client.dto`
"""

from .base.errors import (
    APIError,
    ChatCompletionStreamNotSupportedError,
    CompletionStreamNotSupportedError,
    ErrorCode,
    ErrorResponse,
    GenAIError,
    RequestError,
    TooManyEmptyStreamMessagesError,
    UploadBatchFileError,
    classify_exception,
)
from .base.logging import configure_logger
from .base.streaming import StreamReader
from .client import Client, new_azure_client, new_client
from .config import APIType, ClientConfig, default_azure_config, default_config, get_client_config
from .dto import *  # noqa: F401,F403 - DTO surface re-exported
from .dto import __all__ as _dto_all

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Client",
    "new_client",
    "new_azure_client",
    "ClientConfig",
    "APIType",
    "default_config",
    "default_azure_config",
    "get_client_config",
    "configure_logger",
    "StreamReader",
    "GenAIError",
    "APIError",
    "RequestError",
    "ErrorResponse",
    "TooManyEmptyStreamMessagesError",
    "UploadBatchFileError",
    "CompletionStreamNotSupportedError",
    "ChatCompletionStreamNotSupportedError",
    "ErrorCode",
    "classify_exception",
    *_dto_all,
]
