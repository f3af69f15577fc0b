"""Unified client error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``genai_client.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.api_error import (
    APIError,
    APIErrorBody,
    ChatCompletionStreamNotSupportedError,
    CompletionStreamNotSupportedError,
    ErrorResponse,
    GenAIError,
    RequestError,
    TooManyEmptyStreamMessagesError,
    UploadBatchFileError,
)
from .errors_parts.classification import classify_exception

__all__ = [
    "ErrorCode",
    "GenAIError",
    "APIErrorBody",
    "ErrorResponse",
    "APIError",
    "RequestError",
    "TooManyEmptyStreamMessagesError",
    "UploadBatchFileError",
    "CompletionStreamNotSupportedError",
    "ChatCompletionStreamNotSupportedError",
    "classify_exception",
]
