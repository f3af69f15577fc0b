"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `genai_client.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .api_error import (
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
from .classification import classify_exception

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
