"""
Structured API error types.

The remote API reports failures with a JSON envelope of the shape
``{"error": {"code": ..., "message": ..., "param": ..., "type": ...}}``.
``ErrorResponse`` models that envelope; ``APIError`` is the exception raised
once the envelope has been decoded. ``RequestError`` covers failed responses
whose body is not a usable envelope.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Union

from pydantic import BaseModel, field_validator


class GenAIError(Exception):
    """Root of every exception raised by the client library."""


class APIErrorBody(BaseModel):
    """Inner ``error`` object of an API error envelope.

    Some proxy deployments send ``message`` as a list of strings; these are
    joined with ``", "`` so callers always see a single string. A ``null``
    ``message`` or ``type`` decodes to ``""``.
    """

    code: Any = None
    message: str = ""
    param: Optional[str] = None
    type: str = ""

    @field_validator("message", mode="before")
    @classmethod
    def _join_message_list(cls, value: Union[str, List[str], None]) -> str:
        if value is None:
            return ""
        if isinstance(value, list):
            return ", ".join(str(v) for v in value)
        return value

    @field_validator("type", mode="before")
    @classmethod
    def _null_type_as_empty(cls, value: Optional[str]) -> str:
        return "" if value is None else value


class ErrorResponse(BaseModel):
    """Top-level error envelope returned by the API."""

    error: Optional[APIErrorBody] = None


@dataclass(eq=False)
class APIError(GenAIError):
    """Structured error reported by the API.

    Attributes:
        code: API-specific error code (string or integer, may be ``None``).
        message: Human-readable message from the API.
        param: Request parameter the error refers to, when reported.
        type: Error category string as reported by the API.
        http_status_code: HTTP status of the failed response (``0`` when
            unknown).
    """

    code: Any = None
    message: str = ""
    param: Optional[str] = None
    type: str = ""
    http_status_code: int = 0

    @classmethod
    def from_body(cls, body: APIErrorBody, http_status_code: int = 0) -> "APIError":
        return cls(
            code=body.code,
            message=body.message,
            param=body.param,
            type=body.type,
            http_status_code=http_status_code,
        )

    @property
    def status_code(self) -> Optional[int]:
        return self.http_status_code or None

    def __str__(self) -> str:
        if self.http_status_code:
            return f"error, status code: {self.http_status_code}, message: {self.message}"
        return f"error, {self.message}"


@dataclass(eq=False)
class RequestError(GenAIError):
    """A failed response whose body could not be decoded into an ``APIError``.

    Attributes:
        http_status_code: HTTP status of the failed response.
        err: Decoding error, if decoding raised; ``None`` when the body decoded
            but carried no ``error`` object.
    """

    http_status_code: int
    err: Optional[Exception] = None

    @property
    def status_code(self) -> int:
        return self.http_status_code

    def __str__(self) -> str:
        return f"error, status code: {self.http_status_code}, message: {self.err}"


class TooManyEmptyStreamMessagesError(GenAIError):
    """Stream produced more consecutive non-data lines than allowed."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"stream has sent too many empty messages (limit {limit})")
        self.limit = limit


class UploadBatchFileError(GenAIError):
    """Uploading the assembled batch input file failed."""

    def __init__(self) -> None:
        super().__init__("upload batch file failed")


class CompletionStreamNotSupportedError(GenAIError):
    def __init__(self) -> None:
        super().__init__(
            "streaming is not supported with this method, please use create_completion_stream"
        )


class ChatCompletionStreamNotSupportedError(GenAIError):
    def __init__(self) -> None:
        super().__init__(
            "streaming is not supported with this method, please use create_chat_completion_stream"
        )


__all__ = [
    "GenAIError",
    "APIErrorBody",
    "ErrorResponse",
    "APIError",
    "RequestError",
    "TooManyEmptyStreamMessagesError",
    "UploadBatchFileError",
    "CompletionStreamNotSupportedError",
    "ChatCompletionStreamNotSupportedError",
]
