"""
Batch job DTOs and the batch input file assembler.

Purpose
-------
A batch job runs many API requests offline. Its input is an uploaded JSONL
file where each line is one request record::

    {"custom_id": "...", "body": {...}, "method": "POST", "url": "/v1/chat/completions"}

``BatchRequestFiles`` collects such records and renders the file body with
:meth:`BatchRequestFiles.marshal`: records are JSON encoded and joined with a
single ``\\n``, without a trailing newline.

``CreateBatchWithUploadFileRequest`` is the input of the one-call helper that
uploads the rendered file and creates the batch from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, Union, runtime_checkable

from pydantic import BaseModel, Field

from ..config.defaults import BATCH_DEFAULT_COMPLETION_WINDOW, BATCH_DEFAULT_FILE_NAME
from .chat import ChatCompletionRequest
from .common import APIResponse
from .completion import CompletionRequest
from .embedding import EmbeddingRequest


class BatchEndpoint(str, Enum):
    CHAT_COMPLETIONS = "/v1/chat/completions"
    COMPLETIONS = "/v1/completions"
    EMBEDDINGS = "/v1/embeddings"


@runtime_checkable
class BatchRequestFile(Protocol):
    """A record that can render itself as one line of a batch input file."""

    def marshal_batch_file(self) -> bytes:
        ...


class _BatchLine(BaseModel):
    def marshal_batch_file(self) -> bytes:
        return self.model_dump_json(exclude_none=True).encode("utf-8")


class BatchChatCompletionRequest(_BatchLine):
    custom_id: str
    body: ChatCompletionRequest
    method: str = "POST"
    url: BatchEndpoint = BatchEndpoint.CHAT_COMPLETIONS


class BatchCompletionRequest(_BatchLine):
    custom_id: str
    body: CompletionRequest
    method: str = "POST"
    url: BatchEndpoint = BatchEndpoint.COMPLETIONS


class BatchEmbeddingRequest(_BatchLine):
    custom_id: str
    body: EmbeddingRequest
    method: str = "POST"
    url: BatchEndpoint = BatchEndpoint.EMBEDDINGS


class BatchRequestFiles(list):
    """Ordered batch records; ``marshal()`` renders the JSONL file body."""

    def marshal(self) -> bytes:
        return b"\n".join(record.marshal_batch_file() for record in self)


class BatchErrorData(BaseModel):
    code: Optional[str] = None
    message: Optional[str] = None
    param: Optional[str] = None
    line: Optional[int] = None


class BatchErrors(BaseModel):
    object: Optional[str] = None
    data: List[BatchErrorData] = []


class BatchRequestCounts(BaseModel):
    total: int = 0
    completed: int = 0
    failed: int = 0


class Batch(APIResponse):
    """A batch job as reported by the API."""

    id: str = ""
    object: str = "batch"
    endpoint: str = ""
    errors: Optional[BatchErrors] = None
    input_file_id: str = ""
    completion_window: str = ""
    status: str = ""
    output_file_id: Optional[str] = None
    error_file_id: Optional[str] = None
    created_at: int = 0
    in_progress_at: Optional[int] = None
    expires_at: Optional[int] = None
    finalizing_at: Optional[int] = None
    completed_at: Optional[int] = None
    failed_at: Optional[int] = None
    expired_at: Optional[int] = None
    cancelling_at: Optional[int] = None
    cancelled_at: Optional[int] = None
    request_counts: BatchRequestCounts = Field(default_factory=BatchRequestCounts)
    metadata: Optional[Dict[str, Any]] = None


class BatchResponse(Batch):
    """Response of the create, retrieve and cancel batch operations."""


class CreateBatchRequest(BaseModel):
    input_file_id: str
    endpoint: Union[BatchEndpoint, str]
    completion_window: str = ""
    metadata: Optional[Dict[str, Any]] = None


class ListBatchResponse(APIResponse):
    object: str = "list"
    data: List[Batch] = []
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False


@dataclass
class CreateBatchWithUploadFileRequest:
    """Records plus batch settings for ``create_batch_with_upload_file``.

    Attributes:
        endpoint: Endpoint every record targets.
        file_name: Name of the uploaded input file.
        completion_window: Processing window; the API currently accepts "24h".
        metadata: Optional metadata attached to the batch.
        requests: Records appended through the ``add_*`` helpers.
    """

    endpoint: Union[BatchEndpoint, str]
    file_name: str = BATCH_DEFAULT_FILE_NAME
    completion_window: str = BATCH_DEFAULT_COMPLETION_WINDOW
    metadata: Optional[Dict[str, Any]] = None
    requests: BatchRequestFiles = field(default_factory=BatchRequestFiles)

    def add_chat_completion(self, custom_id: str, body: ChatCompletionRequest) -> None:
        self.requests.append(BatchChatCompletionRequest(custom_id=custom_id, body=body))

    def add_completion(self, custom_id: str, body: CompletionRequest) -> None:
        self.requests.append(BatchCompletionRequest(custom_id=custom_id, body=body))

    def add_embedding(self, custom_id: str, body: EmbeddingRequest) -> None:
        self.requests.append(BatchEmbeddingRequest(custom_id=custom_id, body=body))


__all__ = [
    "BatchEndpoint",
    "BatchRequestFile",
    "BatchChatCompletionRequest",
    "BatchCompletionRequest",
    "BatchEmbeddingRequest",
    "BatchRequestFiles",
    "BatchErrorData",
    "BatchErrors",
    "BatchRequestCounts",
    "Batch",
    "BatchResponse",
    "CreateBatchRequest",
    "ListBatchResponse",
    "CreateBatchWithUploadFileRequest",
]
