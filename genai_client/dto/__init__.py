"""Request and response DTOs, one module per API area."""

from .batch import (
    Batch,
    BatchChatCompletionRequest,
    BatchCompletionRequest,
    BatchEmbeddingRequest,
    BatchEndpoint,
    BatchErrorData,
    BatchErrors,
    BatchRequestCounts,
    BatchRequestFile,
    BatchRequestFiles,
    BatchResponse,
    CreateBatchRequest,
    CreateBatchWithUploadFileRequest,
    ListBatchResponse,
)
from .chat import (
    ChatCompletionChoice,
    ChatCompletionMessage,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatCompletionStreamChoice,
    ChatCompletionStreamDelta,
    ChatCompletionStreamResponse,
    FunctionCall,
    ToolCall,
)
from .common import APIResponse, RateLimitHeaders, Usage
from .completion import CompletionChoice, CompletionRequest, CompletionResponse, LogprobResult
from .embedding import Embedding, EmbeddingRequest, EmbeddingResponse
from .file import File, FileBytesRequest, FileRequest, FilesList, PurposeType
from .model import Model, ModelsList

__all__ = [
    "APIResponse",
    "RateLimitHeaders",
    "Usage",
    "Model",
    "ModelsList",
    "CompletionRequest",
    "CompletionChoice",
    "CompletionResponse",
    "LogprobResult",
    "ChatCompletionMessage",
    "ChatCompletionRequest",
    "ChatCompletionChoice",
    "ChatCompletionResponse",
    "ChatCompletionStreamDelta",
    "ChatCompletionStreamChoice",
    "ChatCompletionStreamResponse",
    "FunctionCall",
    "ToolCall",
    "EmbeddingRequest",
    "Embedding",
    "EmbeddingResponse",
    "PurposeType",
    "FileRequest",
    "FileBytesRequest",
    "File",
    "FilesList",
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
