"""DTOs of the ``/embeddings`` endpoint."""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .common import APIResponse, Usage


class EmbeddingRequest(BaseModel):
    """Request body of ``POST /embeddings``.

    ``input`` is a single string, a list of strings, or token arrays.
    """

    input: Union[str, List[str], List[int], List[List[int]]]
    model: str = Field(..., min_length=1)
    encoding_format: Optional[Literal["float", "base64"]] = None
    dimensions: Optional[int] = Field(default=None, gt=0)
    user: Optional[str] = None


class Embedding(BaseModel):
    object: str = "embedding"
    # A base64 string when the request asked for ``encoding_format="base64"``.
    embedding: Union[List[float], str] = []
    index: int = 0


class EmbeddingResponse(APIResponse):
    object: str = "list"
    data: List[Embedding] = []
    model: str = ""
    usage: Optional[Usage] = None


__all__ = ["EmbeddingRequest", "Embedding", "EmbeddingResponse"]
