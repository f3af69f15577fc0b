"""Embedding endpoint (``/embeddings``)."""

from __future__ import annotations

from ..dto.embedding import EmbeddingRequest, EmbeddingResponse

EMBEDDINGS_SUFFIX = "/embeddings"


class EmbeddingsMixin:
    def create_embeddings(self, request: EmbeddingRequest) -> EmbeddingResponse:
        http_request = self.new_request("POST", EMBEDDINGS_SUFFIX, request)
        return self.send_request(http_request, EmbeddingResponse, model=request.model)


__all__ = ["EmbeddingsMixin", "EMBEDDINGS_SUFFIX"]
