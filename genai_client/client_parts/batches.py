"""Batch job endpoints (``/batches``).

``create_batch_with_upload_file`` chains two calls: it uploads the records
rendered by :meth:`BatchRequestFiles.marshal` with purpose ``batch`` and then
creates the batch from the returned file ID. A failed upload is raised as
:class:`UploadBatchFileError` with the underlying error as its cause; the batch
is not created in that case.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlencode

from ..base.errors import UploadBatchFileError, classify_exception
from ..base.logging import LogContext, normalized_log_event
from ..config.defaults import BATCH_DEFAULT_COMPLETION_WINDOW, BATCH_DEFAULT_FILE_NAME
from ..dto.batch import (
    BatchResponse,
    CreateBatchRequest,
    CreateBatchWithUploadFileRequest,
    ListBatchResponse,
)
from ..dto.file import FileBytesRequest, PurposeType

BATCHES_SUFFIX = "/batches"


class BatchesMixin:
    """Batch operations; expects to be combined with ``ClientCore``."""

    def create_batch(self, request: CreateBatchRequest) -> BatchResponse:
        """Create a batch from an already uploaded input file.

        An empty ``completion_window`` is sent as ``"24h"``.
        """
        if not request.completion_window:
            request = request.model_copy(update={"completion_window": BATCH_DEFAULT_COMPLETION_WINDOW})
        http_request = self.new_request("POST", BATCHES_SUFFIX, request)
        return self.send_request(http_request, BatchResponse)

    def create_batch_with_upload_file(self, request: CreateBatchWithUploadFileRequest) -> BatchResponse:
        """Upload the request records as a JSONL file and create a batch from it.

        Raises:
            UploadBatchFileError: The upload failed (cause chained).
        """
        try:
            file = self.create_file_bytes(
                FileBytesRequest(
                    name=request.file_name or BATCH_DEFAULT_FILE_NAME,
                    bytes=request.requests.marshal(),
                    purpose=PurposeType.BATCH,
                )
            )
        except Exception as exc:
            normalized_log_event(
                self._logger,
                "batch.upload_failed",
                LogContext(api_type=self.config.api_type.value, extra={"records": len(request.requests)}),
                phase="start",
                error_code=classify_exception(exc).value,
                level=logging.WARNING,
            )
            raise UploadBatchFileError() from exc

        return self.create_batch(
            CreateBatchRequest(
                input_file_id=file.id,
                endpoint=request.endpoint,
                completion_window=request.completion_window,
                metadata=request.metadata,
            )
        )

    def retrieve_batch(self, batch_id: str) -> BatchResponse:
        http_request = self.new_request("GET", f"{BATCHES_SUFFIX}/{batch_id}")
        return self.send_request(http_request, BatchResponse)

    def cancel_batch(self, batch_id: str) -> BatchResponse:
        http_request = self.new_request("POST", f"{BATCHES_SUFFIX}/{batch_id}/cancel")
        return self.send_request(http_request, BatchResponse)

    def list_batch(self, after: Optional[str] = None, limit: Optional[int] = None) -> ListBatchResponse:
        """List batches, optionally paginated with ``after`` / ``limit``."""
        params = {}
        if after is not None:
            params["after"] = after
        if limit is not None:
            params["limit"] = str(limit)
        suffix = f"{BATCHES_SUFFIX}?{urlencode(params)}" if params else BATCHES_SUFFIX
        http_request = self.new_request("GET", suffix)
        return self.send_request(http_request, ListBatchResponse)


__all__ = ["BatchesMixin", "BATCHES_SUFFIX"]
