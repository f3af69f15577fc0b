"""DTOs of the ``/files`` endpoints."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from .common import APIResponse

RawBytes = bytes


class PurposeType(str, Enum):
    """Intended use of an uploaded file."""

    FINE_TUNE = "fine-tune"
    FINE_TUNE_RESULTS = "fine-tune-results"
    ASSISTANTS = "assistants"
    ASSISTANTS_OUTPUT = "assistants_output"
    BATCH = "batch"
    BATCH_OUTPUT = "batch_output"
    VISION = "vision"


class FileRequest(BaseModel):
    """Upload of a local file.

    Attributes:
        file_name: Name sent with the multipart file part; defaults to the
            base name of ``file_path``.
        file_path: Local path read at upload time.
        purpose: Intended use.
    """

    file_name: Optional[str] = None
    file_path: str
    purpose: Union[PurposeType, str]


class FileBytesRequest(BaseModel):
    """Upload of in-memory content."""

    name: str = Field(..., min_length=1)
    bytes: RawBytes
    purpose: Union[PurposeType, str]


class File(APIResponse):
    id: str = ""
    object: str = "file"
    bytes: int = 0
    created_at: int = 0
    filename: str = ""
    purpose: str = ""
    status: Optional[str] = None
    status_details: Optional[str] = None


class FilesList(APIResponse):
    object: str = "list"
    files: List[File] = Field(default_factory=list, alias="data")


__all__ = ["PurposeType", "FileRequest", "FileBytesRequest", "File", "FilesList"]
