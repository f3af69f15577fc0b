"""Multipart form accumulation for file uploads.

A :class:`FormBuilder` gathers plain fields and file parts; the request
builder hands them to ``httpx`` which encodes the multipart body and sets the
``Content-Type`` header with its boundary.
"""
from __future__ import annotations

from typing import IO, Dict, List, Optional, Tuple, Union

FileContent = Union[bytes, IO[bytes]]
FilePart = Tuple[str, Tuple[str, FileContent, str]]

DEFAULT_FILE_CONTENT_TYPE = "application/octet-stream"


class FormBuilder:
    """Collects multipart form fields and files for a single request."""

    def __init__(self) -> None:
        self._fields: Dict[str, str] = {}
        self._files: List[FilePart] = []
        self._closed = False

    def _ensure_open(self) -> None:
        if self._closed:
            raise ValueError("form builder is closed")

    def create_form_file(
        self,
        field_name: str,
        filename: str,
        content: FileContent,
        content_type: Optional[str] = None,
    ) -> None:
        """Add a file part named ``field_name`` carrying ``filename``."""
        self._ensure_open()
        self._files.append((field_name, (filename, content, content_type or DEFAULT_FILE_CONTENT_TYPE)))

    def write_field(self, field_name: str, value: str) -> None:
        self._ensure_open()
        self._fields[field_name] = value

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def fields(self) -> Dict[str, str]:
        return dict(self._fields)

    @property
    def files(self) -> List[FilePart]:
        return list(self._files)


__all__ = ["FormBuilder", "DEFAULT_FILE_CONTENT_TYPE"]
