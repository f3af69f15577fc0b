"""File endpoints (``/files``).

Uploads are multipart forms with a ``purpose`` field and a ``file`` part
carrying the file name. ``get_file_content`` returns the stored file as raw
text instead of decoding JSON.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from ..base.http import FormBuilder
from ..dto.file import File, FileBytesRequest, FileRequest, FilesList, PurposeType

FILES_SUFFIX = "/files"
FILE_FIELD = "file"
PURPOSE_FIELD = "purpose"


def purpose_value(purpose: Union[PurposeType, str]) -> str:
    return purpose.value if isinstance(purpose, PurposeType) else str(purpose)


class FilesMixin:
    """File operations; expects to be combined with ``ClientCore``."""

    def _upload(self, name: str, content: bytes, purpose: Union[PurposeType, str]) -> File:
        form = FormBuilder()
        form.write_field(PURPOSE_FIELD, purpose_value(purpose))
        form.create_form_file(FILE_FIELD, name, content)
        request = self.new_request("POST", FILES_SUFFIX, form=form)
        return self.send_request(request, File)

    def create_file_bytes(self, request: FileBytesRequest) -> File:
        """Upload in-memory content as a file named ``request.name``."""
        return self._upload(request.name, request.bytes, request.purpose)

    def create_file(self, request: FileRequest) -> File:
        """Upload the local file at ``request.file_path``.

        Raises:
            OSError: The file cannot be read.
        """
        path = Path(request.file_path)
        content = path.read_bytes()
        return self._upload(request.file_name or path.name, content, request.purpose)

    def list_files(self) -> FilesList:
        request = self.new_request("GET", FILES_SUFFIX)
        return self.send_request(request, FilesList)

    def get_file(self, file_id: str) -> File:
        request = self.new_request("GET", f"{FILES_SUFFIX}/{file_id}")
        return self.send_request(request, File)

    def delete_file(self, file_id: str) -> None:
        request = self.new_request("DELETE", f"{FILES_SUFFIX}/{file_id}")
        self.send_request(request, None)

    def get_file_content(self, file_id: str) -> str:
        request = self.new_request("GET", f"{FILES_SUFFIX}/{file_id}/content")
        return self.send_request(request, str)


__all__ = ["FilesMixin", "FILES_SUFFIX", "purpose_value"]
