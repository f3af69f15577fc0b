"""Buffer for error bytes seen while reading a stream.

Stream bodies may carry an error envelope instead of (or after) data events,
sometimes split across several lines. Bytes are buffered as they arrive and
decoded only when the reader asks for them, so partial envelopes never fail
early.
"""
from __future__ import annotations

import io
from typing import Optional

from pydantic import ValidationError

from .errors import ErrorResponse


class ErrorAccumulator:
    """Collect raw error bytes and decode them into an ``ErrorResponse``."""

    def __init__(self) -> None:
        self._buffer = io.BytesIO()

    def write(self, data: bytes) -> None:
        self._buffer.write(data)

    def __len__(self) -> int:
        return self._buffer.getbuffer().nbytes

    def getvalue(self) -> bytes:
        return self._buffer.getvalue()

    def unmarshal_error(self) -> Optional[ErrorResponse]:
        """Decode the buffered bytes.

        Returns:
            The decoded envelope, or ``None`` when nothing was buffered or the
            bytes are not a JSON object.
        """
        if len(self) == 0:
            return None
        try:
            return ErrorResponse.model_validate_json(self._buffer.getvalue())
        except ValidationError:
            return None


__all__ = ["ErrorAccumulator"]
