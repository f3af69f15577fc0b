"""Incremental Server-Sent-Events reader.

Purpose:
    Wrap a streaming ``httpx.Response`` and yield one typed chunk per
    ``data:`` event until the ``[DONE]`` terminator, the end of the body, or
    an error.

Line handling:
    - Lines are whitespace-trimmed before inspection.
    - ``data:`` lines carry a payload; the prefix and surrounding whitespace
      are removed.
    - A payload beginning with ``{"error":`` is an error envelope sent in band.
      It is decoded on its own, without the non-data lines buffered before
      it, and raised as :class:`APIError` right away.
    - Any other line (blank keep-alives, comments, a raw JSON error body split
      over several lines) is buffered in the accumulator and counts as an
      empty message. More than ``empty_messages_limit`` of them while waiting
      for one chunk raises :class:`TooManyEmptyStreamMessagesError`.
    - At the end of the body the accumulator is decoded; a valid envelope is
      raised as :class:`APIError`, otherwise iteration simply stops.

Lifecycle:
    The reader owns the response. It closes it when the stream finishes or
    fails, on ``close()``, and when used as a context manager.
"""
from __future__ import annotations

import logging
import time
from typing import Generic, Iterator, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from ..error_accumulator import ErrorAccumulator
from ..errors import APIError, TooManyEmptyStreamMessagesError, classify_exception
from ..logging import LogContext, get_logger, normalized_log_event

DATA_PREFIX = "data:"
DONE_SENTINEL = "[DONE]"
ERROR_PAYLOAD_PREFIX = '{"error":'
DEFAULT_EMPTY_MESSAGES_LIMIT = 300

ChunkT = TypeVar("ChunkT", bound=BaseModel)


class StreamReader(Generic[ChunkT]):
    """Iterator of typed chunks decoded from an SSE response body.

    Parameters:
        response: An open streaming ``httpx.Response`` (sent with
            ``stream=True``) whose status has already been checked.
        chunk_type: Pydantic model each ``data:`` payload is validated into.
        empty_messages_limit: Maximum number of consecutive non-data lines
            tolerated while waiting for one chunk.
        ctx: Optional logging context of the originating request.
    """

    def __init__(
        self,
        response: httpx.Response,
        chunk_type: Type[ChunkT],
        *,
        empty_messages_limit: int = DEFAULT_EMPTY_MESSAGES_LIMIT,
        ctx: Optional[LogContext] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._response = response
        self._chunk_type = chunk_type
        self._empty_messages_limit = empty_messages_limit
        self._lines: Iterator[str] = response.iter_lines()
        self._accumulator = ErrorAccumulator()
        self._ctx = ctx
        self._logger = logger or get_logger("genai.stream")
        self._finished = False
        self._emitted = 0
        self._t0 = time.perf_counter()

    @property
    def response(self) -> httpx.Response:
        return self._response

    @property
    def emitted(self) -> int:
        """Number of chunks yielded so far."""
        return self._emitted

    def __iter__(self) -> "StreamReader[ChunkT]":
        return self

    def __next__(self) -> ChunkT:
        if self._finished:
            raise StopIteration
        try:
            chunk = self._process_lines()
        except StopIteration:
            self._finish()
            raise
        except Exception as exc:
            self._finish(exc)
            raise
        self._emitted += 1
        return chunk

    def recv(self) -> Optional[ChunkT]:
        """Return the next chunk, or ``None`` once the stream is exhausted."""
        return next(self, None)

    def _process_lines(self) -> ChunkT:
        empty_messages = 0
        for raw_line in self._lines:
            line = raw_line.strip()
            if line.startswith(DATA_PREFIX):
                payload = line[len(DATA_PREFIX):].strip()
                if payload.startswith(ERROR_PAYLOAD_PREFIX):
                    # Decoded apart from earlier non-data lines buffered for this chunk.
                    in_band = ErrorAccumulator()
                    in_band.write(payload.encode("utf-8"))
                    self._raise_accumulated_error(in_band)
                    self._accumulator.write(payload.encode("utf-8"))
                    continue
                if payload == DONE_SENTINEL:
                    raise StopIteration
                return self._chunk_type.model_validate_json(payload)

            self._accumulator.write(line.encode("utf-8"))
            empty_messages += 1
            if empty_messages > self._empty_messages_limit:
                raise TooManyEmptyStreamMessagesError(self._empty_messages_limit)

        self._raise_accumulated_error()
        raise StopIteration

    def _raise_accumulated_error(self, accumulator: Optional[ErrorAccumulator] = None) -> None:
        source = accumulator if accumulator is not None else self._accumulator
        decoded = source.unmarshal_error()
        if decoded is not None and decoded.error is not None:
            raise APIError.from_body(decoded.error, self._response.status_code)

    def _finish(self, error: Optional[Exception] = None) -> None:
        if self._finished:
            return
        self._finished = True
        self._response.close()
        latency_ms = (time.perf_counter() - self._t0) * 1000.0
        if error is None:
            normalized_log_event(
                self._logger,
                "stream.finalize",
                self._ctx,
                phase="finalize",
                status=self._response.status_code,
                latency_ms=latency_ms,
                emitted=self._emitted,
            )
            return
        normalized_log_event(
            self._logger,
            "stream.error",
            self._ctx,
            phase="finalize",
            status=self._response.status_code,
            latency_ms=latency_ms,
            emitted=self._emitted,
            error_code=classify_exception(error).value,
            error=str(error),
            level=logging.WARNING,
        )

    def close(self) -> None:
        """Stop reading and release the underlying response."""
        self._finish()

    def __enter__(self) -> "StreamReader[ChunkT]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = [
    "StreamReader",
    "DATA_PREFIX",
    "DONE_SENTINEL",
    "DEFAULT_EMPTY_MESSAGES_LIMIT",
]
