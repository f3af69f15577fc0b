"""Streaming primitives: the SSE reader returned by stream operations."""

from .stream_reader import (
    DATA_PREFIX,
    DEFAULT_EMPTY_MESSAGES_LIMIT,
    DONE_SENTINEL,
    StreamReader,
)

__all__ = [
    "StreamReader",
    "DATA_PREFIX",
    "DONE_SENTINEL",
    "DEFAULT_EMPTY_MESSAGES_LIMIT",
]
