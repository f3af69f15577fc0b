"""JSON formatting and per-call context for the ``genai`` loggers."""

from .json_formatter import ISO, JsonFormatter
from .logging_context import REQUEST_ID_HEADER, LogContext

__all__ = ["ISO", "JsonFormatter", "LogContext", "REQUEST_ID_HEADER"]
