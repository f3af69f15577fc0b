"""Request plumbing shared by every client operation.

Summary:
- Build requests through :class:`RequestBuilder` against ``full_url``.
- Apply the header rules of the configured API flavor.
- Dispatch through the configured ``httpx.Client`` (or the shared pool).
- Decode successes into DTOs / raw text; decode failures into
  :class:`APIError` or :class:`RequestError`.
- Open streaming requests and hand them to :class:`StreamReader`.

Errors & Observability:
- Failed statuses raise; transport exceptions from ``httpx`` propagate
  unchanged after being logged.
- Every call emits ``request.end`` or ``request.error`` with status, latency
  and the normalized ``error_code``. The auth token is never logged.

Endpoint mixins in this package only decide method, path, body and result
type; everything else lives here.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional, Type, TypeVar, Union, overload

import httpx
from pydantic import BaseModel, ValidationError

from ..base.errors import APIError, ErrorResponse, GenAIError, RequestError, classify_exception
from ..base.http import STREAM_PURPOSE, FormBuilder, RequestBuilder, get_httpx_client
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.streaming import StreamReader
from ..config import APIType, ClientConfig
from ..config.defaults import (
    AZURE_API_KEY_HEADER,
    AZURE_API_PREFIX,
    AZURE_DEPLOYMENTS_PREFIX,
    ORGANIZATION_HEADER,
)
from ..dto.common import APIResponse

REQUEST_PURPOSE = "request"
JSON_ACCEPT = "application/json; charset=utf-8"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"

ModelT = TypeVar("ModelT", bound=BaseModel)
ChunkT = TypeVar("ChunkT", bound=BaseModel)


def is_failure_status(status_code: int) -> bool:
    """Return True for statuses outside ``[200, 400)``."""
    return status_code < 200 or status_code >= 400


@overload
def decode_response(response: httpx.Response, result_type: None) -> None: ...
@overload
def decode_response(response: httpx.Response, result_type: Type[str]) -> str: ...
@overload
def decode_response(response: httpx.Response, result_type: Type[ModelT]) -> ModelT: ...


def decode_response(response: httpx.Response, result_type: Any) -> Any:
    """Decode a successful response body.

    Parameters:
        response: A response whose body has been read.
        result_type: ``None`` to discard the body, ``str`` for the raw text, or
            a pydantic model class to validate the JSON body into.

    Returns:
        ``None``, the body text, or the validated model. Models deriving from
        :class:`APIResponse` also receive the response headers.
    """
    if result_type is None:
        return None
    if result_type is str:
        return response.text
    result = result_type.model_validate_json(response.content)
    if isinstance(result, APIResponse):
        result.set_header(response.headers)
    return result


def handle_error_resp(response: httpx.Response) -> GenAIError:
    """Build the exception describing a failed response.

    Returns:
        :class:`APIError` when the body is an error envelope carrying an
        ``error`` object; :class:`RequestError` otherwise (``err`` holds the
        decoding failure, if any).
    """
    try:
        err_res = ErrorResponse.model_validate_json(response.content)
    except ValidationError as exc:
        return RequestError(http_status_code=response.status_code, err=exc)
    if err_res.error is None:
        return RequestError(http_status_code=response.status_code, err=None)
    return APIError.from_body(err_res.error, response.status_code)


class ClientCore:
    """Configuration-bound request builder, dispatcher and decoder."""

    def __init__(self, config: ClientConfig) -> None:
        self._config = config
        self._request_builder = RequestBuilder()
        self._logger = get_logger("genai.client")
        self._stream_logger = get_logger("genai.stream")

    @property
    def config(self) -> ClientConfig:
        return self._config

    # ---- URLs ----
    def full_url(self, suffix: str) -> str:
        """Return the absolute URL of an API path such as ``/models``.

        Azure-style flavors address ``/openai/deployments/{engine}{suffix}``
        and append the ``api-version`` query parameter; a query string already
        present in ``suffix`` is preserved after it.
        """
        cfg = self._config
        if cfg.api_type.is_azure:
            base_url = cfg.base_url.rstrip("/")
            path, _, query = suffix.partition("?")
            url = (
                f"{base_url}/{AZURE_API_PREFIX}/{AZURE_DEPLOYMENTS_PREFIX}/{cfg.engine}{path}"
                f"?api-version={cfg.api_version}"
            )
            return f"{url}&{query}" if query else url
        return f"{cfg.base_url}{suffix}"

    # ---- Request construction ----
    def new_request(
        self,
        method: str,
        suffix: str,
        body: Any = None,
        *,
        form: Optional[FormBuilder] = None,
    ) -> httpx.Request:
        return self._request_builder.build(method, self.full_url(suffix), body, form=form)

    def new_stream_request(self, method: str, suffix: str, body: Any = None) -> httpx.Request:
        """Build a request for an SSE endpoint with the streaming header set."""
        request = self._request_builder.build(method, self.full_url(suffix), body)
        request.headers["Content-Type"] = "application/json"
        request.headers["Accept"] = "text/event-stream"
        request.headers["Cache-Control"] = "no-cache"
        request.headers["Connection"] = "keep-alive"
        self._apply_auth_headers(request)
        return request

    def _apply_auth_headers(self, request: httpx.Request) -> None:
        cfg = self._config
        if cfg.api_type is APIType.AZURE:
            request.headers[AZURE_API_KEY_HEADER] = cfg.auth_token
        else:
            request.headers["Authorization"] = f"Bearer {cfg.auth_token}"
        if cfg.org_id:
            request.headers[ORGANIZATION_HEADER] = cfg.org_id

    def _prepare_headers(self, request: httpx.Request) -> None:
        request.headers["Accept"] = JSON_ACCEPT
        self._apply_auth_headers(request)
        # Multipart uploads arrive with their boundary content type already set.
        if "Content-Type" not in request.headers:
            request.headers["Content-Type"] = JSON_CONTENT_TYPE

    # ---- Dispatch ----
    def _http_client(self, *, stream: bool = False) -> httpx.Client:
        if self._config.http_client is not None:
            return self._config.http_client
        return get_httpx_client(None, purpose=STREAM_PURPOSE if stream else REQUEST_PURPOSE)

    def _context(self, request: httpx.Request, model: Optional[str], *, stream: bool = False) -> LogContext:
        return LogContext.for_request(request, api_type=self._config.api_type.value, model=model, stream=stream)

    def _log_failure(self, event: str, ctx: LogContext, exc: Exception, *, status: Optional[int], t0: float) -> None:
        normalized_log_event(
            self._logger,
            event,
            ctx,
            phase="finalize",
            status=status,
            latency_ms=(time.perf_counter() - t0) * 1000.0,
            error_code=classify_exception(exc).value,
            error=str(exc),
            level=logging.WARNING,
        )

    @overload
    def send_request(self, request: httpx.Request, result_type: None = None, *, model: Optional[str] = None) -> None: ...
    @overload
    def send_request(self, request: httpx.Request, result_type: Type[str], *, model: Optional[str] = None) -> str: ...
    @overload
    def send_request(self, request: httpx.Request, result_type: Type[ModelT], *, model: Optional[str] = None) -> ModelT: ...

    def send_request(
        self,
        request: httpx.Request,
        result_type: Union[Type[Any], None] = None,
        *,
        model: Optional[str] = None,
    ) -> Any:
        """Send ``request`` and decode the response into ``result_type``.

        Raises:
            APIError: The API answered with an error envelope.
            RequestError: The API failed without a decodable envelope.
            httpx.HTTPError: Transport failures, unchanged.
            pydantic.ValidationError: A success body did not match ``result_type``.
        """
        self._prepare_headers(request)
        ctx = self._context(request, model)
        normalized_log_event(self._logger, "request.start", ctx, phase="start", level=logging.DEBUG)
        t0 = time.perf_counter()
        try:
            response = self._http_client().send(request)
        except httpx.HTTPError as exc:
            self._log_failure("request.error", ctx, exc, status=None, t0=t0)
            raise

        ctx.bind_response(response)
        if is_failure_status(response.status_code):
            error = handle_error_resp(response)
            self._log_failure("request.error", ctx, error, status=response.status_code, t0=t0)
            raise error

        result = decode_response(response, result_type)
        normalized_log_event(
            self._logger,
            "request.end",
            ctx,
            phase="finalize",
            status=response.status_code,
            latency_ms=(time.perf_counter() - t0) * 1000.0,
        )
        return result

    def send_stream_request(
        self,
        suffix: str,
        body: Any,
        chunk_type: Type[ChunkT],
        *,
        model: Optional[str] = None,
    ) -> StreamReader[ChunkT]:
        """POST ``body`` to an SSE endpoint and return a reader over its chunks.

        The HTTP status is checked before the reader is created; failures are
        raised exactly like :meth:`send_request` failures.
        """
        request = self.new_stream_request("POST", suffix, body)
        ctx = self._context(request, model, stream=True)
        normalized_log_event(self._stream_logger, "stream.start", ctx, phase="start", level=logging.DEBUG)
        t0 = time.perf_counter()
        try:
            response = self._http_client(stream=True).send(request, stream=True)
        except httpx.HTTPError as exc:
            self._log_failure("stream.error", ctx, exc, status=None, t0=t0)
            raise

        ctx.bind_response(response)
        if is_failure_status(response.status_code):
            try:
                response.read()
            finally:
                response.close()
            error = handle_error_resp(response)
            self._log_failure("stream.error", ctx, error, status=response.status_code, t0=t0)
            raise error

        return StreamReader(
            response,
            chunk_type,
            empty_messages_limit=self._config.empty_messages_limit,
            ctx=ctx,
            logger=self._stream_logger,
        )


__all__ = [
    "ClientCore",
    "decode_response",
    "handle_error_resp",
    "is_failure_status",
]
