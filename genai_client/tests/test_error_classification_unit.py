from __future__ import annotations

import types

import httpx

from genai_client.base.errors import (
    APIError,
    ChatCompletionStreamNotSupportedError,
    ErrorCode,
    RequestError,
    TooManyEmptyStreamMessagesError,
    UploadBatchFileError,
    classify_exception,
)


def test_classify_library_errors():
    assert classify_exception(TooManyEmptyStreamMessagesError(300)) is ErrorCode.STREAM  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(ChatCompletionStreamNotSupportedError()) is ErrorCode.UNSUPPORTED  # nosec B101 - assert is appropriate in unit tests


def test_classify_api_and_request_errors_by_status():
    assert classify_exception(APIError(message="slow down", http_status_code=429)) is ErrorCode.RATE_LIMIT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(RequestError(http_status_code=401)) is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(RequestError(http_status_code=599)) is ErrorCode.SERVER_ERROR  # nosec B101 - assert is appropriate in unit tests


def test_classify_http_status_mapping():
    # Direct attr
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND  # nosec B101 - assert is appropriate in unit tests
    # response.status_code
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorCode.UNAVAILABLE  # nosec B101 - assert is appropriate in unit tests


def test_classify_transport_errors():
    request = httpx.Request("GET", "https://api.example.com")
    assert classify_exception(httpx.ReadTimeout("read", request=request)) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(httpx.RemoteProtocolError("eof", request=request)) is ErrorCode.TRANSIENT  # nosec B101 - assert is appropriate in unit tests


def test_classify_upload_error_uses_cause():
    try:
        try:
            raise APIError(message="bad key", http_status_code=401)
        except APIError as exc:
            raise UploadBatchFileError() from exc
    except UploadBatchFileError as wrapped:
        assert classify_exception(wrapped) is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(UploadBatchFileError()) is ErrorCode.UNKNOWN  # nosec B101 - assert is appropriate in unit tests


def test_classify_heuristics():
    assert classify_exception(Exception("request timed out")) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("invalid api key")) is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN  # nosec B101 - assert is appropriate in unit tests


def test_api_error_str_without_status():
    assert str(APIError(message="stream broke")) == "error, stream broke"  # nosec B101 - assert is appropriate in unit tests
    assert APIError(message="x").status_code is None  # nosec B101 - assert is appropriate in unit tests


def test_error_code_for_status():
    assert ErrorCode.for_status(409) is ErrorCode.CONFLICT  # nosec B101 - assert is appropriate in unit tests
    assert ErrorCode.for_status(503) is ErrorCode.UNAVAILABLE  # nosec B101 - assert is appropriate in unit tests
    assert ErrorCode.for_status(507) is ErrorCode.SERVER_ERROR  # nosec B101 - unmapped 5xx
    assert ErrorCode.for_status(418) is None  # nosec B101 - unmapped 4xx has no category
    assert classify_exception(RequestError(http_status_code=418)) is ErrorCode.UNKNOWN  # nosec B101 - assert is appropriate in unit tests
