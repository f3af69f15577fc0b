"""SSE stream reader behavior.

Covers:
- Typed chunks until ``[DONE]``; no reads after the terminator.
- Keep-alive and comment lines are tolerated up to the empty message limit.
- In-band ``data: {"error": ...}`` events and raw error bodies at end of stream.
- Streaming request headers and the ``stream`` flag in the body.
- Non-success statuses fail before a reader is returned.
"""

from __future__ import annotations

import json

import httpx
import pytest

from genai_client import (
    APIError,
    ChatCompletionRequest,
    ChatCompletionStreamNotSupportedError,
    ChatCompletionStreamResponse,
    CompletionRequest,
    CompletionStreamNotSupportedError,
    RequestError,
    TooManyEmptyStreamMessagesError,
)
from genai_client.base.streaming import StreamReader


def _chunk(text: str, index: int = 0) -> str:
    payload = {
        "id": "chatcmpl-1",
        "object": "chat.completion.chunk",
        "created": 1,
        "model": "gpt-4o-mini",
        "choices": [{"index": index, "delta": {"content": text}, "finish_reason": None}],
    }
    return "data: " + json.dumps(payload)


def _sse(*lines: str) -> bytes:
    return ("\n".join(lines) + "\n").encode("utf-8")


def _chat_request() -> ChatCompletionRequest:
    return ChatCompletionRequest(model="gpt-4o-mini", messages=[{"role": "user", "content": "hi"}])


def _stream_reader(body: bytes, limit: int = 300) -> StreamReader[ChatCompletionStreamResponse]:
    transport = httpx.MockTransport(lambda r: httpx.Response(200, content=body))
    with_client = httpx.Client(transport=transport)
    response = with_client.send(httpx.Request("POST", "https://api.example.com/x"), stream=True)
    return StreamReader(response, ChatCompletionStreamResponse, empty_messages_limit=limit)


def test_chunks_until_done(make_client):
    body = _sse(_chunk("Hel"), "", _chunk("lo"), "", "data: [DONE]", "", _chunk("ignored"))
    client, _ = make_client(lambda r: httpx.Response(200, content=body))
    with client.create_chat_completion_stream(_chat_request()) as stream:
        texts = [chunk.delta_text() for chunk in stream]
        assert texts == ["Hel", "lo"]  # nosec B101 - test assertion
        assert stream.emitted == 2  # nosec B101 - test assertion
        assert stream.recv() is None  # nosec B101 - test assertion


def test_stream_request_headers_and_body(make_client):
    client, transport = make_client(lambda r: httpx.Response(200, content=_sse("data: [DONE]")))
    stream = client.create_chat_completion_stream(_chat_request())
    list(stream)
    req = transport.last
    assert req.headers["Accept"] == "text/event-stream"  # nosec B101 - test assertion
    assert req.headers["Cache-Control"] == "no-cache"  # nosec B101 - test assertion
    assert req.headers["Connection"] == "keep-alive"  # nosec B101 - test assertion
    assert req.headers["Content-Type"] == "application/json"  # nosec B101 - test assertion
    assert req.headers["Authorization"] == "Bearer test-token"  # nosec B101 - test assertion
    assert json.loads(req.content)["stream"] is True  # nosec B101 - test assertion


def test_comment_and_blank_lines_are_skipped():
    reader = _stream_reader(_sse(": keep-alive", "", "event: message", _chunk("x"), "data: [DONE]"))
    chunks = list(reader)
    assert [c.delta_text() for c in chunks] == ["x"]  # nosec B101 - test assertion


def test_too_many_empty_messages():
    body = _sse(*(["x"] * 4), _chunk("never"))
    reader = _stream_reader(body, limit=3)
    with pytest.raises(TooManyEmptyStreamMessagesError) as info:
        next(reader)
    assert info.value.limit == 3  # nosec B101 - test assertion


def test_empty_message_counter_resets_per_chunk():
    body = _sse("", "", _chunk("a"), "", "", _chunk("b"), "data: [DONE]")
    reader = _stream_reader(body, limit=2)
    assert [c.delta_text() for c in reader] == ["a", "b"]  # nosec B101 - test assertion


def test_in_band_error_event():
    error = {"error": {"message": "model overloaded", "type": "server_error", "code": None}}
    body = _sse(_chunk("partial"), "data: " + json.dumps(error))
    reader = _stream_reader(body)
    first = next(reader)
    assert first.delta_text() == "partial"  # nosec B101 - test assertion
    with pytest.raises(APIError) as info:
        next(reader)
    assert info.value.message == "model overloaded"  # nosec B101 - test assertion
    assert info.value.type == "server_error"  # nosec B101 - test assertion


@pytest.mark.parametrize(
    "preamble",
    [
        ("event: error",),
        (": keep-alive", ""),
        ("id: 7", "retry: 1000", "event: error"),
    ],
)
def test_in_band_error_after_non_data_lines(preamble):
    error = {"error": {"message": "overloaded", "type": "server_error"}}
    body = _sse(_chunk("partial"), *preamble, "data: " + json.dumps(error), _chunk("after"))
    reader = _stream_reader(body)
    assert next(reader).delta_text() == "partial"  # nosec B101 - test assertion
    with pytest.raises(APIError) as info:
        next(reader)
    assert info.value.message == "overloaded"  # nosec B101 - test assertion
    assert info.value.http_status_code == 200  # nosec B101 - test assertion
    assert reader.response.is_closed  # nosec B101 - test assertion


def test_raw_error_body_split_over_lines():
    body = _sse(
        "{",
        '"error": {',
        '"message": "Incorrect API key provided",',
        '"type": "invalid_request_error"',
        "}",
        "}",
    )
    reader = _stream_reader(body)
    with pytest.raises(APIError) as info:
        next(reader)
    assert info.value.message == "Incorrect API key provided"  # nosec B101 - test assertion


def test_unparseable_trailing_lines_end_normally():
    reader = _stream_reader(_sse(_chunk("a"), "garbage", "more garbage"))
    assert [c.delta_text() for c in reader] == ["a"]  # nosec B101 - test assertion


def test_reader_closes_response_when_done():
    reader = _stream_reader(_sse("data: [DONE]"))
    assert list(reader) == []  # nosec B101 - test assertion
    assert reader.response.is_closed  # nosec B101 - test assertion


def test_close_releases_response():
    reader = _stream_reader(_sse(_chunk("a"), _chunk("b")))
    next(reader)
    reader.close()
    assert reader.response.is_closed  # nosec B101 - test assertion
    assert reader.recv() is None  # nosec B101 - test assertion


def test_stream_open_failure_raises_api_error(make_client):
    body = {"error": {"message": "bad request", "type": "invalid_request_error"}}
    client, _ = make_client(lambda r: httpx.Response(400, json=body))
    with pytest.raises(APIError) as info:
        client.create_chat_completion_stream(_chat_request())
    assert info.value.http_status_code == 400  # nosec B101 - test assertion


def test_stream_open_failure_without_envelope(make_client):
    client, _ = make_client(lambda r: httpx.Response(503, content=b"upstream unavailable"))
    with pytest.raises(RequestError):
        client.create_completion_stream(CompletionRequest(model="gpt-3.5-turbo-instruct", prompt="x"))


def test_completion_stream_chunks(make_client):
    chunk = {"id": "cmpl-1", "object": "text_completion", "choices": [{"text": "ok", "index": 0}]}
    body = _sse("data: " + json.dumps(chunk), "data: [DONE]")
    client, transport = make_client(lambda r: httpx.Response(200, content=body))
    stream = client.create_completion_stream(CompletionRequest(model="gpt-3.5-turbo-instruct", prompt="x"))
    assert [c.text() for c in stream] == ["ok"]  # nosec B101 - test assertion
    assert transport.last.url.path == "/v1/completions"  # nosec B101 - test assertion


def test_non_stream_methods_reject_stream_flag(make_client):
    client, transport = make_client(lambda r: httpx.Response(200, json={}))
    with pytest.raises(ChatCompletionStreamNotSupportedError):
        client.create_chat_completion(_chat_request().model_copy(update={"stream": True}))
    with pytest.raises(CompletionStreamNotSupportedError):
        client.create_completion(CompletionRequest(model="m", prompt="p", stream=True))
    assert transport.requests == []  # nosec B101 - test assertion


def test_stream_finalize_event_logged(make_client, capsys):
    client, _ = make_client(lambda r: httpx.Response(200, content=_sse(_chunk("a"), "data: [DONE]")))
    list(client.create_chat_completion_stream(_chat_request()))
    lines = [json.loads(line) for line in capsys.readouterr().err.strip().splitlines()]
    finalize = [line for line in lines if line.get("event") == "stream.finalize"]
    assert finalize and finalize[-1]["emitted"] == 1  # nosec B101 - test assertion
    assert finalize[-1]["model"] == "gpt-4o-mini"  # nosec B101 - test assertion
    assert finalize[-1]["stream"] is True  # nosec B101 - test assertion
    assert finalize[-1]["path"] == "/v1/chat/completions"  # nosec B101 - test assertion
