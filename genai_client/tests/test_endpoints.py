"""Non-streaming endpoints: models, completions, chat and embeddings."""

from __future__ import annotations

import json

import httpx
import pytest
from pydantic import ValidationError

from genai_client import (
    ChatCompletionRequest,
    CompletionRequest,
    EmbeddingRequest,
)


def test_list_and_get_models(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v1/models":
            return httpx.Response(200, json={"object": "list", "data": [{"id": "gpt-4o-mini", "owned_by": "system"}]})
        return httpx.Response(200, json={"id": "gpt-4o-mini", "object": "model", "created": 1, "owned_by": "system"})

    client, transport = make_client(handler)
    models = client.list_models()
    assert [m.id for m in models.data] == ["gpt-4o-mini"]  # nosec B101 - test assertion
    model = client.get_model("gpt-4o-mini")
    assert model.owned_by == "system"  # nosec B101 - test assertion
    assert transport.last.url.path == "/v1/models/gpt-4o-mini"  # nosec B101 - test assertion


def test_create_completion(make_client):
    response = {
        "id": "cmpl-1",
        "object": "text_completion",
        "created": 1,
        "model": "gpt-3.5-turbo-instruct",
        "choices": [{"text": "Hello there", "index": 0, "finish_reason": "stop"}],
        "usage": {"prompt_tokens": 2, "completion_tokens": 2, "total_tokens": 4},
    }
    client, transport = make_client(lambda r: httpx.Response(200, json=response))
    result = client.create_completion(
        CompletionRequest(model="gpt-3.5-turbo-instruct", prompt="Say hello", max_tokens=5)
    )
    assert result.text() == "Hello there"  # nosec B101 - test assertion
    assert result.usage.total_tokens == 4  # nosec B101 - test assertion
    sent = json.loads(transport.last.content)
    assert sent == {"model": "gpt-3.5-turbo-instruct", "prompt": "Say hello", "max_tokens": 5}  # nosec B101 - test assertion


def test_create_chat_completion(make_client):
    response = {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 1,
        "model": "gpt-4o-mini",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": "Hi!"}, "finish_reason": "stop"}
        ],
        "usage": {"prompt_tokens": 5, "completion_tokens": 1, "total_tokens": 6},
        "service_tier": "default",
    }
    client, transport = make_client(lambda r: httpx.Response(200, json=response))
    result = client.create_chat_completion(
        ChatCompletionRequest(
            model="gpt-4o-mini",
            messages=[{"role": "system", "content": "Be brief."}, {"role": "user", "content": "Hello"}],
        )
    )
    assert result.choices[0].message.content == "Hi!"  # nosec B101 - test assertion
    # Fields the models do not declare are kept.
    assert result.model_extra["service_tier"] == "default"  # nosec B101 - test assertion
    sent = json.loads(transport.last.content)
    assert transport.last.url.path == "/v1/chat/completions"  # nosec B101 - test assertion
    assert [m["role"] for m in sent["messages"]] == ["system", "user"]  # nosec B101 - test assertion
    assert "stream" not in sent  # nosec B101 - test assertion


def test_create_embeddings(make_client):
    response = {
        "object": "list",
        "data": [
            {"object": "embedding", "embedding": [0.1, -0.2], "index": 0},
            {"object": "embedding", "embedding": [0.3, 0.4], "index": 1},
        ],
        "model": "text-embedding-ada-002",
        "usage": {"prompt_tokens": 4, "total_tokens": 4},
    }
    client, transport = make_client(lambda r: httpx.Response(200, json=response))
    result = client.create_embeddings(
        EmbeddingRequest(model="text-embedding-ada-002", input=["first", "second"])
    )
    assert [e.index for e in result.data] == [0, 1]  # nosec B101 - test assertion
    assert result.data[1].embedding == [0.3, 0.4]  # nosec B101 - test assertion
    assert json.loads(transport.last.content)["input"] == ["first", "second"]  # nosec B101 - test assertion


def test_request_validation_happens_before_sending():
    with pytest.raises(ValidationError):
        ChatCompletionRequest(model="gpt-4o-mini", messages=[])
    with pytest.raises(ValidationError):
        CompletionRequest(model="", prompt="x")
    with pytest.raises(ValidationError):
        ChatCompletionRequest(model="m", messages=[{"role": "user", "content": "x"}], temperature=3.0)
