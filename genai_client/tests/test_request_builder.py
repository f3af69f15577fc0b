"""Request body encoding and multipart form assembly."""

from __future__ import annotations

import json

import pytest

from genai_client import ChatCompletionRequest
from genai_client.base.http import FormBuilder, RequestBuilder, encode_body


def test_encode_body_variants():
    assert encode_body(None) is None  # nosec B101 - test assertion
    assert encode_body(b"raw") == b"raw"  # nosec B101 - test assertion
    assert json.loads(encode_body({"a": 1})) == {"a": 1}  # nosec B101 - test assertion


def test_encode_body_model_omits_unset_fields():
    req = ChatCompletionRequest(model="m", messages=[{"role": "user", "content": "hi"}])
    body = json.loads(encode_body(req))
    assert body == {"model": "m", "messages": [{"role": "user", "content": "hi"}]}  # nosec B101 - test assertion


def test_build_json_request_sets_no_content_type():
    request = RequestBuilder().build("POST", "https://api.example.com/v1/x", {"k": "v"})
    assert request.method == "POST"  # nosec B101 - test assertion
    assert json.loads(request.content) == {"k": "v"}  # nosec B101 - test assertion
    assert "Content-Type" not in request.headers  # nosec B101 - test assertion


def test_build_request_without_body():
    request = RequestBuilder().build("GET", "https://api.example.com/v1/models")
    assert request.content == b""  # nosec B101 - test assertion


def test_build_multipart_request_closes_form():
    form = FormBuilder()
    form.write_field("purpose", "batch")
    form.create_form_file("file", "input.jsonl", b'{"a": 1}')
    request = RequestBuilder().build("POST", "https://api.example.com/v1/files", form=form)
    request.read()
    assert form.closed  # nosec B101 - test assertion
    assert request.headers["Content-Type"].startswith("multipart/form-data")  # nosec B101 - test assertion
    assert b'name="purpose"' in request.content  # nosec B101 - test assertion
    assert b'filename="input.jsonl"' in request.content  # nosec B101 - test assertion
    assert b"Content-Type: application/octet-stream" in request.content  # nosec B101 - test assertion
    with pytest.raises(ValueError):
        form.write_field("late", "x")


def test_body_and_form_are_exclusive():
    with pytest.raises(ValueError):
        RequestBuilder().build("POST", "https://api.example.com", {"a": 1}, form=FormBuilder())


def test_form_builder_exposes_copies():
    form = FormBuilder()
    form.write_field("purpose", "fine-tune")
    form.fields["purpose"] = "mutated"
    assert form.fields == {"purpose": "fine-tune"}  # nosec B101 - test assertion
    form.create_form_file("file", "a.txt", b"x", content_type="text/plain")
    assert form.files == [("file", ("a.txt", b"x", "text/plain"))]  # nosec B101 - test assertion
