"""Turn a payload into an ``httpx.Request``.

Bodies are encoded here and nowhere else:

- ``None``: no body.
- ``bytes``: sent verbatim.
- pydantic models: JSON with unset optional fields omitted.
- any other value: ``json.dumps``.
- a :class:`FormBuilder`: multipart/form-data; ``httpx`` sets the boundary.

The builder sets no content type for JSON bodies; the client core applies its
own header rules afterwards and only fills in ``Content-Type`` when absent.
"""
from __future__ import annotations

import json
from typing import Any, Mapping, Optional

import httpx
from pydantic import BaseModel

from .form_builder import FormBuilder


def encode_body(body: Any) -> Optional[bytes]:
    """Encode ``body`` into request bytes (``None`` for an empty body)."""
    if body is None:
        return None
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if isinstance(body, BaseModel):
        return body.model_dump_json(exclude_none=True).encode("utf-8")
    return json.dumps(body, ensure_ascii=False).encode("utf-8")


class RequestBuilder:
    """Build ``httpx.Request`` objects from method, URL and payload."""

    def build(
        self,
        method: str,
        url: str,
        body: Any = None,
        *,
        form: Optional[FormBuilder] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> httpx.Request:
        if form is not None:
            if body is not None:
                raise ValueError("a request carries either a body or a form, not both")
            form.close()
            return httpx.Request(method, url, data=form.fields, files=form.files, headers=headers)
        return httpx.Request(method, url, content=encode_body(body), headers=headers)


__all__ = ["RequestBuilder", "encode_body"]
