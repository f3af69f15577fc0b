"""HTTP utilities package.

Exposes pooled httpx clients and the request/form builders.
"""

from .client import STREAM_PURPOSE, close_all_clients, get_httpx_client
from .form_builder import FormBuilder
from .request_builder import RequestBuilder, encode_body

__all__ = [
    "get_httpx_client",
    "close_all_clients",
    "STREAM_PURPOSE",
    "FormBuilder",
    "RequestBuilder",
    "encode_body",
]
