"""Client building blocks: the request core and one mixin per API area."""

from .batches import BatchesMixin
from .chat import ChatMixin
from .completions import CompletionsMixin
from .core import ClientCore, decode_response, handle_error_resp
from .embeddings import EmbeddingsMixin
from .files import FilesMixin
from .models import ModelsMixin

__all__ = [
    "ClientCore",
    "decode_response",
    "handle_error_resp",
    "ModelsMixin",
    "CompletionsMixin",
    "ChatMixin",
    "EmbeddingsMixin",
    "FilesMixin",
    "BatchesMixin",
]
