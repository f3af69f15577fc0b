"""
Pydantic DTOs of the legacy text completion endpoint (``/completions``).

Requests serialize with unset optional fields omitted. Responses double as
stream chunks: a streamed completion sends a sequence of
``CompletionResponse`` objects, each carrying a text fragment per choice.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from .common import APIResponse, Usage


class CompletionRequest(BaseModel):
    """Request body of ``POST /completions``.

    Attributes:
        model: Target model identifier.
        prompt: A string or a list of strings (or token arrays).
        stream: Must be left unset for ``create_completion``; stream
            operations set it themselves.
    """

    model: str = Field(..., min_length=1)
    prompt: Union[str, List[str], List[int], List[List[int]], None] = None
    suffix: Optional[str] = None
    max_tokens: Optional[int] = Field(default=None, ge=0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: Optional[bool] = None
    logprobs: Optional[int] = None
    echo: Optional[bool] = None
    stop: Union[str, List[str], None] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    best_of: Optional[int] = None
    logit_bias: Optional[Dict[str, int]] = None
    seed: Optional[int] = None
    user: Optional[str] = None


class LogprobResult(BaseModel):
    tokens: List[str] = []
    token_logprobs: List[Optional[float]] = []
    top_logprobs: List[Optional[Dict[str, float]]] = []
    text_offset: List[int] = []


class CompletionChoice(BaseModel):
    text: str = ""
    index: int = 0
    finish_reason: Optional[str] = None
    logprobs: Optional[LogprobResult] = None


class CompletionResponse(APIResponse):
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[CompletionChoice] = []
    usage: Optional[Usage] = None

    def text(self) -> str:
        """Concatenated text of all choices (first choice first)."""
        return "".join(c.text for c in self.choices)


__all__ = [
    "CompletionRequest",
    "LogprobResult",
    "CompletionChoice",
    "CompletionResponse",
]

