"""
Pydantic DTOs of the chat completion endpoint (``/chat/completions``).

Purpose
-------
Typed request and response shapes for chat calls, plus the chunk type of the
chat stream. Validation is kept to what the API itself guarantees (roles,
non-empty model and message list); everything else is passed through.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .common import APIResponse, Usage

ChatRole = Literal["system", "user", "assistant", "tool", "function", "developer"]

CHAT_ROLE_SYSTEM = "system"
CHAT_ROLE_USER = "user"
CHAT_ROLE_ASSISTANT = "assistant"
CHAT_ROLE_TOOL = "tool"


class FunctionCall(BaseModel):
    name: Optional[str] = None
    # JSON-encoded arguments; may be a fragment inside stream deltas.
    arguments: Optional[str] = None


class ToolCall(BaseModel):
    index: Optional[int] = None
    id: Optional[str] = None
    type: str = "function"
    function: FunctionCall = Field(default_factory=FunctionCall)


class ChatCompletionMessage(BaseModel):
    """A single chat message.

    ``content`` is either plain text or a list of content parts (as used for
    image inputs); it may be ``None`` on assistant messages that only carry
    tool calls.
    """

    role: ChatRole
    content: Union[str, List[Dict[str, Any]], None] = None
    name: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None
    tool_call_id: Optional[str] = None


class ChatCompletionRequest(BaseModel):
    """Request body of ``POST /chat/completions``."""

    model: str = Field(..., min_length=1)
    messages: List[ChatCompletionMessage] = Field(..., min_length=1)
    max_tokens: Optional[int] = Field(default=None, ge=0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: Optional[bool] = None
    stop: Union[str, List[str], None] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    logit_bias: Optional[Dict[str, int]] = None
    response_format: Optional[Dict[str, Any]] = None
    seed: Optional[int] = None
    tools: Optional[List[Dict[str, Any]]] = None
    tool_choice: Union[str, Dict[str, Any], None] = None
    user: Optional[str] = None


class ChatCompletionChoice(BaseModel):
    index: int = 0
    message: ChatCompletionMessage
    finish_reason: Optional[str] = None


class ChatCompletionResponse(APIResponse):
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[ChatCompletionChoice] = []
    usage: Optional[Usage] = None
    system_fingerprint: Optional[str] = None


class ChatCompletionStreamDelta(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None


class ChatCompletionStreamChoice(BaseModel):
    index: int = 0
    delta: ChatCompletionStreamDelta = Field(default_factory=ChatCompletionStreamDelta)
    finish_reason: Optional[str] = None


class ChatCompletionStreamResponse(APIResponse):
    """One chunk of a chat completion stream."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[ChatCompletionStreamChoice] = []
    usage: Optional[Usage] = None

    def delta_text(self) -> str:
        return "".join(c.delta.content or "" for c in self.choices)


__all__ = [
    "ChatRole",
    "CHAT_ROLE_SYSTEM",
    "CHAT_ROLE_USER",
    "CHAT_ROLE_ASSISTANT",
    "CHAT_ROLE_TOOL",
    "FunctionCall",
    "ToolCall",
    "ChatCompletionMessage",
    "ChatCompletionRequest",
    "ChatCompletionChoice",
    "ChatCompletionResponse",
    "ChatCompletionStreamDelta",
    "ChatCompletionStreamChoice",
    "ChatCompletionStreamResponse",
]
