"""Chat completion endpoints (``/chat/completions``)."""

from __future__ import annotations

from ..base.errors import ChatCompletionStreamNotSupportedError
from ..base.streaming import StreamReader
from ..dto.chat import ChatCompletionRequest, ChatCompletionResponse, ChatCompletionStreamResponse

CHAT_COMPLETIONS_SUFFIX = "/chat/completions"


class ChatMixin:
    """Chat operations; expects to be combined with ``ClientCore``."""

    def create_chat_completion(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """Create a chat completion and wait for the whole response.

        Raises:
            ChatCompletionStreamNotSupportedError: ``request.stream`` is set.
        """
        if request.stream:
            raise ChatCompletionStreamNotSupportedError()
        http_request = self.new_request("POST", CHAT_COMPLETIONS_SUFFIX, request)
        return self.send_request(http_request, ChatCompletionResponse, model=request.model)

    def create_chat_completion_stream(
        self, request: ChatCompletionRequest
    ) -> StreamReader[ChatCompletionStreamResponse]:
        body = request.model_copy(update={"stream": True})
        return self.send_stream_request(
            CHAT_COMPLETIONS_SUFFIX, body, ChatCompletionStreamResponse, model=request.model
        )


__all__ = ["ChatMixin", "CHAT_COMPLETIONS_SUFFIX"]
