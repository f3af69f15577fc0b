"""Legacy text completion endpoints (``/completions``)."""

from __future__ import annotations

from ..base.errors import CompletionStreamNotSupportedError
from ..base.streaming import StreamReader
from ..dto.completion import CompletionRequest, CompletionResponse

COMPLETIONS_SUFFIX = "/completions"


class CompletionsMixin:
    """Completion operations; expects to be combined with ``ClientCore``."""

    def create_completion(self, request: CompletionRequest) -> CompletionResponse:
        """Create a completion and wait for the whole response.

        Raises:
            CompletionStreamNotSupportedError: ``request.stream`` is set; use
                :meth:`create_completion_stream` instead.
        """
        if request.stream:
            raise CompletionStreamNotSupportedError()
        http_request = self.new_request("POST", COMPLETIONS_SUFFIX, request)
        return self.send_request(http_request, CompletionResponse, model=request.model)

    def create_completion_stream(self, request: CompletionRequest) -> StreamReader[CompletionResponse]:
        """Stream a completion; each chunk is a partial ``CompletionResponse``.

        ``stream`` is forced on; the caller's request object is left untouched.
        """
        body = request.model_copy(update={"stream": True})
        return self.send_stream_request(COMPLETIONS_SUFFIX, body, CompletionResponse, model=request.model)


__all__ = ["CompletionsMixin", "COMPLETIONS_SUFFIX"]
