"""Model listing endpoints."""

from __future__ import annotations

from ..dto.model import Model, ModelsList

MODELS_SUFFIX = "/models"


class ModelsMixin:
    """``/models`` operations; expects to be combined with ``ClientCore``."""

    def list_models(self) -> ModelsList:
        request = self.new_request("GET", MODELS_SUFFIX)
        return self.send_request(request, ModelsList)

    def get_model(self, model_id: str) -> Model:
        request = self.new_request("GET", f"{MODELS_SUFFIX}/{model_id}")
        return self.send_request(request, Model, model=model_id)


__all__ = ["ModelsMixin", "MODELS_SUFFIX"]
