"""DTOs of the ``/models`` endpoints."""

from __future__ import annotations

from typing import List, Optional

from .common import APIResponse


class Model(APIResponse):
    id: str
    object: str = "model"
    created: int = 0
    owned_by: str = ""
    root: Optional[str] = None
    parent: Optional[str] = None


class ModelsList(APIResponse):
    object: str = "list"
    data: List[Model] = []


__all__ = ["Model", "ModelsList"]
