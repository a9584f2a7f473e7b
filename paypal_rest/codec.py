"""JSON encoding/decoding for request payloads and response bodies.

Decoding is delegated to pydantic: any type pydantic can validate (models,
``dict``, ``list[Model]``...) may be requested as a response shape.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import BaseModel, TypeAdapter

__all__ = ["from_json", "to_json"]


@lru_cache(maxsize=256)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def from_json(text: str, shape: Any) -> Any:
    """Decode ``text`` into ``shape``.

    Raises:
        pydantic.ValidationError: When ``text`` is not valid JSON for ``shape``.
    """
    if isinstance(shape, type) and issubclass(shape, BaseModel):
        return shape.model_validate_json(text)
    return _adapter(shape).validate_json(text)


def to_json(payload: Any) -> str:
    """Serialize an outgoing payload. Strings are assumed to be JSON already."""
    if payload is None:
        return ""
    if isinstance(payload, str):
        return payload
    if isinstance(payload, BaseModel):
        return payload.model_dump_json(by_alias=True, exclude_none=True)
    return _adapter(type(payload)).dump_json(payload, by_alias=True, exclude_none=True).decode("utf-8")
