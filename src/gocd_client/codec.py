"""JSON encoding and typed decoding shared by every request."""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, StrictStr, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import DeserializeError, SerializationError

T = TypeVar("T")


class DeleteResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    message: StrictStr


@lru_cache(maxsize=128)
def adapter_for(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def encode_payload(payload: Any) -> bytes:
    """Serialize ``payload`` to JSON bytes, refusing NaN and infinities."""
    adapter = adapter_for(type(payload))
    try:
        _reject_non_finite(adapter.dump_python(payload, by_alias=True))
        return adapter.dump_json(payload, by_alias=True)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise SerializationError(f"failed to encode payload: '{exc}'") from exc


def decode_body(body: bytes, target: type[T]) -> T:
    try:
        return adapter_for(target).validate_json(body)
    except ValidationError as exc:
        raise DeserializeError(f"failed to parse response body: '{_first_error(exc)}'") from exc


def decode_delete_message(body: bytes) -> str:
    return decode_body(body, DeleteResponse).message


def _reject_non_finite(value: Any) -> None:
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"non-finite float {value!r} is not valid JSON")
    if isinstance(value, dict):
        for item in value.values():
            _reject_non_finite(item)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            _reject_non_finite(item)


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    return f"{location}: {first.get('msg', 'invalid value')}"


__all__ = ["DeleteResponse", "adapter_for", "decode_body", "decode_delete_message", "encode_payload"]
