"""JSON encoding of request bodies and decoding of response bodies."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from qso.exceptions import DeserializationError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(target_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target_type)


def encode_body(body: BaseModel | Sequence[BaseModel]) -> str:
    """Serialize a request model, or a list of them, to a JSON string.

    Fields are written under their aliases and None values are omitted.
    """
    if isinstance(body, BaseModel):
        return body.model_dump_json(by_alias=True, exclude_none=True)
    adapter = _adapter(list[type(body[0])]) if body else _adapter(list[Any])
    return adapter.dump_json(list(body), by_alias=True, exclude_none=True).decode()


def encode_value(value: Any) -> str:
    """Serialize a plain JSON value (string, list of strings, number...)."""
    return _adapter(type(value)).dump_json(value).decode()


def decode_body(raw: str, target_type: type[T] | Any) -> T:
    """Parse ``raw`` JSON into ``target_type``.

    ``target_type`` may be a pydantic model, a generic such as
    ``list[Summoner]``, or a plain type such as ``str``.

    Raises:
        DeserializationError: If the body is not JSON or does not match.
    """
    try:
        return _adapter(target_type).validate_json(raw)
    except ValidationError as e:
        raise DeserializationError(
            f"Could not deserialize response as {_type_name(target_type)}: {e}"
        ) from e


def _type_name(target_type: Any) -> str:
    if isinstance(target_type, type):
        return target_type.__name__
    return repr(target_type)
