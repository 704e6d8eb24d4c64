from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from .decode import ObjectDecoder
from .errors import DecodeError
from .json_utils import JSONObject, json_type_name, load_json_bytes

T = TypeVar("T")


def from_object_payload(decoder: ObjectDecoder[T], raw: bytes) -> T:
    """Decode one value from bytes holding a JSON object.

    Raises InvalidJsonError for malformed payloads and EXPECTED_OBJECT when the
    top level is anything other than an object.
    """
    value = load_json_bytes(raw)
    if not isinstance(value, dict):
        raise DecodeError.expected_object(json_type_name(value))
    return decoder(value)


def from_array_payload(decoder: ObjectDecoder[T], raw: bytes) -> list[T]:
    """Decode a list of values from bytes holding a JSON array of objects.

    Raises EXPECTED_ARRAY when the top level is not an array or when any
    element of the array is not an object.
    """
    value = load_json_bytes(raw)
    if not isinstance(value, list):
        raise DecodeError.expected_array(json_type_name(value))
    objects: list[JSONObject] = []
    for item in value:
        if not isinstance(item, dict):
            raise DecodeError.expected_array(f"array containing {json_type_name(item)}")
        objects.append(item)
    return from_objects(decoder, objects)


def from_objects(decoder: ObjectDecoder[T], objects: Sequence[JSONObject]) -> list[T]:
    """Decode each object in order; the first failure aborts the whole batch."""
    return [decoder(obj) for obj in objects]


__all__ = [
    "from_array_payload",
    "from_object_payload",
    "from_objects",
]
