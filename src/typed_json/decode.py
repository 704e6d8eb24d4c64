from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeVar

from .errors import DecodeError
from .json_utils import (
    JSONArray,
    JSONObject,
    JSONTypeError,
    JSONValue,
    narrow_json_to_bool,
    narrow_json_to_dict,
    narrow_json_to_float,
    narrow_json_to_int,
    narrow_json_to_list,
    narrow_json_to_str,
)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

Narrower = Callable[[JSONValue], T]


class ObjectDecoder(Protocol[T_co]):
    """Anything that builds one typed value from one JSON object.

    Implementations call the field decoders below once per field and let the
    first DecodeError propagate.
    """

    def __call__(self, obj: JSONObject, /) -> T_co: ...


def _narrow_field(obj: JSONObject, key: str, narrow: Narrower[T]) -> T:
    try:
        return narrow(obj[key])
    except JSONTypeError as exc:
        raise DecodeError.type_mismatch(key, str(exc)) from exc


def decode_required(obj: JSONObject, key: str, narrow: Narrower[T]) -> T:
    """Extract a required field and narrow it with ``narrow``.

    A missing key and a key holding JSON null both raise MISSING_KEY; a value of
    the wrong type raises TYPE_MISMATCH.
    """
    if obj.get(key) is None:
        raise DecodeError.missing_key(key)
    return _narrow_field(obj, key, narrow)


def decode_optional(obj: JSONObject, key: str, narrow: Narrower[T]) -> T | None:
    """Extract an optional field and narrow it with ``narrow``.

    Returns None if the key is missing or null. Raises TYPE_MISMATCH if present
    but of the wrong type.
    """
    if obj.get(key) is None:
        return None
    return _narrow_field(obj, key, narrow)


# -----------------------------------------------------------------------------
# Typed shorthands
# -----------------------------------------------------------------------------


def require_str(obj: JSONObject, key: str) -> str:
    """Extract required string field. Raises DecodeError if missing or not a string."""
    return decode_required(obj, key, narrow_json_to_str)


def require_int(obj: JSONObject, key: str) -> int:
    """Extract required int field. Raises DecodeError if missing or not an int (excludes bool)."""
    return decode_required(obj, key, narrow_json_to_int)


def require_float(obj: JSONObject, key: str) -> float:
    """Extract required float field (accepts int). Raises DecodeError if missing or not a number."""
    return decode_required(obj, key, narrow_json_to_float)


def require_bool(obj: JSONObject, key: str) -> bool:
    """Extract required bool field. Raises DecodeError if missing or not a bool."""
    return decode_required(obj, key, narrow_json_to_bool)


def require_list(obj: JSONObject, key: str) -> JSONArray:
    """Extract required array field. Raises DecodeError if missing or not an array."""
    return decode_required(obj, key, narrow_json_to_list)


def require_object(obj: JSONObject, key: str) -> JSONObject:
    """Extract required object field. Raises DecodeError if missing or not an object."""
    return decode_required(obj, key, narrow_json_to_dict)


def optional_str(obj: JSONObject, key: str) -> str | None:
    """Extract optional string field. Returns None if missing or null."""
    return decode_optional(obj, key, narrow_json_to_str)


def optional_int(obj: JSONObject, key: str) -> int | None:
    """Extract optional int field. Returns None if missing or null."""
    return decode_optional(obj, key, narrow_json_to_int)


def optional_float(obj: JSONObject, key: str) -> float | None:
    """Extract optional float field (accepts int). Returns None if missing or null."""
    return decode_optional(obj, key, narrow_json_to_float)


def optional_bool(obj: JSONObject, key: str) -> bool | None:
    """Extract optional bool field. Returns None if missing or null."""
    return decode_optional(obj, key, narrow_json_to_bool)


def optional_list(obj: JSONObject, key: str) -> JSONArray | None:
    """Extract optional array field. Returns None if missing or null."""
    return decode_optional(obj, key, narrow_json_to_list)


def optional_object(obj: JSONObject, key: str) -> JSONObject | None:
    """Extract optional object field. Returns None if missing or null."""
    return decode_optional(obj, key, narrow_json_to_dict)


__all__ = [
    "Narrower",
    "ObjectDecoder",
    "decode_optional",
    "decode_required",
    "optional_bool",
    "optional_float",
    "optional_int",
    "optional_list",
    "optional_object",
    "optional_str",
    "require_bool",
    "require_float",
    "require_int",
    "require_list",
    "require_object",
    "require_str",
]
