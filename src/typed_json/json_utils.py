from __future__ import annotations

from collections.abc import Mapping, Sequence
from json import JSONDecodeError
from typing import Protocol

JSONValue = dict[str, "JSONValue"] | list["JSONValue"] | str | int | float | bool | None
JSONObject = dict[str, JSONValue]
JSONArray = list[JSONValue]

# Input type for dump_json_str. Only log payloads are serialized, so object is
# broad enough for TypedDicts and dict literals with mixed value types.
_JSONInputValue = str | int | float | bool | None | Mapping[str, object] | Sequence[object]


class InvalidJsonError(ValueError):
    """Raised when a payload is not valid UTF-8 JSON text."""


class JSONTypeError(TypeError):
    """Raised when a JSON value has an unexpected type during narrowing."""


class _JsonLoads(Protocol):
    def __call__(self, s: str) -> JSONValue: ...


class _JsonDumps(Protocol):
    def __call__(
        self,
        obj: _JSONInputValue,
        *,
        separators: tuple[str, str] | None = ...,
        indent: int | None = ...,
    ) -> str: ...


def dump_json_str(value: _JSONInputValue, *, compact: bool = True) -> str:
    """Serialize a JSON-compatible value to a JSON string.

    Args:
        value: JSON-serializable value
        compact: If True (default), produce compact JSON without extra whitespace.
    """
    module = __import__("json")
    dumps: _JsonDumps = module.dumps
    if compact:
        return dumps(value, separators=(",", ":"), indent=None)
    return dumps(value, separators=None, indent=None)


def load_json_str(raw: str) -> JSONValue:
    module = __import__("json")
    loads: _JsonLoads = module.loads
    try:
        value = loads(raw)
    except (JSONDecodeError, RecursionError) as exc:
        raise InvalidJsonError("Invalid JSON payload") from exc
    if isinstance(value, (dict, list, str, int, float, bool)) or value is None:
        return value
    raise InvalidJsonError("Invalid JSON payload")


def load_json_bytes(raw: bytes) -> JSONValue:
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidJsonError("JSON payload is not valid UTF-8") from exc
    return load_json_str(text)


def json_type_name(value: JSONValue) -> str:
    """Name a JSON value by its JSON type rather than its Python type."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def narrow_json_to_dict(value: JSONValue) -> JSONObject:
    """Narrow JSONValue to dict.

    Raises JSONTypeError if value is not a dict.
    """
    if not isinstance(value, dict):
        raise JSONTypeError(f"Expected JSON object, got {json_type_name(value)}")
    return value


def narrow_json_to_list(value: JSONValue) -> JSONArray:
    """Narrow JSONValue to list.

    Raises JSONTypeError if value is not a list.
    """
    if not isinstance(value, list):
        raise JSONTypeError(f"Expected JSON array, got {json_type_name(value)}")
    return value


def narrow_json_to_str(value: JSONValue) -> str:
    """Narrow JSONValue to str.

    Raises JSONTypeError if value is not a str.
    """
    if not isinstance(value, str):
        raise JSONTypeError(f"Expected JSON string, got {json_type_name(value)}")
    return value


def narrow_json_to_int(value: JSONValue) -> int:
    """Narrow JSONValue to int.

    Raises JSONTypeError if value is not an int (excludes bool).
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise JSONTypeError(f"Expected JSON integer, got {json_type_name(value)}")
    return value


def narrow_json_to_float(value: JSONValue) -> float:
    """Narrow JSONValue to float (accepts int as well).

    Raises JSONTypeError if value is not a number.
    """
    if isinstance(value, bool):
        raise JSONTypeError(f"Expected JSON number, got {json_type_name(value)}")
    if isinstance(value, int):
        return float(value)
    if isinstance(value, float):
        return value
    raise JSONTypeError(f"Expected JSON number, got {json_type_name(value)}")


def narrow_json_to_bool(value: JSONValue) -> bool:
    """Narrow JSONValue to bool.

    Raises JSONTypeError if value is not a bool.
    """
    if not isinstance(value, bool):
        raise JSONTypeError(f"Expected JSON boolean, got {json_type_name(value)}")
    return value


__all__ = [
    "InvalidJsonError",
    "JSONArray",
    "JSONObject",
    "JSONTypeError",
    "JSONValue",
    "dump_json_str",
    "json_type_name",
    "load_json_bytes",
    "load_json_str",
    "narrow_json_to_bool",
    "narrow_json_to_dict",
    "narrow_json_to_float",
    "narrow_json_to_int",
    "narrow_json_to_list",
    "narrow_json_to_str",
]
