from __future__ import annotations

from .bulk import from_array_payload, from_object_payload, from_objects
from .decode import (
    Narrower,
    ObjectDecoder,
    decode_optional,
    decode_required,
    optional_bool,
    optional_float,
    optional_int,
    optional_list,
    optional_object,
    optional_str,
    require_bool,
    require_float,
    require_int,
    require_list,
    require_object,
    require_str,
)
from .errors import DecodeError, DecodeErrorCode
from .json_utils import (
    InvalidJsonError,
    JSONArray,
    JSONObject,
    JSONTypeError,
    JSONValue,
    load_json_bytes,
    load_json_str,
)
from .pokemon import Pokemon, decode_pokemon

__all__ = [
    "DecodeError",
    "DecodeErrorCode",
    "InvalidJsonError",
    "JSONArray",
    "JSONObject",
    "JSONTypeError",
    "JSONValue",
    "Narrower",
    "ObjectDecoder",
    "Pokemon",
    "decode_optional",
    "decode_pokemon",
    "decode_required",
    "from_array_payload",
    "from_object_payload",
    "from_objects",
    "load_json_bytes",
    "load_json_str",
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
