from __future__ import annotations

from typing import TypedDict

from .decode import optional_int, require_int, require_str
from .json_utils import JSONObject


class Pokemon(TypedDict, total=True):
    """Pokemon record. Immutable by convention."""

    name: str
    id: int
    trainer_id: int | None  # None when the pokemon is wild


def decode_pokemon(data: JSONObject) -> Pokemon:
    """Decode Pokemon from JSON dict. Raises DecodeError on invalid data."""
    return Pokemon(
        name=require_str(data, "name"),
        id=require_int(data, "id"),
        trainer_id=optional_int(data, "trainerId"),
    )


__all__ = [
    "Pokemon",
    "decode_pokemon",
]
