"""Walk through decoding Pokemon records and log what each scenario produces.

Run with ``python -m typed_json.demo``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from typed_json.bulk import from_array_payload, from_objects
from typed_json.config import load_settings
from typed_json.errors import DecodeError, code_value
from typed_json.json_utils import JSONObject, dump_json_str
from typed_json.logging import get_logger, setup_logging
from typed_json.pokemon import Pokemon, decode_pokemon

_logger = get_logger(__name__)

PAIR_OF_POKEMON: list[JSONObject] = [
    {"name": "Pikachu", "id": 25},
    {"name": "Bulbasaur", "id": 1},
]

SINGLE_SCENARIOS: tuple[tuple[str, JSONObject], ...] = (
    ("complete", {"name": "Pikachu", "id": 25, "trainerId": 0}),
    ("optional_omitted", {"name": "Pikachu", "id": 25}),
    ("required_missing", {"name": "Pikachu"}),
    ("wrong_type", {"name": "Pikachu", "id": "25", "trainerId": 0}),
)


def _run(scenario: str, action: Callable[[], Sequence[Pokemon]]) -> bool:
    try:
        decoded = action()
    except DecodeError as exc:
        _logger.info(
            "decode failed: %s",
            exc.message,
            extra={"scenario": scenario, "error_code": code_value(exc.code), "key": exc.key},
        )
        return False
    _logger.info("decoded %s", decoded, extra={"scenario": scenario, "count": len(decoded)})
    return True


def run_scenarios() -> dict[str, bool]:
    """Decode every scenario and return whether each one succeeded."""
    outcomes: dict[str, bool] = {}
    for scenario, data in SINGLE_SCENARIOS:
        outcomes[scenario] = _run(scenario, lambda data=data: [decode_pokemon(data)])
    outcomes["bulk_objects"] = _run(
        "bulk_objects", lambda: from_objects(decode_pokemon, PAIR_OF_POKEMON)
    )
    payload = dump_json_str(PAIR_OF_POKEMON).encode("utf-8")
    outcomes["bulk_payload"] = _run(
        "bulk_payload", lambda: from_array_payload(decode_pokemon, payload)
    )
    return outcomes


def main() -> int:
    settings = load_settings()
    setup_logging(
        level=settings["logging"]["level"],
        format_mode=settings["logging"]["format"],
        service_name=settings["service_name"],
        instance_id=None,
        extra_fields=None,
    )
    run_scenarios()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
