"""JSON Schema for solve events written by the benchmark harness."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict

import jsonschema

from .errors import EventValidationError

SOLVE_EVENT_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "sudoku-cp/solve_event.schema.json",
    "type": "object",
    "required": ["name", "grid", "solved", "seconds", "nodes", "max_depth"],
    "properties": {
        "name": {"type": "string"},
        "grid": {"type": "string", "pattern": "^[0-9.]{81}$"},
        "solution": {"type": ["string", "null"], "pattern": "^[1-9]{81}$"},
        "solved": {"type": "boolean"},
        "seconds": {"type": "number", "minimum": 0},
        "nodes": {"type": "integer", "minimum": 0},
        "branches": {"type": "integer", "minimum": 0},
        "max_depth": {"type": "integer", "minimum": 0},
        "ts": {"type": "string"},
    },
    "additionalProperties": False,
}


@lru_cache(maxsize=1)
def _validator() -> jsonschema.Draft202012Validator:
    jsonschema.Draft202012Validator.check_schema(SOLVE_EVENT_SCHEMA)
    return jsonschema.Draft202012Validator(SOLVE_EVENT_SCHEMA)


def validate_event(event: Dict[str, Any]) -> None:
    """Raise :class:`EventValidationError` unless ``event`` matches the schema."""

    errors = sorted(_validator().iter_errors(event), key=lambda err: list(err.path))
    if errors:
        first = errors[0]
        location = "/".join(str(part) for part in first.path) or "<root>"
        raise EventValidationError("invalid-event", f"{location}: {first.message}")


__all__ = ["SOLVE_EVENT_SCHEMA", "validate_event"]
