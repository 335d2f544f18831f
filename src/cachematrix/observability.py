"""Solve record schema enforcement."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from jsonschema import Draft7Validator

from .errors import SolveRecordError

SOLVE_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": [
        "holder_id",
        "cache_hit",
        "inverter",
        "shape",
        "latency_ms",
        "solved_at",
    ],
    "properties": {
        "holder_id": {"type": "string"},
        "cache_hit": {"type": "boolean"},
        "inverter": {"type": "string"},
        "shape": {
            "type": "array",
            "items": {"type": "integer", "minimum": 0},
            "minItems": 2,
            "maxItems": 2,
        },
        "latency_ms": {"type": "number", "minimum": 0},
        "solved_at": {"type": "string", "format": "date-time"},
    },
    "additionalProperties": False,
}

_validator = Draft7Validator(SOLVE_SCHEMA)


def validate_solve(payload: Dict[str, Any]) -> None:
    errors = sorted(_validator.iter_errors(payload), key=lambda e: list(e.path))
    if errors:
        messages = ", ".join(error.message for error in errors)
        raise SolveRecordError(f"solve record validation failed: {messages}")


@dataclass
class SolveRecord:
    holder_id: str
    cache_hit: bool
    inverter: str
    shape: List[int]
    latency_ms: float
    solved_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "holder_id": self.holder_id,
            "cache_hit": self.cache_hit,
            "inverter": self.inverter,
            "shape": [int(n) for n in self.shape],
            "latency_ms": self.latency_ms,
            "solved_at": self.solved_at,
        }
        validate_solve(payload)
        return payload
