"""Solve trace: one entry per step that made progress."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, MutableSequence, Sequence

import jsonschema

from .board import Board
from .delta import Delta, canonicalise_deltas

TRACE_VERSION = 1

_SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "solve_trace.schema.json"


class TraceValidationError(ValueError):
    """Raised when a trace entry or payload violates the trace contract."""


def state_hash(board: Board) -> str:
    """Return the SHA-256 hex digest of the board's 81 candidate masks."""

    material = ",".join(str(mask) for mask in board.masks())
    return hashlib.sha256(material.encode("utf-8")).hexdigest()


@dataclass(frozen=True, slots=True)
class SolveTraceEntry:
    """Immutable record of one successful solving step."""

    step: int
    technique_id: str
    deltas: Sequence[Delta]
    placements: int
    candidates_removed: int
    state_hash_before: str
    state_hash_after: str

    def __post_init__(self) -> None:
        if self.step < 1:
            raise TraceValidationError("step must be >= 1")
        if not self.technique_id:
            raise TraceValidationError("technique_id must be a non-empty string")
        if self.placements < 0:
            raise TraceValidationError("placements must be >= 0")
        if self.candidates_removed < 1:
            raise TraceValidationError("a traced step must remove at least one candidate")

    def to_payload(self) -> dict:
        return {
            "step": int(self.step),
            "technique_id": str(self.technique_id),
            "deltas": [delta.to_payload() for delta in canonicalise_deltas(self.deltas)],
            "placements": int(self.placements),
            "candidates_removed": int(self.candidates_removed),
            "state_hash_before": str(self.state_hash_before),
            "state_hash_after": str(self.state_hash_after),
        }


@lru_cache(maxsize=1)
def _validator() -> jsonschema.protocols.Validator:
    schema = json.loads(_SCHEMA_PATH.read_text("utf-8"))
    validator_cls = jsonschema.validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema)


def validate_trace_payload(payload: Mapping[str, Any]) -> None:
    """Check ``payload`` against the bundled SolveTrace JSON schema."""

    try:
        _validator().validate(payload)
    except jsonschema.ValidationError as exc:
        location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise TraceValidationError(f"{location}: {exc.message}") from exc

    steps = [entry["step"] for entry in payload["entries"]]
    if any(later <= earlier for earlier, later in zip(steps, steps[1:])):
        raise TraceValidationError("entries: trace steps must be strictly increasing")


@dataclass
class SolveTrace:
    """Mutable trace accumulator producing SolveTrace JSON payloads."""

    puzzle: str
    entries: MutableSequence[SolveTraceEntry] = field(default_factory=list)

    def append(self, entry: SolveTraceEntry | Mapping[str, Any]) -> None:
        if isinstance(entry, Mapping):
            entry = SolveTraceEntry(**entry)
        if self.entries and entry.step <= self.entries[-1].step:
            raise TraceValidationError("trace steps must be strictly increasing")
        self.entries.append(entry)

    def extend(self, entries: Iterable[SolveTraceEntry | Mapping[str, Any]]) -> None:
        for entry in entries:
            self.append(entry)

    def snapshot(self) -> List[SolveTraceEntry]:
        return list(self.entries)

    def techniques(self) -> Dict[str, int]:
        """Count of traced steps per technique, in first-use order."""

        counts: Dict[str, int] = {}
        for entry in self.entries:
            counts[entry.technique_id] = counts.get(entry.technique_id, 0) + 1
        return counts

    def to_payload(self) -> dict:
        return {
            "version": TRACE_VERSION,
            "puzzle": self.puzzle,
            "entries": [entry.to_payload() for entry in self.entries],
        }

    def validate(self) -> dict:
        payload = self.to_payload()
        validate_trace_payload(payload)
        return payload

    def to_json(self, *, indent: int | None = None) -> str:
        return json.dumps(
            self.to_payload(), ensure_ascii=False, separators=(",", ":"), indent=indent
        )

    def digest(self) -> str:
        return hashlib.sha256(self.to_json().encode("utf-8")).hexdigest()


__all__ = [
    "SolveTrace",
    "SolveTraceEntry",
    "TRACE_VERSION",
    "TraceValidationError",
    "state_hash",
    "validate_trace_payload",
]
