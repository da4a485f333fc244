"""Candidate deltas between two board snapshots.

A solving step only ever removes candidates.  The removals are described as
``ELIM`` deltas; a cell that is left with a single candidate additionally
produces a ``PLACE`` delta for that digit.  Deltas are kept in a canonical
order so traces of the same puzzle are byte-identical between runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Tuple

from .board import Board
from .candidates import DIGITS


class DeltaValidationError(ValueError):
    """Raised when a delta does not describe a valid cell/digit pair."""


class DeltaOp(str, Enum):
    """Supported delta kinds."""

    ELIM = "ELIM"
    PLACE = "PLACE"

    @classmethod
    def from_value(cls, value: str) -> "DeltaOp":
        try:
            return cls(value)
        except ValueError as exc:
            raise DeltaValidationError(f"Unsupported delta op: {value!r}") from exc


@dataclass(frozen=True, slots=True)
class Delta:
    """Single candidate change on a cell (``cell`` is the row-major index)."""

    op: DeltaOp
    cell: int
    digit: int

    def __post_init__(self) -> None:
        if not isinstance(self.op, DeltaOp):
            object.__setattr__(self, "op", DeltaOp.from_value(str(self.op)))
        if not 0 <= int(self.cell) <= 80:
            raise DeltaValidationError(f"cell must be in [0, 80], got {self.cell!r}")
        if not 1 <= int(self.digit) <= 9:
            raise DeltaValidationError(f"digit must be in [1, 9], got {self.digit!r}")

    def sort_key(self) -> Tuple[int, int, int]:
        """Return canonical sorting key (op -> cell -> digit)."""

        return (0 if self.op is DeltaOp.ELIM else 1, int(self.cell), int(self.digit))

    def to_payload(self) -> dict:
        return {"op": self.op.value, "cell": int(self.cell), "digit": int(self.digit)}


def canonicalise_deltas(deltas: Iterable[Delta]) -> Tuple[Delta, ...]:
    """Return deltas sorted by op, cell and digit."""

    return tuple(sorted(deltas, key=Delta.sort_key))


def _iter_changes(before: Board, after: Board) -> Iterator[Delta]:
    for old, new in zip(before.iter_cells(), after.iter_cells()):
        removed = old.candidates.mask & ~new.candidates.mask
        if not removed:
            continue
        for digit in DIGITS:
            if removed & (1 << (digit - 1)):
                yield Delta(DeltaOp.ELIM, old.index, digit)
        placed = new.candidates.single()
        if old.candidates.count() > 1 and placed is not None:
            yield Delta(DeltaOp.PLACE, old.index, placed)


def diff_boards(before: Board, after: Board) -> Tuple[Delta, ...]:
    """Describe how ``after`` was obtained from ``before``."""

    return canonicalise_deltas(_iter_changes(before, after))


def count_ops(deltas: Iterable[Delta]) -> Tuple[int, int]:
    """Return ``(eliminations, placements)`` for ``deltas``."""

    counts: List[int] = [0, 0]
    for delta in deltas:
        counts[0 if delta.op is DeltaOp.ELIM else 1] += 1
    return counts[0], counts[1]


__all__ = [
    "Delta",
    "DeltaOp",
    "DeltaValidationError",
    "canonicalise_deltas",
    "count_ops",
    "diff_boards",
]
