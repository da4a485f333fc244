"""Append-only history of board snapshots."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from .board import Board


class History:
    """Ordered snapshots, one per solving step.

    The last snapshot is the working board.  Earlier snapshots form the audit
    trail of the solve and are never edited once a newer one exists.
    """

    def __init__(self, initial: Board) -> None:
        self._snapshots: List[Board] = [initial]

    @property
    def current(self) -> Board:
        return self._snapshots[-1]

    def push_copy(self) -> Board:
        """Append a copy of the current board and return it."""

        snapshot = self._snapshots[-1].copy()
        self._snapshots.append(snapshot)
        return snapshot

    def snapshots(self) -> Tuple[Board, ...]:
        return tuple(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __getitem__(self, index: int) -> Board:
        return self._snapshots[index]

    def __iter__(self) -> Iterator[Board]:
        return iter(self._snapshots)


__all__ = ["History"]
