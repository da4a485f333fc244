from __future__ import annotations

from typing import Callable, Iterable

import pytest

from sudoku_logic import Board, CandidateSet
from sudoku_logic.log import reset_logging


@pytest.fixture(autouse=True)
def _detach_cli_logging():
    yield
    reset_logging()


@pytest.fixture
def set_candidates() -> Callable[[Board, int, int, Iterable[int]], None]:
    """Replace the candidates of one cell."""

    def _set(board: Board, row: int, col: int, digits: Iterable[int]) -> None:
        board.get_cell(row, col).candidates = CandidateSet(digits)

    return _set


@pytest.fixture
def drop_candidate() -> Callable[[Board, Iterable[tuple[int, int]], int], None]:
    """Remove ``digit`` from every listed position."""

    def _drop(board: Board, positions: Iterable[tuple[int, int]], digit: int) -> None:
        for row, col in positions:
            board.get_cell(row, col).candidates.remove(digit)

    return _drop
