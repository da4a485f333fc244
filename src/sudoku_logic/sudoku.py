"""Deductive Sudoku solver facade."""

from __future__ import annotations

import logging
from typing import Optional

from . import render
from .board import Board
from .delta import count_ops, diff_boards
from .history import History
from .step_runner import StepRunner
from .trace import SolveTrace, SolveTraceEntry, state_hash

_LOGGER = logging.getLogger(__name__)


class Sudoku:
    """A puzzle together with the history of its solving steps.

    Parameters
    ----------
    initial:
        81-character row-major puzzle; ``'1'``-``'9'`` are clues, ``'.'`` or
        ``'0'`` blanks.  Any other length raises
        :class:`~sudoku_logic.errors.InvalidInputError`.
    runner:
        Rule dispatcher.  Defaults to the full registered battery.
    trace:
        Optional :class:`SolveTrace` receiving one entry per step that made
        progress.
    """

    def __init__(
        self,
        initial: str,
        *,
        runner: Optional[StepRunner] = None,
        trace: Optional[SolveTrace] = None,
    ) -> None:
        board = Board.from_string(initial)
        self.puzzle = initial
        self.runner = runner or StepRunner()
        self.trace = trace
        self._history = History(board)
        _LOGGER.debug("Sudoku instance created")

    # Queries ----------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._history.current

    @property
    def history(self) -> History:
        return self._history

    def steps_taken(self) -> int:
        """Number of snapshots, the initial board included."""

        return len(self._history)

    def solved(self) -> bool:
        """``True`` when every cell holds exactly one candidate.

        Sudoku constraints are not re-checked; the rules only make sound
        eliminations.
        """

        return self._history.current.solved()

    # Solving ----------------------------------------------------------

    def solve_step(self) -> bool:
        """Copy the current board and apply the first rule that makes progress.

        Returns ``False`` once no rule can remove another candidate.
        """

        previous = self._history.current
        board = self._history.push_copy()
        rule = self.runner.run_step(board)
        if rule is None:
            return False
        if self.trace is not None:
            self._record(self.trace, rule, previous, board)
        return True

    def solve(self, max_steps: Optional[int] = None) -> bool:
        """Step until no rule makes progress; return :meth:`solved`.

        ``max_steps`` caps the number of steps taken by this call.
        """

        taken = 0
        while max_steps is None or taken < max_steps:
            taken += 1
            if not self.solve_step():
                return self.solved()
        _LOGGER.warning("Stopped after %d steps without reaching a fixpoint", taken)
        return self.solved()

    def _record(self, trace: SolveTrace, rule: str, previous: Board, board: Board) -> None:
        deltas = diff_boards(previous, board)
        eliminations, placements = count_ops(deltas)
        trace.append(
            SolveTraceEntry(
                step=self.steps_taken() - 1,
                technique_id=rule,
                deltas=deltas,
                placements=placements,
                candidates_removed=eliminations,
                state_hash_before=state_hash(previous),
                state_hash_after=state_hash(board),
            )
        )

    # Presentation -----------------------------------------------------

    def to_string(self) -> str:
        return render.to_string(self.board)

    def to_table(self) -> str:
        return render.to_table(self.board)

    def to_debug(self) -> str:
        return render.to_debug(self.board)

    def to_debug_table(self) -> str:
        return render.to_debug_table(self.board)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Sudoku({self.puzzle!r}, steps={self.steps_taken()})"


__all__ = ["Sudoku"]
