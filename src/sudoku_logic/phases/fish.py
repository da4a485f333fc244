"""X-Wing: a value locked to the same two columns (or rows) of two rows (or columns)."""

from __future__ import annotations

import logging
from typing import List

from ..board import BLOCK, COLS, ROWS, Board, Cell
from ..render import to_debug_table

_LOGGER = logging.getLogger(__name__)


def _holders(cells: List[Cell], value: int) -> List[Cell]:
    return [cell for cell in cells if value in cell.candidates]


def x_wing_cells(board: Board, row0: int, row1: int, col0: int, col1: int) -> bool:
    """Look for an X-Wing on the rectangle spanned by two rows and two columns.

    For every value open in all four corners two orientations are checked:

    * rows: the value appears in rows ``row0``/``row1`` only in ``col0``/``col1``,
      so it is removed from the rest of those two columns;
    * columns: the value appears in columns ``col0``/``col1`` only in
      ``row0``/``row1``, so it is removed from the rest of those two rows.

    Returns ``True`` at the first value/orientation that removes a candidate.
    """

    corners = [
        board.get_cell(row0, col0),
        board.get_cell(row0, col1),
        board.get_cell(row1, col0),
        board.get_cell(row1, col1),
    ]
    if any(cell.candidates.count() == 1 for cell in corners):
        return False

    mask = 0
    for cell in corners:
        mask |= cell.candidates.mask

    rows = (row0, row1)
    cols = (col0, col1)
    # rest of the two rows outside the two columns, and vice versa
    row_rest = [
        cell
        for row in rows
        for cell in board.get_row(row)
        if cell.col not in cols
    ]
    col_rest = [
        cell
        for col in cols
        for cell in board.get_col(col)
        if cell.row not in rows
    ]

    for value in range(1, 10):
        if not mask & (1 << (value - 1)):
            continue
        if not all(value in cell.candidates for cell in corners):
            continue

        in_row_rest = _holders(row_rest, value)
        in_col_rest = _holders(col_rest, value)
        if not in_row_rest and in_col_rest:
            orientation, targets = "rows", in_col_rest
        elif not in_col_rest and in_row_rest:
            orientation, targets = "cols", in_row_rest
        else:
            continue

        _LOGGER.debug(
            "X-Wing: %d is unique across %s for (%d,%d) (%d,%d), (%d,%d), (%d,%d)",
            value,
            orientation,
            row0,
            col0,
            row0,
            col1,
            row1,
            col0,
            row1,
            col1,
        )
        for cell in targets:
            _LOGGER.debug(
                "X-Wing: Removing possible value %d from (%d,%d)", value, cell.row, cell.col
            )
            cell.candidates.remove(value)
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("\n%s", to_debug_table(board))
        return True
    return False


def rule_x_wing(board: Board) -> bool:
    """Scan every rectangle ``row0 < row1``, ``col0 < col1``.

    Rectangles whose four corners share one block are skipped.
    """

    for row0 in range(ROWS):
        for col0 in range(COLS):
            for row1 in range(row0 + 1, ROWS):
                for col1 in range(col0 + 1, COLS):
                    if row0 // BLOCK == row1 // BLOCK and col0 // BLOCK == col1 // BLOCK:
                        continue
                    if x_wing_cells(board, row0, row1, col0, col1):
                        return True
    return False


__all__ = ["rule_x_wing", "x_wing_cells"]
