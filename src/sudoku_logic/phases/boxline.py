"""Pointing: box/line reduction on row-block and column-block intersections."""

from __future__ import annotations

import logging
from typing import Iterable

from ..board import BLOCK, COLS, ROWS, Board, Cell, Group
from ..render import to_debug_table

_LOGGER = logging.getLogger(__name__)


def _holds(cells: Iterable[Cell], value: int) -> bool:
    return any(value in cell.candidates for cell in cells)


def _eliminate(cells: Group, value: int) -> None:
    for cell in cells:
        if value in cell.candidates:
            _LOGGER.debug(
                "Pointing: Removing possible value %d from (%d,%d)", value, cell.row, cell.col
            )
            cell.candidates.remove(value)


def point_groups(line: Group, block: Group) -> bool:
    """Apply box/line reduction to one row or column and one of its blocks.

    A value open in the intersection that is missing from the rest of one
    group is confined to the intersection, so it is removed from the rest of
    the other group.  Every open value of the intersection is examined before
    returning.
    """

    shared = Group((cell for cell in line if cell in block), line.label)
    shared_values = shared.values()
    if not shared_values:
        return False

    line_rest = line.without(shared)
    block_rest = block.without(shared)

    updated = False
    for value in shared_values:
        in_line = _holds(line_rest, value)
        in_block = _holds(block_rest, value)
        if in_line and not in_block:
            _LOGGER.debug("  %d of %s is locked to %s", value, block.label, line.label)
            _eliminate(line_rest, value)
            updated = True
        elif in_block and not in_line:
            _LOGGER.debug("  %d of %s is locked to %s", value, line.label, block.label)
            _eliminate(block_rest, value)
            updated = True
    return updated


def rule_pointing(board: Board) -> bool:
    """Try every row-block, then every column-block intersection.

    Stops at the first intersection that removes a candidate.
    """

    intersections = [
        (board.get_row(row), board.get_block(row, col))
        for row in range(ROWS)
        for col in range(0, COLS, BLOCK)
    ]
    intersections += [
        (board.get_col(col), board.get_block(row, col))
        for col in range(COLS)
        for row in range(0, ROWS, BLOCK)
    ]
    for line, block in intersections:
        if point_groups(line, block):
            if _LOGGER.isEnabledFor(logging.DEBUG):
                _LOGGER.debug("\n%s", to_debug_table(board))
            return True
    return False


__all__ = ["point_groups", "rule_pointing"]
