"""Penciling: peer elimination of determined values (naked singles)."""

from __future__ import annotations

import logging

from ..board import Board, Cell, Group
from ..render import to_debug_table

_LOGGER = logging.getLogger(__name__)


def _pencil_cell_with_group(cell: Cell, group: Group) -> bool:
    for peer in group:
        if peer is cell:
            continue
        value = peer.value
        if value is None or value not in cell.candidates:
            continue
        _LOGGER.debug(
            "Penciling: Removing possible value %d from (%d,%d)", value, cell.row, cell.col
        )
        cell.candidates.remove(value)
        solved = cell.value
        if solved is not None:
            _LOGGER.debug(
                "Penciling: Solved cell with value %d from (%d,%d)", solved, cell.row, cell.col
            )
        return True
    return False


def pencil_cell(board: Board, cell: Cell) -> bool:
    """Remove at most one candidate of ``cell`` that a peer already holds.

    Peers are scanned row first, then column, then block.  Only the first
    hit is applied so that every call makes a single, traceable change.
    """

    if cell.candidates.count() <= 1:
        return False
    groups = (
        board.get_row(cell.row),
        board.get_col(cell.col),
        board.get_block(cell.row, cell.col),
    )
    return any(_pencil_cell_with_group(cell, group) for group in groups)


def rule_penciling(board: Board) -> bool:
    """Sweep all cells with :func:`pencil_cell` until a sweep changes nothing.

    Returns ``True`` when any candidate was removed during the whole run.
    """

    updated = False
    while True:
        updated_sweep = False
        for cell in board.iter_cells():
            if pencil_cell(board, cell):
                updated_sweep = True
        if not updated_sweep:
            break
        updated = True
    if updated:
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("\n%s", to_debug_table(board))
    return updated


__all__ = ["pencil_cell", "rule_penciling"]
