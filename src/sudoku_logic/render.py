"""Text renderings of a board: projection, table and pencil-mark views."""

from __future__ import annotations

from typing import List

from .board import BLOCK, COLS, ROWS, Board

_TABLE_RULE = "------+-------+------"
_DEBUG_RULE = "------------+-------------+------------"
_DEBUG_SPACER = "            |             |            "


def to_string(board: Board) -> str:
    """Compact 81-character projection: digit if determined, ``'.'`` otherwise."""

    return board.to_string()


def to_table(board: Board) -> str:
    lines: List[str] = []
    for row in range(ROWS):
        if row % BLOCK == 0 and row != 0:
            lines.append(_TABLE_RULE)
        parts: List[str] = []
        for col in range(COLS):
            if col % BLOCK == 0 and col != 0:
                parts.append("| ")
            value = board.get_cell(row, col).value
            parts.append(f"{value} " if value is not None else ". ")
        lines.append("".join(parts))
    return "\n".join(lines) + "\n"


def to_debug(board: Board) -> str:
    """One line per cell listing its remaining candidates."""

    lines = []
    for cell in board.iter_cells():
        digits = "".join(str(digit) for digit in cell.candidates)
        lines.append(f" ({cell.row},{cell.col}): {digits}")
    return "\n".join(lines) + "\n"


def to_debug_table(board: Board) -> str:
    """Value table followed by a 3x3 pencil-mark grid for every cell."""

    lines: List[str] = []
    for row in range(ROWS):
        if row % BLOCK == 0 and row != 0:
            lines.append(_DEBUG_RULE)
            lines.append(_DEBUG_SPACER)
        for band in range(BLOCK):
            parts: List[str] = []
            for col in range(COLS):
                if col % BLOCK == 0 and col != 0:
                    parts.append("| ")
                candidates = board.get_cell(row, col).candidates
                for offset in range(1, BLOCK + 1):
                    digit = BLOCK * band + offset
                    parts.append(str(digit) if digit in candidates else ".")
                parts.append(" ")
            lines.append("".join(parts))
            if band == BLOCK - 1 and row != ROWS - 1:
                lines.append(_DEBUG_SPACER)
    return to_table(board) + "\n".join(lines) + "\n"


__all__ = ["to_debug", "to_debug_table", "to_string", "to_table"]
