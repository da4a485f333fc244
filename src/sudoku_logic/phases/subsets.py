"""Hidden subsets: hidden pairs and hidden triples inside one group."""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Callable, List, Optional, Sequence

from ..board import Board, Cell, Group
from ..render import to_debug_table

_LOGGER = logging.getLogger(__name__)

GroupRule = Callable[[Group], bool]


def _locate_subset(group: Group, values: Sequence[int]) -> Optional[List[Cell]]:
    """Return the cells holding at least two of ``values``.

    ``None`` means the subset is invalid for this group: some cell holds
    exactly one of the values, so the values are not locked together.
    """

    holders: List[Cell] = []
    for cell in group:
        present = sum(1 for value in values if value in cell.candidates)
        if present >= 2:
            holders.append(cell)
        elif present == 1:
            return None
    return holders


def _format_cells(cells: Sequence[Cell]) -> str:
    return ", ".join(f"({cell.row},{cell.col})" for cell in cells)


def _hidden_subset(group: Group, size: int, label: str) -> bool:
    for values in combinations(group.values(), size):
        holders = _locate_subset(group, values)
        if holders is None or len(holders) != size:
            continue
        if all(cell.candidates.count() <= size for cell in holders):
            continue
        _LOGGER.debug(
            "%s: Found %s locked in cells %s of %s",
            label,
            ", ".join(str(value) for value in values),
            _format_cells(holders),
            group.label,
        )
        for cell in holders:
            cell.candidates.keep_only(values)
        return True
    return False


def hidden_pairs_group(group: Group) -> bool:
    """Reduce the first hidden pair found in ``group`` to just the pair."""

    return _hidden_subset(group, 2, "Hidden Pairs")


def hidden_tuples_group(group: Group) -> bool:
    """Reduce the first hidden triple found in ``group`` to just the triple.

    A cell takes part when it holds at least two of the three values.
    """

    return _hidden_subset(group, 3, "Hidden Tuples")


def _scan_groups(board: Board, group_rule: GroupRule) -> bool:
    for group in (*board.rows(), *board.cols(), *board.blocks()):
        if group_rule(group):
            if _LOGGER.isEnabledFor(logging.DEBUG):
                _LOGGER.debug("\n%s", to_debug_table(board))
            return True
    return False


def rule_hidden_pairs(board: Board) -> bool:
    return _scan_groups(board, hidden_pairs_group)


def rule_hidden_tuples(board: Board) -> bool:
    return _scan_groups(board, hidden_tuples_group)


__all__ = [
    "hidden_pairs_group",
    "hidden_tuples_group",
    "rule_hidden_pairs",
    "rule_hidden_tuples",
]
