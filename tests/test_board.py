from __future__ import annotations

import pytest

from sudoku_logic import Board, CandidateSet, InvalidInputError
from sudoku_logic.samples import SIMPLE


def test_from_string_maps_clues_and_blanks() -> None:
    board = Board.from_string("1" + "." * 79 + "0")
    assert board.get_cell(0, 0).candidates.to_list() == [1]
    assert board.get_cell(0, 0).value == 1
    assert board.get_cell(8, 8).candidates.count() == 9
    assert board.get_cell(4, 4).value is None


def test_from_string_rejects_wrong_length() -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        Board.from_string("." * 80)
    error = excinfo.value
    assert error.code == "invalid-length"
    assert error.actual == 80
    assert error.expected == 81
    assert "Sudoku string was 80, expected 81" in str(error)
    assert isinstance(error, ValueError)


def test_from_string_rejects_unknown_characters() -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        Board.from_string("x" + "." * 80)
    assert excinfo.value.code == "invalid-character"


def test_block_is_anchored_on_its_origin() -> None:
    board = Board()
    positions = [(cell.row, cell.col) for cell in board.get_block(4, 7)]
    assert positions == [(row, col) for row in (3, 4, 5) for col in (6, 7, 8)]
    assert board.get_block(4, 7).label == "block (3,6)"


def test_groups_share_the_board_cells() -> None:
    board = Board()
    board.get_row(2)[5].candidates.remove(4)

    assert 4 not in board.get_cell(2, 5).candidates
    assert board.get_col(5)[2] is board.get_cell(2, 5)
    assert board.get_cell(2, 5) in board.get_block(2, 5)
    assert board.get_cell(2, 5) not in board.get_block(0, 0)


def test_copy_is_deep() -> None:
    board = Board.from_string(SIMPLE)
    clone = board.copy()
    clone.get_cell(0, 2).candidates.remove(1)

    assert 1 in board.get_cell(0, 2).candidates
    assert clone.get_cell(0, 2) is not board.get_cell(0, 2)
    assert clone.to_string() == board.to_string()


def test_group_values_skip_determined_cells() -> None:
    board = Board()
    row = board.get_row(0)
    for cell in row:
        cell.candidates.keep_only([1, 2])
    row[0].candidates = CandidateSet([5])
    assert row.values() == [1, 2]


def test_without_keeps_order() -> None:
    board = Board()
    row = board.get_row(3)
    rest = row.without(board.get_block(3, 3))
    assert [cell.col for cell in rest] == [0, 1, 2, 6, 7, 8]


def test_group_orders() -> None:
    board = Board()
    assert [group.label for group in board.blocks()][:3] == [
        "block (0,0)",
        "block (0,3)",
        "block (0,6)",
    ]
    assert [cell.index for cell in board.iter_cells()] == list(range(81))
    assert len(board.rows()) == len(board.cols()) == 9


def test_projection_and_solved() -> None:
    board = Board.from_string(SIMPLE)
    assert board.to_string() == SIMPLE
    assert board.solved() is False

    full = Board.from_string("123456789" * 9)
    assert full.solved() is True
