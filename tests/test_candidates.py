from __future__ import annotations

import pytest

from sudoku_logic import CandidateSet


def test_new_set_holds_every_digit() -> None:
    candidates = CandidateSet()
    assert candidates.count() == 9
    assert candidates.to_list() == list(range(1, 10))
    assert candidates.single() is None


def test_add_remove_and_membership() -> None:
    candidates = CandidateSet([3])
    candidates.add(7)
    assert candidates.to_list() == [3, 7]

    candidates.remove(3)
    candidates.remove(3)
    assert candidates.contains(3) is False
    assert 7 in candidates
    assert len(candidates) == 1
    assert candidates.single() == 7


def test_keep_only_intersects_with_current_candidates() -> None:
    candidates = CandidateSet([1, 2, 5])
    candidates.keep_only([1, 2, 3])
    assert candidates.to_list() == [1, 2]


def test_digits_outside_range_are_rejected() -> None:
    with pytest.raises(ValueError):
        CandidateSet([0])
    with pytest.raises(ValueError):
        CandidateSet().add(10)
    with pytest.raises(ValueError):
        CandidateSet.from_mask(1 << 9)


def test_membership_of_non_digits_is_false() -> None:
    candidates = CandidateSet()
    assert 0 not in candidates
    assert "1" not in candidates


def test_copy_is_independent() -> None:
    original = CandidateSet([4, 5])
    clone = original.copy()
    clone.remove(4)
    assert original.to_list() == [4, 5]
    assert clone.to_list() == [5]


def test_mask_round_trip_and_equality() -> None:
    candidates = CandidateSet.from_mask(0b101)
    assert candidates.to_list() == [1, 3]
    assert candidates == CandidateSet([3, 1])
    assert candidates.mask == 0b101


def test_empty_set_enumerates_nothing() -> None:
    candidates = CandidateSet([])
    assert candidates.to_list() == []
    assert candidates.single() is None
    assert repr(candidates) == "CandidateSet(-)"
