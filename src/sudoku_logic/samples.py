"""Canonical puzzles used by the smoke checks and the test-suite."""

from __future__ import annotations

from typing import Dict

SIMPLE = "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"
SIMPLE_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)
HIDDEN_PAIRS = "1794...3.65..1.7..82...76..56....87.438672...79........87..9.5.9.5.8.3.7..675.9.."
WORLDS_HARDEST = "8..........36......7..9.2...5...7.......457.....1...3...1....68..85...1..9....4.."
SEVENTEEN_CLUE = "1....7..9....3..5...........2..1..8...........5..9..3...........4..8....7..2....6"
X_PUZZLE = ".4........2..6.......7..1.......9..5...5...3...8..2......6..4.......1..9.......7."
SINGLE_CLUE = "." * 40 + "5" + "." * 40

PUZZLES: Dict[str, str] = {
    "simple": SIMPLE,
    "hidden-pairs": HIDDEN_PAIRS,
    "worlds-hardest": WORLDS_HARDEST,
    "17-clue": SEVENTEEN_CLUE,
    "x-puzzle": X_PUZZLE,
    "single-clue": SINGLE_CLUE,
}

__all__ = [
    "HIDDEN_PAIRS",
    "PUZZLES",
    "SEVENTEEN_CLUE",
    "SIMPLE",
    "SIMPLE_SOLUTION",
    "SINGLE_CLUE",
    "WORLDS_HARDEST",
    "X_PUZZLE",
]
