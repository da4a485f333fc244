#!/usr/bin/env python3
"""Smoke-test deterministic behaviour of the solver on the bundled puzzles."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from sudoku_logic import SolveTrace, Sudoku
from sudoku_logic.samples import PUZZLES


def _solve(puzzle: str) -> dict:
    trace = SolveTrace(puzzle)
    game = Sudoku(puzzle, trace=trace)
    game.solve()
    trace.validate()
    return {
        "result": game.to_string(),
        "steps_taken": game.steps_taken(),
        "trace_digest": trace.digest(),
        "solved": game.solved(),
    }


def main() -> int:
    for name, puzzle in PUZZLES.items():
        first = _solve(puzzle)
        second = _solve(puzzle)
        for key in ("result", "steps_taken", "trace_digest"):
            if first[key] != second[key]:
                print(f"determinism failed for {name}/{key}: {first[key]} vs {second[key]}")
                return 1
        status = "solved" if first["solved"] else "stuck"
        print(f"{name}: {status} after {first['steps_taken']} steps")

    print("Determinism smoke-test passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
