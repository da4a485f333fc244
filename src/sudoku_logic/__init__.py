"""Deductive (non-backtracking) Sudoku solving engine."""

from __future__ import annotations

from .board import Board, Cell, Group
from .candidates import CandidateSet
from .delta import Delta, DeltaOp, DeltaValidationError, diff_boards
from .errors import InvalidInputError, SudokuError
from .history import History
from .step_runner import (
    RuleAttempt,
    RuleHandler,
    RuleTraceRecorder,
    StepRunner,
    register_rule,
    registered_rules,
)
from .sudoku import Sudoku
from .trace import SolveTrace, SolveTraceEntry, TraceValidationError, validate_trace_payload

# Trigger rule registration on import.
from . import phases as _phases  # noqa: F401

__version__ = "1.0.0"

__all__ = [
    "Board",
    "CandidateSet",
    "Cell",
    "Delta",
    "DeltaOp",
    "DeltaValidationError",
    "Group",
    "History",
    "InvalidInputError",
    "RuleAttempt",
    "RuleHandler",
    "RuleTraceRecorder",
    "SolveTrace",
    "SolveTraceEntry",
    "StepRunner",
    "Sudoku",
    "SudokuError",
    "TraceValidationError",
    "__version__",
    "diff_boards",
    "register_rule",
    "registered_rules",
    "validate_trace_payload",
]
