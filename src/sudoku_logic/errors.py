"""Error types raised by the deductive solver."""

from __future__ import annotations

from typing import Optional


class SudokuError(Exception):
    """Base class for solver errors."""


class InvalidInputError(SudokuError, ValueError):
    """Raised when a puzzle string cannot be turned into a board."""

    def __init__(
        self,
        code: str,
        detail: Optional[str] = None,
        *,
        actual: Optional[int] = None,
        expected: Optional[int] = None,
    ) -> None:
        self.code = code
        self.detail = detail
        self.actual = actual
        self.expected = expected
        message = code if detail is None else f"{code}: {detail}"
        super().__init__(message)

    @classmethod
    def length_mismatch(cls, actual: int, expected: int) -> "InvalidInputError":
        return cls(
            "invalid-length",
            f"Sudoku string was {actual}, expected {expected}",
            actual=actual,
            expected=expected,
        )


__all__ = ["InvalidInputError", "SudokuError"]
