"""Board model: cells, row/column/block groups and the 9x9 grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .candidates import CandidateSet
from .errors import InvalidInputError

ROWS = 9
COLS = 9
BLOCK = 3
CELL_COUNT = ROWS * COLS

_BLANKS = frozenset(".0")
_CLUES = frozenset("123456789")


@dataclass(eq=False)
class Cell:
    """A board position paired with its candidate set.

    Cells compare by identity so that group membership is a reference test:
    two cells with the same candidates are still different positions.
    """

    row: int
    col: int
    candidates: CandidateSet = field(default_factory=CandidateSet)

    @property
    def value(self) -> Optional[int]:
        return self.candidates.single()

    @property
    def index(self) -> int:
        return self.row * COLS + self.col

    def copy(self) -> "Cell":
        return Cell(self.row, self.col, self.candidates.copy())

    def __repr__(self) -> str:
        return f"Cell(({self.row},{self.col}), {self.candidates!r})"


class Group:
    """Ordered view over cells of one row, column or block.

    The group holds references to the board's own cells, so removing a
    candidate through a group edits the board.  Groups are cheap and meant
    to be rebuilt for every rule invocation.
    """

    __slots__ = ("_cells", "label")

    def __init__(self, cells: Iterable[Cell], label: str = "group") -> None:
        self._cells: Tuple[Cell, ...] = tuple(cells)
        self.label = label

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, index: int) -> Cell:
        return self._cells[index]

    def __contains__(self, cell: object) -> bool:
        return any(member is cell for member in self._cells)

    def without(self, cells: Iterable[Cell]) -> "Group":
        """Return the cells of this group that are not in ``cells``."""

        excluded = {id(cell) for cell in cells}
        return Group((cell for cell in self._cells if id(cell) not in excluded), self.label)

    def values(self) -> List[int]:
        """Digits still open in the unresolved cells, ascending."""

        mask = 0
        for cell in self._cells:
            if cell.candidates.count() > 1:
                mask |= cell.candidates.mask
        return CandidateSet.from_mask(mask).to_list()

    def __repr__(self) -> str:
        return f"Group({self.label})"


class Board:
    """9x9 grid of cells indexed by ``(row, col)``."""

    def __init__(self, cells: Optional[Sequence[Sequence[Cell]]] = None) -> None:
        if cells is None:
            self._cells: List[List[Cell]] = [
                [Cell(row, col) for col in range(COLS)] for row in range(ROWS)
            ]
        else:
            if len(cells) != ROWS or any(len(row) != COLS for row in cells):
                raise ValueError("board requires exactly 9 rows of 9 cells")
            self._cells = [list(row) for row in cells]

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """Parse an 81-character row-major puzzle string.

        ``'1'``-``'9'`` are clues, ``'.'`` and ``'0'`` are blanks.
        """

        if len(text) != CELL_COUNT:
            raise InvalidInputError.length_mismatch(len(text), CELL_COUNT)
        board = cls()
        for index, char in enumerate(text):
            if char in _BLANKS:
                continue
            if char not in _CLUES:
                raise InvalidInputError(
                    "invalid-character",
                    f"unexpected {char!r} at position {index}",
                )
            row, col = divmod(index, COLS)
            board._cells[row][col].candidates = CandidateSet((int(char),))
        return board

    # Accessors --------------------------------------------------------

    def get_cell(self, row: int, col: int) -> Cell:
        return self._cells[row][col]

    def get_row(self, row: int) -> Group:
        return Group(self._cells[row], f"row {row}")

    def get_col(self, col: int) -> Group:
        return Group((self._cells[row][col] for row in range(ROWS)), f"col {col}")

    def get_block(self, row: int, col: int) -> Group:
        r0 = (row // BLOCK) * BLOCK
        c0 = (col // BLOCK) * BLOCK
        return Group(
            (
                self._cells[r0 + dr][c0 + dc]
                for dr in range(BLOCK)
                for dc in range(BLOCK)
            ),
            f"block ({r0},{c0})",
        )

    def rows(self) -> List[Group]:
        return [self.get_row(row) for row in range(ROWS)]

    def cols(self) -> List[Group]:
        return [self.get_col(col) for col in range(COLS)]

    def blocks(self) -> List[Group]:
        return [
            self.get_block(row, col)
            for row in range(0, ROWS, BLOCK)
            for col in range(0, COLS, BLOCK)
        ]

    def iter_cells(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    # Whole-board helpers ----------------------------------------------

    def copy(self) -> "Board":
        return Board([[cell.copy() for cell in row] for row in self._cells])

    def solved(self) -> bool:
        return all(cell.candidates.count() == 1 for cell in self.iter_cells())

    def masks(self) -> Tuple[int, ...]:
        return tuple(cell.candidates.mask for cell in self.iter_cells())

    def to_string(self) -> str:
        return "".join(
            str(cell.value) if cell.value is not None else "." for cell in self.iter_cells()
        )

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"


__all__ = ["BLOCK", "CELL_COUNT", "COLS", "ROWS", "Board", "Cell", "Group"]
