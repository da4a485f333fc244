"""Fixed-size candidate set over the digits 1..9."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

DIGITS = tuple(range(1, 10))

# bit d-1 <-> digit d
FULL_MASK = (1 << 9) - 1


def _bit(digit: int) -> int:
    if not 1 <= digit <= 9:
        raise ValueError(f"digit must be in [1, 9], got {digit!r}")
    return 1 << (digit - 1)


class CandidateSet:
    """Mutable set of candidate digits stored as a 9-bit mask."""

    __slots__ = ("_mask",)

    def __init__(self, digits: Iterable[int] | None = None) -> None:
        if digits is None:
            self._mask = FULL_MASK
            return
        mask = 0
        for digit in digits:
            mask |= _bit(digit)
        self._mask = mask

    @classmethod
    def from_mask(cls, mask: int) -> "CandidateSet":
        if not 0 <= mask <= FULL_MASK:
            raise ValueError(f"mask must be in [0, {FULL_MASK}], got {mask!r}")
        instance = cls.__new__(cls)
        instance._mask = mask
        return instance

    @property
    def mask(self) -> int:
        return self._mask

    def add(self, digit: int) -> None:
        self._mask |= _bit(digit)

    def remove(self, digit: int) -> None:
        self._mask &= ~_bit(digit)

    def contains(self, digit: int) -> bool:
        return bool(self._mask & _bit(digit))

    def count(self) -> int:
        return self._mask.bit_count()

    def to_list(self) -> List[int]:
        return [digit for digit in DIGITS if self._mask & (1 << (digit - 1))]

    def keep_only(self, digits: Iterable[int]) -> None:
        """Drop every candidate that is not among ``digits``."""

        keep = 0
        for digit in digits:
            keep |= _bit(digit)
        self._mask &= keep

    def single(self) -> Optional[int]:
        """Return the remaining digit when exactly one is left."""

        if self._mask.bit_count() != 1:
            return None
        return self._mask.bit_length()

    def copy(self) -> "CandidateSet":
        return CandidateSet.from_mask(self._mask)

    # Python protocol --------------------------------------------------

    def __contains__(self, digit: object) -> bool:
        return isinstance(digit, int) and 1 <= digit <= 9 and self.contains(digit)

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return self.count()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CandidateSet):
            return self._mask == other._mask
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        digits = "".join(str(digit) for digit in self.to_list())
        return f"CandidateSet({digits or '-'})"


__all__ = ["DIGITS", "FULL_MASK", "CandidateSet"]
