"""Candidate board and the contradiction sentinel."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from .topology import DIGITS, cell_name

# bitmask representation of candidates (digit 1..9 -> bits 0..8)
FULL = (1 << 9) - 1

# mask -> ascending digits, for every 9-bit mask
_DIGITS_OF: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(d for d in range(1, 10) if mask >> (d - 1) & 1) for mask in range(FULL + 1)
)


def bit(digit: int) -> int:
    return 1 << (digit - 1)


def mask_digits(mask: int) -> Tuple[int, ...]:
    """Digits present in ``mask`` in ascending order."""
    return _DIGITS_OF[mask]


class Contradiction(Enum):
    """Outcome of a propagation or search step that proved the board impossible.

    The single member is falsy so callers can write ``if not result``.
    """

    CONTRADICTION = "contradiction"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "CONTRADICTION"


CONTRADICTION = Contradiction.CONTRADICTION


@dataclass(slots=True)
class Board:
    """Candidate sets of the 81 cells, one 9-bit mask per cell.

    Boards are mutated in place by propagation; search takes a :meth:`copy`
    before every branch so sibling branches never share a mask list.
    """

    masks: List[int]

    @classmethod
    def full(cls) -> "Board":
        """Board with every digit still possible in every cell."""
        return cls([FULL] * 81)

    def copy(self) -> "Board":
        return Board(self.masks[:])

    def candidates(self, cell: int) -> Tuple[int, ...]:
        return _DIGITS_OF[self.masks[cell]]

    def count(self, cell: int) -> int:
        return self.masks[cell].bit_count()

    def has(self, cell: int, digit: int) -> bool:
        return bool(self.masks[cell] & bit(digit))

    def value(self, cell: int) -> Optional[int]:
        """Resolved digit of ``cell``, or ``None`` while it has several candidates."""
        digits = _DIGITS_OF[self.masks[cell]]
        return digits[0] if len(digits) == 1 else None

    def resolved_count(self) -> int:
        return sum(1 for mask in self.masks if mask.bit_count() == 1)

    def is_complete(self) -> bool:
        return all(mask.bit_count() == 1 for mask in self.masks)

    def to_dict(self) -> Dict[str, str]:
        """Mapping ``{'A1': '1349', ...}`` for display collaborators."""
        return {
            cell_name(cell): "".join(DIGITS[d - 1] for d in _DIGITS_OF[mask])
            for cell, mask in enumerate(self.masks)
        }


BoardResult = Union[Board, Contradiction]


__all__ = [
    "Board",
    "BoardResult",
    "CONTRADICTION",
    "Contradiction",
    "FULL",
    "bit",
    "mask_digits",
]
