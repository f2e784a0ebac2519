"""Grid text parsing and serialisation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from .board import CONTRADICTION, Board, BoardResult
from .errors import FormatError
from .propagate import assign
from .topology import DIGITS, get_topology

_LOGGER = logging.getLogger(__name__)

BLANKS = "0."
_ALLOWED = frozenset(DIGITS + BLANKS)


def grid_values(text: str) -> List[str]:
    """Normalise ``text`` to its 81 cell characters in row-major order.

    Anything outside ``0-9`` and ``.`` is dropped first, so separators,
    whitespace and box-drawing characters are accepted.
    """
    chars = [ch for ch in text if ch in _ALLOWED]
    if len(chars) != 81:
        raise FormatError(len(chars), text)
    return chars


def parse_grid(text: str) -> BoardResult:
    """Convert grid text into a propagated :class:`Board`.

    Returns ``CONTRADICTION`` when the givens are inconsistent and raises
    :class:`FormatError` when the text is malformed.
    """
    chars = grid_values(text)
    topo = get_topology()
    board = Board.full()
    for cell, ch in enumerate(chars):
        if ch in BLANKS:
            continue
        if not assign(board, cell, int(ch), topo):
            _LOGGER.debug("givens contradict at cell %d (digit %s)", cell, ch)
            return CONTRADICTION
    return board


def to_string(board: Board, blank: str = ".") -> str:
    """81-character grid with ``blank`` for every cell that is not resolved."""
    out = []
    for cell in range(81):
        value = board.value(cell)
        out.append(blank if value is None else DIGITS[value - 1])
    return "".join(out)


def from_file(path: Union[str, Path], sep: str = "\n") -> List[str]:
    """Parse a file into a list of grid strings separated by ``sep``."""
    text = Path(path).read_text(encoding="utf-8").strip()
    return [chunk for chunk in text.split(sep) if chunk.strip()]


__all__ = ["BLANKS", "from_file", "grid_values", "parse_grid", "to_string"]
