"""Random puzzle generation on top of the propagation primitives.

Cells are visited in random order and each receives a random candidate; a
contradiction throws the whole attempt away.  Generation stops once enough
cells are resolved and at least 8 distinct digits appear among them.  The
result is not guaranteed to be solvable or to have a unique solution;
empirically nearly all of them are solvable.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from .board import Board
from .grid import to_string
from .project_config import get_config
from .propagate import assign
from .topology import get_topology

_LOGGER = logging.getLogger(__name__)

CONFIG = get_config()
GENERATOR_CONFIG = CONFIG.get("generator", {})
DEFAULT_MIN_GIVEN = int(GENERATOR_CONFIG.get("min_given", 17))
MIN_DISTINCT_DIGITS = 8


def _enough(board: Board, min_given: int) -> bool:
    if board.resolved_count() < min_given:
        return False
    digits = {mask for mask in board.masks if mask.bit_count() == 1}
    return len(digits) >= MIN_DISTINCT_DIGITS


def _attempt(rng: random.Random, min_given: int) -> Optional[str]:
    topo = get_topology()
    board = Board.full()
    cells = list(topo.cells)
    rng.shuffle(cells)
    for cell in cells:
        digit = rng.choice(board.candidates(cell))
        if not assign(board, cell, digit, topo):
            return None
        if _enough(board, min_given):
            return to_string(board, blank=".")
    return None


def random_puzzle(
    min_given: int = DEFAULT_MIN_GIVEN,
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> str:
    """Make a random puzzle with ``min_given`` or more resolved cells.

    Pass ``rng`` or ``seed`` for reproducible output.
    """
    if not 1 <= min_given <= 81:
        raise ValueError(f"min_given must be in [1, 81], got {min_given!r}")
    rng = rng or random.Random(seed)
    restarts = 0
    while True:
        puzzle = _attempt(rng, min_given)
        if puzzle is not None:
            _LOGGER.debug("generated puzzle after %d restart(s)", restarts)
            return puzzle
        restarts += 1


__all__ = ["DEFAULT_MIN_GIVEN", "MIN_DISTINCT_DIGITS", "random_puzzle"]
