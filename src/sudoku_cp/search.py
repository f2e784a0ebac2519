"""Depth-first MRV search driving the propagator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .board import CONTRADICTION, Board, BoardResult
from .grid import parse_grid
from .propagate import assign
from .topology import get_topology

_LOGGER = logging.getLogger(__name__)

_ALL_DIGITS = tuple(range(1, 10))


@dataclass
class SearchStats:
    """Counters accumulated over one search.

    ``nodes`` counts calls to :func:`search`, ``branches`` the trial
    assignments made on board copies and ``max_depth`` the deepest level of
    guessing reached (0 when propagation alone solved the puzzle).
    """

    nodes: int = 0
    branches: int = 0
    max_depth: int = 0

    def to_payload(self) -> dict:
        return {"nodes": self.nodes, "branches": self.branches, "max_depth": self.max_depth}


def _select_cell(board: Board) -> int:
    # MRV; strict ``<`` keeps the first (row-major) cell on ties
    best = -1
    best_count = 10
    for cell, mask in enumerate(board.masks):
        count = mask.bit_count()
        if 1 < count < best_count:
            best, best_count = cell, count
            if count == 2:
                break
    return best


def search(board: BoardResult, stats: Optional[SearchStats] = None, _depth: int = 0) -> BoardResult:
    """Return the first solution reachable from ``board``, or ``CONTRADICTION``.

    Candidate digits of the branching cell are tried in ascending order, each
    on an independent copy of the board.
    """
    if stats is not None:
        stats.nodes += 1
        if _depth > stats.max_depth:
            stats.max_depth = _depth
    if not board:
        return CONTRADICTION
    if board.is_complete():
        return board

    topo = get_topology()
    cell = _select_cell(board)
    for digit in board.candidates(cell):
        if stats is not None:
            stats.branches += 1
        result = search(assign(board.copy(), cell, digit, topo), stats, _depth + 1)
        if result:
            return result
    return CONTRADICTION


def solve(text: str, stats: Optional[SearchStats] = None) -> BoardResult:
    """Parse ``text`` and search it; malformed text raises ``FormatError``."""
    result = search(parse_grid(text), stats)
    _LOGGER.debug("solve finished: %s", "solved" if result else "no solution")
    return result


def solved(board: BoardResult) -> bool:
    """A board is solved when each unit is a permutation of the digits 1 to 9."""
    if not board:
        return False
    for unit in get_topology().unitlist:
        values = sorted(board.value(cell) or 0 for cell in unit)
        if tuple(values) != _ALL_DIGITS:
            return False
    return True


__all__ = ["SearchStats", "search", "solve", "solved"]
