"""Constraint propagation: the ``assign`` / ``eliminate`` pair.

Both operations mutate the board in place and return it, or return
:data:`~sudoku_cp.board.CONTRADICTION` as soon as the board is proven
impossible.  Once a contradiction is reported the board is left half-updated
and must be discarded by the caller.

Every effective ``eliminate`` removes one candidate and candidate sets never
grow, so the mutual recursion terminates after at most 81 * 9 removals.
"""

from __future__ import annotations

from typing import Optional

from .board import CONTRADICTION, Board, BoardResult, bit, mask_digits
from .topology import Topology, get_topology


def assign(board: Board, cell: int, digit: int, topology: Optional[Topology] = None) -> BoardResult:
    """Eliminate every digit other than ``digit`` from ``cell`` and propagate."""
    topo = topology or get_topology()
    others = board.masks[cell] & ~bit(digit)
    for d2 in mask_digits(others):
        if not eliminate(board, cell, d2, topo):
            return CONTRADICTION
    return board


def eliminate(board: Board, cell: int, digit: int, topology: Optional[Topology] = None) -> BoardResult:
    """Remove ``digit`` from ``cell``; propagate forced and hidden singles."""
    topo = topology or get_topology()
    masks = board.masks
    b = bit(digit)
    if not masks[cell] & b:
        return board  # already eliminated

    remaining = masks[cell] & ~b
    masks[cell] = remaining
    if not remaining:
        return CONTRADICTION  # removed last candidate

    # (1) cell reduced to one candidate d2: eliminate d2 from the peers
    if remaining & (remaining - 1) == 0:
        d2 = mask_digits(remaining)[0]
        for peer in topo.peers[cell]:
            if not eliminate(board, peer, d2, topo):
                return CONTRADICTION

    # (2) unit reduced to one place for digit: put it there
    for unit in topo.units[cell]:
        places = [other for other in unit if masks[other] & b]
        if not places:
            return CONTRADICTION  # no place left for digit
        if len(places) == 1:
            if not assign(board, places[0], digit, topo):
                return CONTRADICTION
    return board


__all__ = ["assign", "eliminate"]
