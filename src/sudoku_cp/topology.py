"""Fixed constraint topology of the classic 9x9 Sudoku.

Cells are addressed by their row-major index ``0..80``.  The canonical
``A1``..``I9`` names are kept for display and tests: rows are lettered
``A``..``I`` top to bottom, columns numbered ``1``..``9`` left to right.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, List, Tuple

DIGITS = "123456789"
ROWS = "ABCDEFGHI"
COLS = DIGITS
BOX_ROWS = ("ABC", "DEF", "GHI")
BOX_COLS = ("123", "456", "789")

Unit = Tuple[int, ...]


def cross(rows: str, cols: str) -> Tuple[int, ...]:
    """Cell indexes of the cross product of ``rows`` and ``cols``."""
    return tuple(ROWS.index(r) * 9 + COLS.index(c) for r in rows for c in cols)


def cell_name(cell: int) -> str:
    row, col = divmod(cell, 9)
    return ROWS[row] + COLS[col]


def cell_index(name: str) -> int:
    if len(name) != 2 or name[0] not in ROWS or name[1] not in COLS:
        raise ValueError(f"Unknown cell name: {name!r}")
    return ROWS.index(name[0]) * 9 + COLS.index(name[1])


@dataclass(frozen=True)
class Topology:
    """Immutable cell/unit/peer structure shared by every solve.

    ``unitlist`` holds the 9 rows, then the 9 columns, then the 9 boxes.
    ``units[cell]`` lists the row, column and box containing ``cell`` in that
    order, and ``peers[cell]`` the 20 other cells sharing one of them.
    """

    cells: Tuple[int, ...]
    unitlist: Tuple[Unit, ...]
    units: Tuple[Tuple[Unit, ...], ...]
    peers: Tuple[FrozenSet[int], ...]


def build_topology() -> Topology:
    cells = cross(ROWS, COLS)
    unitlist = (
        tuple(cross(r, COLS) for r in ROWS)
        + tuple(cross(ROWS, c) for c in COLS)
        + tuple(cross(rs, cs) for rs in BOX_ROWS for cs in BOX_COLS)
    )
    units = tuple(tuple(u for u in unitlist if cell in u) for cell in cells)
    peers = tuple(
        frozenset(other for u in units[cell] for other in u if other != cell)
        for cell in cells
    )
    return Topology(cells=cells, unitlist=unitlist, units=units, peers=peers)


@lru_cache(maxsize=1)
def get_topology() -> Topology:
    """Return the process-wide topology, building it on first use."""
    return build_topology()


def verify(topology: Topology) -> List[str]:
    """Return structural problems of ``topology``; an empty list means sound."""
    problems: List[str] = []
    if len(topology.cells) != 81:
        problems.append(f"expected 81 cells, got {len(topology.cells)}")
    if len(topology.unitlist) != 27:
        problems.append(f"expected 27 units, got {len(topology.unitlist)}")
    for unit in topology.unitlist:
        if len(set(unit)) != 9:
            problems.append(f"unit {[cell_name(c) for c in unit]} does not hold 9 cells")
    for cell in topology.cells:
        name = cell_name(cell)
        if len(topology.units[cell]) != 3:
            problems.append(f"{name} belongs to {len(topology.units[cell])} units")
        if len(topology.peers[cell]) != 20:
            problems.append(f"{name} has {len(topology.peers[cell])} peers")
        if cell in topology.peers[cell]:
            problems.append(f"{name} is its own peer")
    return problems


__all__ = [
    "BOX_COLS",
    "BOX_ROWS",
    "COLS",
    "DIGITS",
    "ROWS",
    "Topology",
    "Unit",
    "build_topology",
    "cell_index",
    "cell_name",
    "cross",
    "get_topology",
    "verify",
]
