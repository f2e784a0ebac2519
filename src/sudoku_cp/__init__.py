"""Constraint-propagation Sudoku solver with MRV backtracking search."""

from __future__ import annotations

from .board import CONTRADICTION, Board, Contradiction
from .errors import EventValidationError, FormatError
from .generator import random_puzzle
from .grid import from_file, grid_values, parse_grid, to_string
from .propagate import assign, eliminate
from .search import SearchStats, search, solve, solved
from .topology import Topology, build_topology, get_topology

__all__ = [
    "Board",
    "CONTRADICTION",
    "Contradiction",
    "EventValidationError",
    "FormatError",
    "SearchStats",
    "Topology",
    "assign",
    "build_topology",
    "eliminate",
    "from_file",
    "get_topology",
    "grid_values",
    "parse_grid",
    "random_puzzle",
    "search",
    "solve",
    "solved",
    "to_string",
]
