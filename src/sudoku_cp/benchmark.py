"""Batch solving with timing statistics."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from . import solve_log
from .board import BoardResult
from .grid import grid_values, to_string
from .project_config import get_config
from .search import SearchStats, solve, solved

_LOGGER = logging.getLogger(__name__)

BENCHMARK_CONFIG = get_config().get("benchmark", {})
DEFAULT_SHOW_IF = float(BENCHMARK_CONFIG.get("show_if", 0.0))


@dataclass(frozen=True)
class SolveOutcome:
    """Result of solving one grid."""

    grid: str
    seconds: float
    solved: bool
    stats: SearchStats
    board: BoardResult

    def to_event(self, name: str) -> dict:
        return {
            "name": name,
            "grid": "".join(grid_values(self.grid)),
            "solution": to_string(self.board) if self.solved else None,
            "solved": self.solved,
            "seconds": self.seconds,
            **self.stats.to_payload(),
        }


@dataclass
class BatchSummary:
    """Aggregate timings of a :func:`solve_all` run."""

    name: str
    count: int = 0
    solved: int = 0
    total_seconds: float = 0.0
    max_seconds: float = 0.0
    outcomes: List[SolveOutcome] = field(default_factory=list)

    @property
    def avg_seconds(self) -> float:
        return self.total_seconds / self.count if self.count else 0.0

    @property
    def hz(self) -> float:
        return self.count / self.total_seconds if self.total_seconds > 0 else 0.0

    def describe(self) -> str:
        return (
            f"Solved {self.solved} of {self.count} {self.name} puzzles "
            f"(avg {self.avg_seconds:.2f} secs ({self.hz:.0f} Hz), max {self.max_seconds:.2f} secs)."
        )

    def to_payload(self) -> dict:
        return {
            "name": self.name,
            "count": self.count,
            "solved": self.solved,
            "avg_seconds": self.avg_seconds,
            "max_seconds": self.max_seconds,
            "hz": self.hz,
        }


def time_solve(grid: str) -> SolveOutcome:
    stats = SearchStats()
    start = time.perf_counter()
    board = solve(grid, stats)
    elapsed = time.perf_counter() - start
    return SolveOutcome(grid=grid, seconds=elapsed, solved=solved(board), stats=stats, board=board)


def solve_all(
    grids: Iterable[str],
    name: str = "",
    show_if: Optional[float] = DEFAULT_SHOW_IF,
    *,
    log_events: Optional[bool] = None,
) -> BatchSummary:
    """Attempt to solve a sequence of grids and report results.

    When ``show_if`` is a positive number of seconds, puzzles that take longer
    are logged together with their solution.  ``FormatError`` from a malformed
    grid propagates to the caller.  ``log_events`` defaults to the
    ``[solve_log] enabled`` setting.
    """
    if log_events is None:
        log_events = solve_log.events_enabled()
    summary = BatchSummary(name=name)
    for grid in grids:
        outcome = time_solve(grid)
        summary.outcomes.append(outcome)
        summary.count += 1
        summary.solved += int(outcome.solved)
        summary.total_seconds += outcome.seconds
        summary.max_seconds = max(summary.max_seconds, outcome.seconds)
        if show_if and outcome.seconds > show_if:
            _LOGGER.info(
                "slow puzzle %s -> %s (%.2f seconds, %d nodes)",
                "".join(grid_values(grid)),
                to_string(outcome.board) if outcome.board else "no solution",
                outcome.seconds,
                outcome.stats.nodes,
            )
        if log_events:
            solve_log.append_event(outcome.to_event(name))
    if summary.count > 1:
        _LOGGER.info(summary.describe())
    return summary


__all__ = ["BatchSummary", "SolveOutcome", "solve_all", "time_solve"]
