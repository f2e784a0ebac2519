"""Command line entry point for solving, benchmarking and generating puzzles."""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import List, Sequence

from .benchmark import DEFAULT_SHOW_IF, solve_all
from .errors import FormatError
from .generator import DEFAULT_MIN_GIVEN, random_puzzle
from .grid import from_file, to_string
from .project_config import get_config
from .search import solve
from .topology import get_topology, verify

EXIT_OK = 0
EXIT_NO_SOLUTION = 1
EXIT_FORMAT_ERROR = 2
EXIT_SELFTEST_FAILED = 3


def _configure_logging() -> None:
    level = str(get_config().get("logging", {}).get("level", "INFO")).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def cmd_solve(args: argparse.Namespace) -> int:
    try:
        board = solve(args.grid)
    except FormatError as exc:
        print(f"format error: {exc}", file=sys.stderr)
        return EXIT_FORMAT_ERROR
    if not board:
        print("no solution")
        return EXIT_NO_SOLUTION
    print(to_string(board))
    return EXIT_OK


def _bench_grids(args: argparse.Namespace) -> tuple[List[str], str]:
    if args.random is not None:
        rng = random.Random(args.seed)
        grids = [random_puzzle(args.min_given, rng=rng) for _ in range(args.random)]
        return grids, args.name or "random"
    return from_file(Path(args.file), sep=args.sep), args.name or Path(args.file).stem


def cmd_bench(args: argparse.Namespace) -> int:
    grids, name = _bench_grids(args)
    try:
        summary = solve_all(grids, name, args.show_if, log_events=args.log_events or None)
    except FormatError as exc:
        print(f"format error: {exc}", file=sys.stderr)
        return EXIT_FORMAT_ERROR
    print(json.dumps(summary.to_payload(), indent=2, sort_keys=True))
    return EXIT_OK


def cmd_generate(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed)
    puzzles: List[str] = [random_puzzle(args.min_given, rng=rng) for _ in range(args.count)]
    for puzzle in puzzles:
        print(puzzle)
    return EXIT_OK


def cmd_selftest(args: argparse.Namespace) -> int:
    problems = verify(get_topology())
    for problem in problems:
        print(problem, file=sys.stderr)
    if problems:
        return EXIT_SELFTEST_FAILED
    print("All tests pass")
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sudoku-cp", description="Constraint-propagation Sudoku solver")
    sub = parser.add_subparsers(dest="command", required=True)

    solve_cmd = sub.add_parser("solve", help="Solve a single grid")
    solve_cmd.add_argument("grid", help="81 cells; 0 or . for blanks, other characters ignored")
    solve_cmd.set_defaults(func=cmd_solve)

    bench = sub.add_parser("bench", help="Solve a batch of grids and report timings")
    source = bench.add_mutually_exclusive_group(required=True)
    source.add_argument("file", nargs="?", default=None, help="File of grids")
    source.add_argument("--random", type=int, default=None, metavar="N", help="Solve N generated puzzles")
    bench.add_argument("--min-given", type=int, default=DEFAULT_MIN_GIVEN)
    bench.add_argument("--seed", type=int, default=None)
    bench.add_argument("--sep", default="\n", help="Separator between grids in the file")
    bench.add_argument("--name", default=None)
    bench.add_argument(
        "--show-if",
        type=float,
        default=DEFAULT_SHOW_IF,
        help="Log puzzles that take longer than this many seconds",
    )
    bench.add_argument(
        "--log-events",
        action="store_true",
        help="Append one JSONL solve event per puzzle",
    )
    bench.set_defaults(func=cmd_bench)

    generate = sub.add_parser("generate", help="Print random puzzles")
    generate.add_argument("--count", type=int, default=1)
    generate.add_argument("--min-given", type=int, default=DEFAULT_MIN_GIVEN)
    generate.add_argument("--seed", type=int, default=None)
    generate.set_defaults(func=cmd_generate)

    selftest = sub.add_parser("selftest", help="Check the constraint topology")
    selftest.set_defaults(func=cmd_selftest)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging()
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
