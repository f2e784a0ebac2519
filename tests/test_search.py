from __future__ import annotations

from sudoku_cp.board import CONTRADICTION, Board, bit
from sudoku_cp.grid import parse_grid, to_string
from sudoku_cp.search import SearchStats, _select_cell, search, solve, solved

GRID1 = "003020600900305001001806400008102900700000008006708200002609500800203009005010300"
SOLUTION1 = "483921657967345821251876493548132976729564138136798245372689514814253769695417382"
GRID2 = "4.....8.5.3..........7......2.....6.....8.4......1.......6.3.7.5..2.....1.4......"


def _board(text: str) -> Board:
    return Board([bit(int(ch)) for ch in text])


def test_easy_grid_solves_to_known_solution() -> None:
    result = solve(GRID1)
    assert solved(result)
    assert to_string(result) == SOLUTION1


def test_search_needed_grid_is_solved_and_keeps_givens() -> None:
    stats = SearchStats()
    result = search(parse_grid(GRID2), stats)
    assert solved(result)
    rendered = to_string(result)
    assert all(given in ".0" or given == cell for given, cell in zip(GRID2, rendered))
    assert stats.nodes > 1
    assert stats.branches == stats.nodes - 1
    assert stats.max_depth >= 1


def test_search_is_deterministic() -> None:
    assert to_string(solve(GRID2)) == to_string(solve(GRID2))


def test_search_does_not_mutate_its_input() -> None:
    board = parse_grid(GRID2)
    snapshot = board.masks[:]
    assert search(board)
    assert board.masks == snapshot


def test_contradiction_propagates() -> None:
    stats = SearchStats()
    assert search(CONTRADICTION, stats) is CONTRADICTION
    assert stats.nodes == 1
    assert solve("55" + "." * 79) is CONTRADICTION


def test_solved_board_is_returned_as_is() -> None:
    board = _board(SOLUTION1)
    assert search(board) is board


def test_solved_requires_every_unit_to_be_a_permutation() -> None:
    assert solved(_board(SOLUTION1))
    swapped = SOLUTION1[1] + SOLUTION1[0] + SOLUTION1[2:]
    assert not solved(_board(swapped))
    assert not solved(Board.full())
    assert not solved(CONTRADICTION)


def test_mrv_prefers_fewest_candidates_then_row_major() -> None:
    board = _board(SOLUTION1)
    board.masks[30] = bit(1) | bit(2) | bit(3)
    board.masks[12] = bit(4) | bit(5)
    board.masks[7] = bit(6) | bit(7)
    assert _select_cell(board) == 7
    board.masks[7] = bit(6)
    assert _select_cell(board) == 12
