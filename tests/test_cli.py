from __future__ import annotations

import json

import pytest

from sudoku_cp.cli import EXIT_FORMAT_ERROR, EXIT_NO_SOLUTION, EXIT_OK, EXIT_SELFTEST_FAILED, main

GRID1 = "003020600900305001001806400008102900700000008006708200002609500800203009005010300"
SOLUTION1 = "483921657967345821251876493548132976729564138136798245372689514814253769695417382"


def test_solve_prints_solution(capsys) -> None:
    assert main(["solve", GRID1]) == EXIT_OK
    assert capsys.readouterr().out.strip() == SOLUTION1


def test_solve_reports_no_solution(capsys) -> None:
    assert main(["solve", "55" + "." * 79]) == EXIT_NO_SOLUTION
    assert capsys.readouterr().out.strip() == "no solution"


def test_solve_reports_format_error(capsys) -> None:
    assert main(["solve", "123"]) == EXIT_FORMAT_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "format error" in captured.err


def test_generate_prints_requested_count(capsys) -> None:
    assert main(["generate", "--count", "3", "--seed", "7", "--min-given", "20"]) == EXIT_OK
    lines = capsys.readouterr().out.split()
    assert len(lines) == 3
    assert all(len(line) == 81 and sum(ch != "." for ch in line) >= 20 for line in lines)


def test_bench_prints_summary(tmp_path, capsys) -> None:
    path = tmp_path / "easy.txt"
    path.write_text(GRID1 + "\n" + GRID1 + "\n", encoding="utf-8")
    assert main(["bench", str(path)]) == EXIT_OK
    payload = json.loads(capsys.readouterr().out)
    assert payload["name"] == "easy"
    assert payload["count"] == 2
    assert payload["solved"] == 2


def test_selftest_passes(capsys) -> None:
    assert main(["selftest"]) == EXIT_OK
    assert "All tests pass" in capsys.readouterr().out


def test_selftest_failure_has_its_own_exit_code(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sudoku_cp.cli.verify", lambda topology: ["A1 has 19 peers"])
    code = main(["selftest"])
    assert code == EXIT_SELFTEST_FAILED
    assert code not in (EXIT_OK, EXIT_NO_SOLUTION, EXIT_FORMAT_ERROR)
    assert "A1 has 19 peers" in capsys.readouterr().err


def test_bench_random_solves_generated_puzzles(capsys) -> None:
    assert main(["bench", "--random", "3", "--seed", "11", "--min-given", "25"]) == EXIT_OK
    payload = json.loads(capsys.readouterr().out)
    assert payload["name"] == "random"
    assert payload["count"] == 3
    assert 0 <= payload["solved"] <= 3


def test_bench_needs_a_source() -> None:
    with pytest.raises(SystemExit):
        main(["bench"])
