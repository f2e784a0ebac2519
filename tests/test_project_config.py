from __future__ import annotations

import pytest

from sudoku_cp import project_config


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.toml"
    path.write_text('[generator]\nmin_given = 25\n\n[logging]\nlevel = "DEBUG"\n', encoding="utf-8")
    monkeypatch.setenv("SUDOKU_CP_CONFIG", str(path))
    project_config.reload()
    yield path
    monkeypatch.delenv("SUDOKU_CP_CONFIG")
    project_config.reload()


def test_sections_are_read_from_toml(config_file) -> None:
    assert project_config.get_section("generator.min_given") == 25
    assert project_config.get_config()["logging"]["level"] == "DEBUG"


def test_missing_path_uses_default_or_raises(config_file) -> None:
    assert project_config.get_section("benchmark.show_if", 0.5) == 0.5
    with pytest.raises(KeyError):
        project_config.get_section("benchmark.show_if")


def test_missing_file_is_an_empty_config(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("SUDOKU_CP_CONFIG", str(tmp_path / "absent.toml"))
    project_config.reload()
    try:
        assert project_config.get_config() == {}
    finally:
        monkeypatch.delenv("SUDOKU_CP_CONFIG")
        project_config.reload()
