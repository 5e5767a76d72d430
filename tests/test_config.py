from __future__ import annotations

import pytest

import project_config
from sudoku_core.generator import Difficulty, default_difficulty


@pytest.fixture(autouse=True)
def _fresh_config():
    project_config.reload()
    yield
    project_config.reload()


def test_budgets_are_read_from_project_config() -> None:
    assert project_config.get_section("generator.budgets.easy") == 30
    assert project_config.get_section("generator.budgets") == {
        "easy": 30,
        "medium": 45,
        "hard": 60,
        "very_hard": 81,
    }


def test_missing_path_uses_default_or_raises() -> None:
    assert project_config.get_section("events.dir") == ""
    assert project_config.get_section("generator.nope", default="") == ""
    with pytest.raises(KeyError):
        project_config.get_section("generator.nope")


def test_config_file_can_be_overridden(tmp_path, monkeypatch) -> None:
    path = tmp_path / "alt.toml"
    path.write_text('[generator]\ndefault_difficulty = "easy"\n', encoding="utf-8")
    monkeypatch.setenv("SUDOKU_CONFIG", str(path))
    project_config.reload()
    assert project_config.config_path() == path
    assert project_config.get_section("generator.default_difficulty") == "easy"


def test_missing_config_file_is_reported(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("SUDOKU_CONFIG", str(tmp_path / "absent.toml"))
    project_config.reload()
    with pytest.raises(RuntimeError):
        project_config.get_config()


def test_missing_project_config_falls_back_to_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("SUDOKU_CONFIG", raising=False)
    monkeypatch.setattr(project_config, "_PROJECT_ROOT", tmp_path)
    project_config.reload()
    assert project_config.get_config() == {}
    assert project_config.get_section("generator.budgets", {}) == {}
    assert Difficulty.EASY.removal_budget == 30
    assert Difficulty.VERY_HARD.removal_budget == 81
    assert default_difficulty() is Difficulty.MEDIUM
