"""Backtracking solver and bounded uniqueness search."""

from __future__ import annotations

from sudoku_core.grid import empty_grid, from_string, grid_copy
from sudoku_core.search import SearchContext, count_solutions, has_unique_solution, solve

PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)
SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)
SOLVED = (
    "123456789"
    "456789123"
    "789123456"
    "214365897"
    "365897214"
    "897214365"
    "531642978"
    "642978531"
    "978531642"
)


def _two_solution_grid() -> list:
    # Digits 1 and 2 form a swappable rectangle at rows 0/3, columns 0/1.
    grid = from_string(SOLVED)
    for r, c in ((0, 0), (0, 1), (3, 0), (3, 1)):
        grid[r][c] = 0
    return grid


def test_solve_fills_known_puzzle() -> None:
    grid = from_string(PUZZLE)
    assert solve(grid) is True
    assert grid == from_string(SOLUTION)


def test_solve_with_shuffled_order_reaches_same_unique_solution() -> None:
    grid = from_string(PUZZLE)
    assert solve(grid, (9, 1, 8, 2, 7, 3, 6, 4, 5)) is True
    assert grid == from_string(SOLUTION)


def test_solve_empty_grid_follows_digit_order() -> None:
    grid = empty_grid()
    order = (3, 1, 4, 5, 9, 2, 6, 8, 7)
    assert solve(grid, order) is True
    assert grid[0] == list(order)


def test_solve_rejects_duplicate_in_row_without_touching_grid() -> None:
    grid = from_string(PUZZLE)
    grid[0][2] = 5
    before = grid_copy(grid)
    ctx = SearchContext()
    assert solve(grid, context=ctx) is False
    assert grid == before
    assert ctx.placements == 0


def test_solve_dead_end_resets_cells() -> None:
    grid = empty_grid()
    grid[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    grid[1][8] = 9
    before = grid_copy(grid)
    assert solve(grid) is False
    assert grid == before


def test_solve_on_full_grid_is_trivial() -> None:
    grid = from_string(SOLVED)
    assert solve(grid) is True
    assert grid == from_string(SOLVED)


def test_unique_puzzle_reports_one_solution() -> None:
    grid = from_string(PUZZLE)
    assert count_solutions(grid) == 1
    assert has_unique_solution(grid) is True
    assert grid == from_string(PUZZLE)


def test_two_solutions_stop_after_second() -> None:
    grid = _two_solution_grid()
    ctx = SearchContext()
    assert has_unique_solution(grid, context=ctx) is False
    assert ctx.solutions == 2
    # Each completion needs four placements; nothing beyond the second is tried.
    assert ctx.placements == 8
    assert grid == _two_solution_grid()


def test_counting_is_capped_on_open_grid() -> None:
    assert count_solutions(empty_grid()) == 2


def test_conflicting_givens_have_no_solution() -> None:
    grid = from_string(SOLVED)
    grid[4][4] = grid[4][3]
    assert count_solutions(grid) == 0
    assert has_unique_solution(grid) is False


def test_context_is_reset_between_calls() -> None:
    ctx = SearchContext()
    has_unique_solution(_two_solution_grid(), context=ctx)
    assert has_unique_solution(from_string(PUZZLE), context=ctx) is True
    assert ctx.solutions == 1
