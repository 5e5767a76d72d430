from __future__ import annotations

from sudoku_core.grid import count_empty, empty_grid, from_string, grid_copy
from sudoku_core.search import SearchContext, solve
from sudoku_core.steps import SolveStep, StepKind, iter_solve_steps, record_solve

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


def test_replay_matches_batch_solver() -> None:
    ctx = SearchContext()
    batch = from_string(PUZZLE)
    solve(batch, context=ctx)

    grid = from_string(PUZZLE)
    trace = record_solve(grid, solution=from_string(SOLUTION))

    assert trace.solved is True
    assert grid == batch == from_string(SOLUTION)
    assert trace.count(StepKind.PLACE) == ctx.placements
    net = trace.count(StepKind.PLACE) - trace.count(StepKind.BACKTRACK)
    assert net == count_empty(from_string(PUZZLE))


def test_place_steps_report_correctness() -> None:
    solution = from_string(SOLUTION)
    for step in iter_solve_steps(from_string(PUZZLE), solution=solution):
        if step.kind is StepKind.PLACE:
            assert step.correct is (solution[step.row][step.col] == step.digit)
        else:
            assert step.correct is None


def test_dead_cell_rejects_every_digit() -> None:
    grid = empty_grid()
    grid[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    grid[1][8] = 9
    trace = record_solve(grid)
    assert trace.solved is False
    assert trace.count(StepKind.REJECT) == 9
    assert trace.count(StepKind.PLACE) == 0
    assert grid[0][8] == 0


def test_step_payload() -> None:
    step = SolveStep(StepKind.PLACE, 2, 3, 7, correct=True)
    assert step.to_payload() == {"kind": "PLACE", "row": 2, "col": 3, "digit": 7, "correct": True}
    assert "correct" not in SolveStep(StepKind.REJECT, 0, 0, 1).to_payload()


def test_conflicting_full_grid_is_not_reported_solved() -> None:
    grid = from_string(SOLUTION)
    grid[0][1] = 5
    before = grid_copy(grid)
    trace = record_solve(grid)
    assert trace.solved is False
    assert trace.steps == []
    assert grid == before
    assert solve(grid_copy(grid)) is False


def test_conflicting_sparse_grid_stops_immediately() -> None:
    grid = empty_grid()
    grid[0][0] = grid[0][1] = 1
    trace = record_solve(grid)
    assert trace.solved is False
    assert trace.steps == []
