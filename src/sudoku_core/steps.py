"""Step-wise solve replay for external drivers.

:func:`iter_solve_steps` walks the same search as :func:`search.solve` but
yields a :class:`SolveStep` for every candidate it looks at, so a driver can
pause between steps and render progress.  The grid passed in is mutated as
the search proceeds, exactly like the batch solver.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence

from .grid import DIGITS, EMPTY, Grid, find_empty, is_consistent, is_valid
from .search import SearchContext


class StepKind(str, Enum):
    """What happened to a cell during replay."""

    PLACE = "PLACE"
    REJECT = "REJECT"
    BACKTRACK = "BACKTRACK"


@dataclass(frozen=True)
class SolveStep:
    """Single record emitted while replaying a solve."""

    kind: StepKind
    row: int
    col: int
    digit: int
    correct: Optional[bool] = None

    def to_payload(self) -> dict:
        payload = {"kind": self.kind.value, "row": self.row, "col": self.col, "digit": self.digit}
        if self.correct is not None:
            payload["correct"] = self.correct
        return payload


@dataclass
class StepTrace:
    """Accumulator for replayed steps, with the final outcome."""

    steps: List[SolveStep]
    solved: bool = False

    def count(self, kind: StepKind) -> int:
        return sum(1 for step in self.steps if step.kind is kind)


def iter_solve_steps(
    grid: Grid,
    order: Sequence[int] = DIGITS,
    *,
    solution: Optional[Grid] = None,
) -> Iterator[SolveStep]:
    """Yield the steps of a backtracking solve of ``grid``.

    ``REJECT`` marks a digit that conflicts with a peer, ``PLACE`` a digit
    written into the grid and ``BACKTRACK`` the removal of a placed digit.
    When ``solution`` is given, ``PLACE`` steps carry whether the digit
    matches it.  The generator's return value is ``True`` when the grid ends
    up fully assigned; a grid whose digits already conflict yields nothing
    and returns ``False``.
    """

    ctx = SearchContext()
    ctx.reset(order)
    if not is_consistent(grid):
        return False
    return (yield from _walk(grid, ctx, solution))


def _walk(grid: Grid, ctx: SearchContext, solution: Optional[Grid]) -> Iterator[SolveStep]:
    position = find_empty(grid, ctx.cursor)
    if position is None:
        return True

    ctx.cursor = position
    r, c = position
    for digit in ctx.order:
        if not is_valid(grid, digit, position):
            yield SolveStep(StepKind.REJECT, r, c, digit)
            continue

        grid[r][c] = digit
        ctx.placements += 1
        correct = None if solution is None else solution[r][c] == digit
        yield SolveStep(StepKind.PLACE, r, c, digit, correct)

        if (yield from _walk(grid, ctx, solution)):
            return True

        grid[r][c] = EMPTY
        ctx.cursor = position
        yield SolveStep(StepKind.BACKTRACK, r, c, digit)
    return False


def record_solve(grid: Grid, order: Sequence[int] = DIGITS, *, solution: Optional[Grid] = None) -> StepTrace:
    """Run :func:`iter_solve_steps` to completion and collect every step."""

    trace = StepTrace(steps=[])
    steps = iter_solve_steps(grid, order, solution=solution)
    while True:
        try:
            trace.steps.append(next(steps))
        except StopIteration as stop:
            trace.solved = bool(stop.value)
            return trace


__all__ = [
    "SolveStep",
    "StepKind",
    "StepTrace",
    "iter_solve_steps",
    "record_solve",
]
