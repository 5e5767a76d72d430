"""Backtracking search over a single mutable grid.

Both the solver and the uniqueness check walk the grid the same way: find the
next empty cell starting from a resumable cursor, try candidate digits in a
caller-supplied order, recurse, and undo the placement on failure.  They only
differ in when they stop.  All per-call state (cursor, solution counter,
digit order) lives in a :class:`SearchContext` owned by the top-level call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .grid import DIGITS, EMPTY, ORIGIN, Grid, Position, find_empty, grid_copy, is_consistent, is_valid


@dataclass
class SearchContext:
    """Mutable state of one top-level search invocation."""

    order: Tuple[int, ...] = DIGITS
    cursor: Position = ORIGIN
    solutions: int = 0
    placements: int = 0

    def reset(self, order: Sequence[int] | None = None) -> None:
        if order is not None:
            self.order = tuple(order)
        self.cursor = ORIGIN
        self.solutions = 0
        self.placements = 0


def _prepare(order: Sequence[int], context: Optional[SearchContext]) -> SearchContext:
    ctx = context if context is not None else SearchContext()
    ctx.reset(order)
    return ctx


# ---------- Solver ----------

def _solve(grid: Grid, ctx: SearchContext) -> bool:
    position = find_empty(grid, ctx.cursor)
    if position is None:
        return True

    ctx.cursor = position
    r, c = position
    for digit in ctx.order:
        if is_valid(grid, digit, position):
            grid[r][c] = digit
            ctx.placements += 1
            if _solve(grid, ctx):
                return True
            # backtrack and resume the scan from this cell
            grid[r][c] = EMPTY
            ctx.cursor = position
    return False


def solve(grid: Grid, order: Sequence[int] = DIGITS, *, context: Optional[SearchContext] = None) -> bool:
    """Fill ``grid`` in place and return ``True`` on success.

    Digits are tried in ``order`` at every cell.  A grid whose givens already
    conflict is reported unsolvable without searching.  When the search fails
    every cell it filled is reset to ``0``.
    """

    ctx = _prepare(order, context)
    if not is_consistent(grid):
        return False
    return _solve(grid, ctx)


# ---------- Uniqueness (count up to 2) ----------

def _count(grid: Grid, ctx: SearchContext) -> bool:
    # The return value only unwinds the recursion once a second solution is found.
    position = find_empty(grid, ctx.cursor)
    if position is None:
        ctx.solutions += 1
        return True

    ctx.cursor = position
    r, c = position
    for digit in ctx.order:
        if is_valid(grid, digit, position):
            grid[r][c] = digit
            ctx.placements += 1
            if _count(grid, ctx) and ctx.solutions > 1:
                return True
            grid[r][c] = EMPTY
            ctx.cursor = position
    return False


def count_solutions(grid: Grid, order: Sequence[int] = DIGITS, *, context: Optional[SearchContext] = None) -> int:
    """Return the number of completions of ``grid``, capped at 2.

    The search runs on a private copy; ``grid`` is left untouched.
    """

    ctx = _prepare(order, context)
    if not is_consistent(grid):
        return 0
    _count(grid_copy(grid), ctx)
    return ctx.solutions


def has_unique_solution(grid: Grid, order: Sequence[int] = DIGITS, *, context: Optional[SearchContext] = None) -> bool:
    return count_solutions(grid, order, context=context) == 1


__all__ = [
    "SearchContext",
    "count_solutions",
    "has_unique_solution",
    "solve",
]
