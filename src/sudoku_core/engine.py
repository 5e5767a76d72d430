"""Caller-facing puzzle engine.

:class:`PuzzleEngine` owns the live puzzle, the givens it was dealt and a
cached solution.  Presentation layers drive it through a small API: deal a new
puzzle, read a copy of the grid, place or clear digits, ask whether a digit
is correct, request hints and let the engine solve the puzzle.  No method
hands out a reference to an internal grid.
"""

from __future__ import annotations

import logging
import os
import random
from typing import Iterator, Mapping, Optional, Tuple

import telemetry
from contracts.errors import InvalidMoveError, UnsolvablePuzzleError
from contracts.validator import assert_valid_grid
from feature_flags import reuses_generation_order

from .generator import Difficulty, GeneratedPuzzle, default_difficulty, generate_puzzle
from .grid import DIGITS, EMPTY, SIZE, Grid, grid_copy, print_grid
from .search import solve
from .steps import SolveStep, iter_solve_steps

_LOGGER = logging.getLogger(__name__)


class PuzzleEngine:
    """Single Sudoku game: puzzle, givens and solution."""

    def __init__(
        self,
        difficulty: "Difficulty | str | None" = None,
        *,
        seed: Optional[int] = None,
        env: Mapping[str, str] | None = None,
        deal: bool = True,
    ) -> None:
        self._seed = seed
        self._rng = random.Random(seed)
        self._env = dict(os.environ if env is None else env)
        self._difficulty: Optional[Difficulty] = None
        self._puzzle: Grid = []
        self._givens: Grid = []
        self._solution: Optional[Grid] = None
        self._digit_order: Tuple[int, ...] = DIGITS
        self._solved: Optional[bool] = None
        self.last_generation: Optional[GeneratedPuzzle] = None
        if deal:
            self.new_puzzle(default_difficulty() if difficulty is None else difficulty)

    @classmethod
    def from_grid(cls, grid: Grid, *, env: Mapping[str, str] | None = None) -> "PuzzleEngine":
        """Wrap an externally supplied puzzle.

        The grid is validated first; its solution is computed on demand.
        """

        assert_valid_grid(grid)
        engine = cls(env=env, deal=False)
        engine._load(grid_copy(grid), solution=None, order=DIGITS, difficulty=None)
        return engine

    # ---------- Puzzle lifecycle ----------

    def new_puzzle(self, difficulty: "Difficulty | str") -> None:
        """Replace the current puzzle with a freshly generated one."""

        generated = generate_puzzle(difficulty, rng=self._rng)
        self.last_generation = generated
        self._load(
            generated.puzzle,
            solution=generated.solution,
            order=generated.digit_order,
            difficulty=generated.difficulty,
        )
        telemetry.append_event(
            {
                "event": "generate",
                "difficulty": generated.difficulty.value,
                "seed": self._seed,
                "attempted": generated.attempted,
                "removed": generated.removed,
                "restored": generated.restored,
                "clues": generated.clues,
                "elapsed_ms": generated.elapsed_ms,
            }
        )

    def _load(
        self,
        puzzle: Grid,
        *,
        solution: Optional[Grid],
        order: Tuple[int, ...],
        difficulty: Optional[Difficulty],
    ) -> None:
        self._puzzle = puzzle
        self._givens = grid_copy(puzzle)
        self._solution = None if solution is None else grid_copy(solution)
        self._digit_order = tuple(order)
        self._difficulty = difficulty
        self._solved = None

    @property
    def difficulty(self) -> Optional[Difficulty]:
        return self._difficulty

    @property
    def digit_order(self) -> Tuple[int, ...]:
        return self._digit_order

    def current_grid(self) -> Grid:
        return grid_copy(self._puzzle)

    def givens(self) -> Grid:
        return grid_copy(self._givens)

    def is_given(self, row: int, col: int) -> bool:
        self._check_cell(row, col)
        return self._givens[row][col] != EMPTY

    # ---------- Caller moves ----------

    @staticmethod
    def _check_cell(row: int, col: int) -> None:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise InvalidMoveError(f"cell ({row}, {col}) is outside the 9x9 grid")

    def place_value(self, row: int, col: int, value: int) -> None:
        """Write ``value`` (1-9) into a non-given cell, or clear it with ``0``."""

        self._check_cell(row, col)
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= SIZE:
            raise InvalidMoveError(f"value must be an integer in [0, 9], got {value!r}")
        if self._givens[row][col] != EMPTY:
            raise InvalidMoveError(f"cell ({row}, {col}) holds a given digit")
        self._puzzle[row][col] = value
        self._solved = None

    # ---------- Solution queries ----------

    def _ensure_solution(self) -> Grid:
        if self._solution is None:
            candidate = grid_copy(self._givens)
            if not solve(candidate, self._digit_order):
                raise UnsolvablePuzzleError("the current puzzle has no solution")
            self._solution = candidate
        return self._solution

    def solution(self) -> Grid:
        return grid_copy(self._ensure_solution())

    def is_value_valid(self, value: int, col: int, row: int) -> bool:
        """Return ``True`` when ``value`` is the solution digit at (``row``, ``col``)."""

        self._check_cell(row, col)
        return self._ensure_solution()[row][col] == value

    def is_value_correct(self, row: int, col: int, value: int) -> bool:
        return self.is_value_valid(value, col, row)

    def get_solution_cell(self, row: int, col: int) -> int:
        self._check_cell(row, col)
        return self._ensure_solution()[row][col]

    def hint_for(self, row: int, col: int) -> int:
        return self.get_solution_cell(row, col)

    # ---------- Solved state ----------

    def is_solved(self) -> bool:
        """Return ``True`` once no cell of the live puzzle is empty."""

        if self._solved is None:
            self._solved = all(v != EMPTY for row in self._puzzle for v in row)
        return self._solved

    def is_complete(self) -> bool:
        """Return ``True`` when the puzzle is filled in and matches the solution."""

        return self.is_solved() and self._puzzle == self._ensure_solution()

    # ---------- Engine-driven solving ----------

    def replay_order(self) -> Tuple[int, ...]:
        """Digit order used when the engine solves on the caller's behalf."""

        if self._difficulty is not None and reuses_generation_order(self._difficulty.value, self._env):
            return self._digit_order
        return DIGITS

    def solve_in_place(self) -> bool:
        """Solve the live puzzle, keeping any digits the caller placed."""

        solved = solve(self._puzzle, self.replay_order())
        self._solved = None
        if not solved and self._puzzle == self._givens and self._difficulty is not None:
            _LOGGER.error("generated %s puzzle has no solution", self._difficulty.value)
        return solved

    def replay_solve(self) -> Iterator[SolveStep]:
        """Yield the steps of solving a copy of the live puzzle.

        Steps carry whether each placed digit matches the solution.  The live
        puzzle is not modified.
        """

        return iter_solve_steps(self.current_grid(), self.replay_order(), solution=self._ensure_solution())

    def __str__(self) -> str:
        return print_grid(self._puzzle)


__all__ = ["PuzzleEngine"]
