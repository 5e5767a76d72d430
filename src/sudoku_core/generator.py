# generator.py
# Build a random full solution, then dig cells out of it while the puzzle
# keeps exactly one solution.

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from project_config import get_section

from .grid import DIGITS, EMPTY, SIZE, Grid, count_empty, empty_grid, grid_copy
from .search import SearchContext, has_unique_solution, solve

_LOGGER = logging.getLogger(__name__)

DEFAULT_BUDGETS = {
    "easy": 30,
    "medium": 45,
    "hard": 60,
    "very_hard": SIZE * SIZE,
}


class Difficulty(str, Enum):
    """Puzzle difficulty; selects how many cells the digger attempts to clear."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    VERY_HARD = "very_hard"

    @classmethod
    def parse(cls, value: "str | Difficulty") -> "Difficulty":
        if isinstance(value, Difficulty):
            return value
        key = str(value).strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return cls(key)
        except ValueError as exc:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {value!r}; expected one of: {choices}") from exc

    @property
    def removal_budget(self) -> int:
        budgets = get_section("generator.budgets", {})
        budget = int(budgets.get(self.value, DEFAULT_BUDGETS[self.value]))
        return max(0, min(SIZE * SIZE, budget))


def default_difficulty() -> Difficulty:
    return Difficulty.parse(get_section("generator.default_difficulty", Difficulty.MEDIUM.value))


@dataclass(frozen=True)
class GeneratedPuzzle:
    """Outcome of a single generation run."""

    puzzle: Grid
    solution: Grid
    difficulty: Difficulty
    digit_order: Tuple[int, ...]
    attempted: int
    removed: int
    restored: int
    elapsed_ms: int
    seed: Optional[int] = None

    @property
    def clues(self) -> int:
        return SIZE * SIZE - count_empty(self.puzzle)


# ---------- Full solution ----------

def generate_full_solution(
    rng: random.Random,
    order: Optional[Sequence[int]] = None,
) -> Tuple[Grid, Tuple[int, ...]]:
    """Solve an empty grid with a shuffled digit order.

    Returns the solved grid and the order that produced it.  The order is
    shuffled with ``rng`` unless one is supplied.
    """

    if order is None:
        digits = list(DIGITS)
        rng.shuffle(digits)
        order = digits
    order = tuple(order)

    grid = empty_grid()
    if not solve(grid, order):  # pragma: no cover - an empty grid always solves
        raise RuntimeError("failed to fill an empty grid")
    return grid, order


# ---------- Digging ----------

def dig(
    solution: Grid,
    budget: int,
    rng: random.Random,
    order: Sequence[int] = DIGITS,
) -> Tuple[Grid, int, int]:
    """Clear up to ``budget`` cells of ``solution`` keeping the puzzle unique.

    Positions are visited in a shuffled order; a cleared cell whose removal
    admits a second solution gets its digit back.  Returns the puzzle, the
    number of cells removed and the number restored.
    """

    puzzle = grid_copy(solution)
    positions: List[int] = list(range(SIZE * SIZE))
    rng.shuffle(positions)

    ctx = SearchContext()
    removed = restored = 0
    for pos in positions[:budget]:
        r, c = divmod(pos, SIZE)
        value = puzzle[r][c]
        puzzle[r][c] = EMPTY

        if has_unique_solution(puzzle, order, context=ctx):
            removed += 1
        else:
            puzzle[r][c] = value
            restored += 1
    return puzzle, removed, restored


# ---------- Top-level generation ----------

def generate_puzzle(
    difficulty: "Difficulty | str" = Difficulty.MEDIUM,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> GeneratedPuzzle:
    """Generate a puzzle with exactly one solution.

    ``rng`` takes precedence over ``seed``; with neither the system entropy
    seeds a fresh generator.
    """

    level = Difficulty.parse(difficulty)
    if rng is None:
        rng = random.Random(seed)

    t0 = time.perf_counter()
    solution, order = generate_full_solution(rng)
    budget = level.removal_budget
    puzzle, removed, restored = dig(solution, budget, rng, order)
    elapsed_ms = int((time.perf_counter() - t0) * 1000)

    _LOGGER.debug(
        "generated %s puzzle: removed=%d restored=%d clues=%d in %d ms",
        level.value,
        removed,
        restored,
        SIZE * SIZE - removed,
        elapsed_ms,
    )
    return GeneratedPuzzle(
        puzzle=puzzle,
        solution=solution,
        difficulty=level,
        digit_order=order,
        attempted=budget,
        removed=removed,
        restored=restored,
        elapsed_ms=elapsed_ms,
        seed=seed,
    )


__all__ = [
    "DEFAULT_BUDGETS",
    "Difficulty",
    "GeneratedPuzzle",
    "default_difficulty",
    "dig",
    "generate_full_solution",
    "generate_puzzle",
]
