"""Unique-solution 9x9 Sudoku engine: validity, search and generation."""

from __future__ import annotations

from .engine import PuzzleEngine
from .generator import Difficulty, GeneratedPuzzle, dig, generate_full_solution, generate_puzzle
from .grid import (
    DIGITS,
    Grid,
    Position,
    find_conflicts,
    find_empty,
    from_string,
    grid_copy,
    is_consistent,
    is_valid,
    print_grid,
    to_string,
)
from .search import SearchContext, count_solutions, has_unique_solution, solve
from .steps import SolveStep, StepKind, StepTrace, iter_solve_steps, record_solve

__all__ = [
    "DIGITS",
    "Difficulty",
    "GeneratedPuzzle",
    "Grid",
    "Position",
    "PuzzleEngine",
    "SearchContext",
    "SolveStep",
    "StepKind",
    "StepTrace",
    "count_solutions",
    "dig",
    "find_conflicts",
    "find_empty",
    "from_string",
    "generate_full_solution",
    "generate_puzzle",
    "grid_copy",
    "has_unique_solution",
    "is_consistent",
    "is_valid",
    "iter_solve_steps",
    "print_grid",
    "record_solve",
    "solve",
    "to_string",
]
