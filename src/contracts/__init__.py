"""Validation contracts and error types for the Sudoku engine."""

from __future__ import annotations

from .errors import (
    GridValidationError,
    InvalidMoveError,
    SudokuError,
    UnsolvablePuzzleError,
    ValidationIssue,
    ValidationReport,
)
from .validator import GRID_SCHEMA, MIN_UNIQUE_CLUES, assert_valid_grid, validate_grid

__all__ = [
    "GRID_SCHEMA",
    "MIN_UNIQUE_CLUES",
    "GridValidationError",
    "InvalidMoveError",
    "SudokuError",
    "UnsolvablePuzzleError",
    "ValidationIssue",
    "ValidationReport",
    "assert_valid_grid",
    "validate_grid",
]
