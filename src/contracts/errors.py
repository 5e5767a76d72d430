"""Shared error types for grid validation and engine operations."""

from __future__ import annotations


from dataclasses import dataclass
from typing import List

SEVERITY_ERROR = "ERROR"
SEVERITY_WARN = "WARN"


@dataclass(frozen=True)
class ValidationIssue:
    """Single validation finding produced by a schema or invariant check."""

    code: str
    msg: str
    path: str
    severity: str


@dataclass(frozen=True)
class ValidationReport:
    """Aggregate result of validating one grid."""

    ok: bool
    errors: List[ValidationIssue]
    warnings: List[ValidationIssue]
    timings_ms: dict[str, int]


def make_error(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct an error-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_ERROR)


def make_warning(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct a warning-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_WARN)


class SudokuError(Exception):
    """Base class for errors raised by the Sudoku engine."""


class GridValidationError(SudokuError, ValueError):
    """Raised when a grid supplied from outside fails validation."""

    def __init__(self, message: str, report: ValidationReport) -> None:
        super().__init__(message)
        self.report = report


class InvalidMoveError(SudokuError, ValueError):
    """Raised when a caller asks for a placement the engine cannot accept."""


class UnsolvablePuzzleError(SudokuError, RuntimeError):
    """Raised when a solution is required but the puzzle has none."""


__all__ = [
    "SEVERITY_ERROR",
    "SEVERITY_WARN",
    "GridValidationError",
    "InvalidMoveError",
    "SudokuError",
    "UnsolvablePuzzleError",
    "ValidationIssue",
    "ValidationReport",
    "make_error",
    "make_warning",
]
