"""Boundary validation for grids supplied from outside the engine."""

from __future__ import annotations

import time
from typing import Any, Dict, List

import jsonschema

from .errors import GridValidationError, ValidationIssue, ValidationReport, make_error, make_warning

GRID_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "sudoku-9x9/grid@1",
    "title": "Sudoku 9x9 grid",
    "type": "array",
    "minItems": 9,
    "maxItems": 9,
    "items": {
        "type": "array",
        "minItems": 9,
        "maxItems": 9,
        "items": {"type": "integer", "minimum": 0, "maximum": 9},
    },
}

# No grid with fewer givens has a unique solution.
MIN_UNIQUE_CLUES = 17

_VALIDATOR = jsonschema.Draft202012Validator(GRID_SCHEMA)


def _jsonschema_path(exc: jsonschema.ValidationError) -> str:
    components: List[str] = ["$"]
    for part in exc.absolute_path:
        if isinstance(part, int):
            components.append(f"[{part}]")
        else:
            components.append(f".{part}")
    return "".join(components)


def _schema_stage(grid: Any) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for exc in sorted(_VALIDATOR.iter_errors(grid), key=lambda e: list(e.absolute_path)):
        issues.append(make_error(f"schema.{exc.validator}", exc.message, _jsonschema_path(exc)))
    return issues


def _invariant_stage(grid: List[List[int]]) -> List[ValidationIssue]:
    # Imported lazily: the engine package itself depends on contracts.
    from sudoku_core.grid import find_conflicts

    return [
        make_error(
            "grid.conflict",
            f"digit {grid[r][c]} repeats in the row, column or box of cell ({r}, {c})",
            f"$[{r}][{c}]",
        )
        for r, c in find_conflicts(grid)
    ]


def _clue_warnings(grid: List[List[int]]) -> List[ValidationIssue]:
    clues = sum(1 for row in grid for v in row if v)
    if clues >= MIN_UNIQUE_CLUES:
        return []
    return [
        make_warning(
            "grid.few_clues",
            f"{clues} givens cannot determine a unique solution (at least {MIN_UNIQUE_CLUES} are needed)",
            "$",
        )
    ]


def validate_grid(grid: Any) -> ValidationReport:
    """Check the shape, value range and givens consistency of ``grid``.

    The invariant stage only runs when the schema stage passes; it also warns
    when the grid holds too few givens to have a unique solution.
    """

    timings = {"schema": 0, "invariants": 0}

    schema_start = time.perf_counter()
    errors = _schema_stage(grid)
    timings["schema"] = int((time.perf_counter() - schema_start) * 1000)

    warnings: List[ValidationIssue] = []
    if not errors:
        invariants_start = time.perf_counter()
        errors.extend(_invariant_stage(grid))
        warnings.extend(_clue_warnings(grid))
        timings["invariants"] = int((time.perf_counter() - invariants_start) * 1000)

    return ValidationReport(ok=not errors, errors=errors, warnings=warnings, timings_ms=timings)


def assert_valid_grid(grid: Any) -> None:
    """Raise :class:`GridValidationError` when ``grid`` fails validation."""

    report = validate_grid(grid)
    if report.ok:
        return
    codes = ", ".join(issue.code for issue in report.errors[:5])
    if len(report.errors) > 5:
        codes += ", …"
    raise GridValidationError(f"Grid validation failed: {codes}", report)


__all__ = ["GRID_SCHEMA", "MIN_UNIQUE_CLUES", "assert_valid_grid", "validate_grid"]
