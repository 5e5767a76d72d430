"""Command line front end for generating, solving and checking puzzles."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from typing import List

from contracts import validate_grid
from sudoku_core import Difficulty, PuzzleEngine, count_solutions, from_string, print_grid, solve, to_string
from sudoku_core.generator import default_difficulty


def _read_grid(text: str):
    try:
        return from_string(text)
    except ValueError as exc:
        raise SystemExit(f"Invalid grid: {exc}") from exc


def cmd_generate(args: argparse.Namespace) -> int:
    engine = PuzzleEngine(args.difficulty, seed=args.seed)
    generation = engine.last_generation
    if args.json:
        payload = {
            "difficulty": engine.difficulty.value,
            "puzzle": to_string(engine.current_grid()),
            "removed": generation.removed,
            "restored": generation.restored,
            "seed": args.seed,
        }
        if args.show_solution:
            payload["solution"] = to_string(engine.solution())
        print(json.dumps(payload, indent=2, sort_keys=True))
        return 0

    print(engine)
    if args.show_solution:
        print()
        print(print_grid(engine.solution()))
    return 0


def cmd_solve(args: argparse.Namespace) -> int:
    grid = _read_grid(args.grid)
    if not solve(grid):
        print("No possible solution")
        return 1
    print(print_grid(grid))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    grid = _read_grid(args.grid)
    report = validate_grid(grid)
    summary = {
        "ok": report.ok,
        "errors": [asdict(issue) for issue in report.errors],
        "warnings": [asdict(issue) for issue in report.warnings],
        "solutions": count_solutions(grid) if report.ok else 0,
    }
    summary["unique"] = summary["solutions"] == 1
    print(json.dumps(summary, indent=2, sort_keys=True))
    return 0 if summary["unique"] else 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Unique-solution Sudoku generator and solver")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    generate = sub.add_parser("generate", help="Generate a puzzle with exactly one solution")
    generate.add_argument(
        "--difficulty",
        type=Difficulty.parse,
        default=default_difficulty(),
        help="easy, medium, hard or very_hard",
    )
    generate.add_argument("--seed", type=int, default=None)
    generate.add_argument("--json", action="store_true", help="Print the puzzle as JSON")
    generate.add_argument("--show-solution", action="store_true")
    generate.set_defaults(func=cmd_generate)

    solve_cmd = sub.add_parser("solve", help="Solve an 81-character grid (0 or . for blanks)")
    solve_cmd.add_argument("grid")
    solve_cmd.set_defaults(func=cmd_solve)

    check = sub.add_parser("check", help="Validate a grid and report whether it has one solution")
    check.add_argument("grid")
    check.set_defaults(func=cmd_check)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
