"""9x9 grid representation and the cell validity predicate.

A grid is a list of nine rows, each a list of nine ints.  ``0`` marks an
empty cell; ``1``..``9`` are placed digits.  Helpers in this module never
keep references to the grids they are given.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

Grid = List[List[int]]
Position = Tuple[int, int]

SIZE = 9
BOX = 3
EMPTY = 0
DIGITS: Tuple[int, ...] = tuple(range(1, SIZE + 1))
ORIGIN: Position = (0, 0)


def _build_peers() -> Dict[Position, Tuple[Tuple[Position, ...], Tuple[Position, ...], Tuple[Position, ...]]]:
    peers = {}
    for r in range(SIZE):
        for c in range(SIZE):
            row = tuple((r, cc) for cc in range(SIZE) if cc != c)
            col = tuple((rr, c) for rr in range(SIZE) if rr != r)
            br, bc = BOX * (r // BOX), BOX * (c // BOX)
            box = tuple(
                (br + dr, bc + dc)
                for dr in range(BOX)
                for dc in range(BOX)
                if (br + dr, bc + dc) != (r, c)
            )
            peers[(r, c)] = (row, col, box)
    return peers


# Row, column and box peers of every cell, target cell excluded.
PEERS = _build_peers()


# ---------- Construction / conversion ----------

def empty_grid() -> Grid:
    return [[EMPTY] * SIZE for _ in range(SIZE)]


def grid_copy(g: Grid) -> Grid:
    return [row[:] for row in g]


def to_string(g: Grid) -> str:
    return ''.join(str(g[r][c] or 0) for r in range(SIZE) for c in range(SIZE))


def from_string(s: str) -> Grid:
    """Parse an 81-character grid; ``0`` and ``.`` denote empty cells."""

    s = "".join(s.split())
    if len(s) != SIZE * SIZE:
        raise ValueError(f"grid string must hold 81 cells, got {len(s)}")
    grid = empty_grid()
    for k, ch in enumerate(s):
        if ch == ".":
            continue
        if not ch.isdigit():
            raise ValueError(f"unexpected character {ch!r} at offset {k}")
        grid[k // SIZE][k % SIZE] = int(ch)
    return grid


def print_grid(g: Grid) -> str:
    lines = []
    for r in range(SIZE):
        if r % BOX == 0:
            lines.append("+-------+-------+-------+")
        row = []
        for c in range(SIZE):
            v = g[r][c]
            row.append(str(v) if v != EMPTY else ".")
            if c % BOX == BOX - 1:
                row.append("|")
        lines.append("| " + " ".join(row))
    lines.append("+-------+-------+-------+")
    return "\n".join(lines)


def count_empty(g: Grid) -> int:
    return sum(1 for row in g for v in row if v == EMPTY)


# ---------- Validity ----------

def is_valid(grid: Grid, value: int, position: Position) -> bool:
    """Return ``True`` when ``value`` may be placed at ``position``.

    Every assigned cell in the target's row, column and box is compared with
    ``value``; the target cell itself is never compared and empty cells never
    conflict.
    """

    row_peers, col_peers, box_peers = PEERS[position]
    for r, c in row_peers:
        if grid[r][c] == value:
            return False
    for r, c in col_peers:
        if grid[r][c] == value:
            return False
    for r, c in box_peers:
        if grid[r][c] == value:
            return False
    return True


def find_empty(grid: Grid, cursor: Position = ORIGIN) -> Optional[Position]:
    """Return the first empty cell at or after ``cursor`` in row-major order."""

    start_row, start_col = cursor
    for r in range(start_row, SIZE):
        for c in range(start_col if r == start_row else 0, SIZE):
            if grid[r][c] == EMPTY:
                return r, c
    return None


def find_conflicts(grid: Grid) -> List[Position]:
    """Return assigned cells whose digit repeats in their row, column or box."""

    return [
        (r, c)
        for r in range(SIZE)
        for c in range(SIZE)
        if grid[r][c] != EMPTY and not is_valid(grid, grid[r][c], (r, c))
    ]


def is_consistent(grid: Grid) -> bool:
    return not find_conflicts(grid)


__all__ = [
    "BOX",
    "DIGITS",
    "EMPTY",
    "Grid",
    "ORIGIN",
    "PEERS",
    "Position",
    "SIZE",
    "count_empty",
    "empty_grid",
    "find_conflicts",
    "find_empty",
    "from_string",
    "grid_copy",
    "is_consistent",
    "is_valid",
    "print_grid",
    "to_string",
]
