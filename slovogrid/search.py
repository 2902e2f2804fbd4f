"""Tracing words through the letter grid along right-angle paths."""

from __future__ import annotations

from collections.abc import Sequence

Cell = tuple[int, int]

# Search order of neighbouring cells: down, up, right, left.
_STEPS: tuple[Cell, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


def trace_word(
    grid: Sequence[Sequence[str]], row: int, col: int, word: str
) -> tuple[Cell, ...] | None:
    """Return the first non-self-intersecting path spelling ``word`` from a cell.

    The path starts at ``(row, col)`` and moves between horizontally or
    vertically adjacent cells. ``None`` is returned when no path exists.
    """
    if not word:
        return None
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    path: list[Cell] = []
    visited: set[Cell] = set()

    def walk(r: int, c: int, idx: int) -> bool:
        if grid[r][c] != word[idx]:
            return False
        path.append((r, c))
        if idx + 1 == len(word):
            return True
        visited.add((r, c))
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < rows
                and 0 <= nc < cols
                and (nr, nc) not in visited
                and walk(nr, nc, idx + 1)
            ):
                return True
        visited.discard((r, c))
        path.pop()
        return False

    return tuple(path) if walk(row, col, 0) else None


def find_word_through(
    grid: Sequence[Sequence[str]], word: str, row: int, col: int
) -> bool:
    """Tell whether ``word`` can be traced on the grid using cell ``(row, col)``.

    Start cells are tried row by row; for each, only the first path found
    counts, and the cell must lie on it before the final letter.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    for start_row in range(rows):
        for start_col in range(cols):
            path = trace_word(grid, start_row, start_col, word)
            if path and (row, col) in path[:-1]:
                return True
    return False