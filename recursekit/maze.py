"""Enumeration of paths through a square maze."""

from __future__ import annotations

from typing import Iterator, Sequence

_MOVES = (("U", -1, 0), ("D", 1, 0), ("L", 0, -1), ("R", 0, 1))


def find_path(maze: Sequence[Sequence[int]]) -> list[str]:
    """Every simple path from the top-left to the bottom-right cell.

    Cells holding 0 are walls. A path is a string of moves U, D, L and R;
    at each cell the moves are tried in that order, which fixes the order
    of the results. The maze itself is not modified.
    """
    grid = [list(row) for row in maze]
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("maze must be square")

    visited: set[tuple[int, int]] = set()

    def walk(row: int, col: int, path: str) -> Iterator[str]:
        if not (0 <= row < size and 0 <= col < size):
            return
        if grid[row][col] == 0 or (row, col) in visited:
            return
        if row == size - 1 and col == size - 1:
            yield path
            return
        visited.add((row, col))
        for step, d_row, d_col in _MOVES:
            yield from walk(row + d_row, col + d_col, path + step)
        visited.discard((row, col))

    return list(walk(0, 0, ""))