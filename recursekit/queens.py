"""Placement of n non-attacking queens on an n by n board."""

from __future__ import annotations

from typing import Iterator


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens on an ``n`` by ``n`` board.

    Each board is a list of rows drawn with ``Q`` for a queen and ``.`` for an
    empty square. Queens are placed row by row, trying columns left to right,
    so solutions come in ascending order of their queen columns.
    """
    if n < 0:
        raise ValueError("board size must be non-negative")

    columns: list[int] = []
    used_columns: set[int] = set()
    used_diagonals: set[int] = set()
    used_anti_diagonals: set[int] = set()

    def draw() -> list[str]:
        return ["." * col + "Q" + "." * (n - col - 1) for col in columns]

    def place(row: int) -> Iterator[list[str]]:
        if row >= n:
            yield draw()
            return
        for col in range(n):
            diagonal, anti_diagonal = col - row, col + row
            if (
                col in used_columns
                or diagonal in used_diagonals
                or anti_diagonal in used_anti_diagonals
            ):
                continue
            columns.append(col)
            used_columns.add(col)
            used_diagonals.add(diagonal)
            used_anti_diagonals.add(anti_diagonal)
            yield from place(row + 1)
            columns.pop()
            used_columns.discard(col)
            used_diagonals.discard(diagonal)
            used_anti_diagonals.discard(anti_diagonal)

    return list(place(0))