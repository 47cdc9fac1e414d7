"""Backtracking solver for 9 by 9 sudoku boards."""

from __future__ import annotations

from typing import MutableSequence

EMPTY = "."
DIGITS = "123456789"


def _box(row: int, col: int) -> int:
    return 3 * (row // 3) + col // 3


def solve_sudoku(board: MutableSequence[MutableSequence[str]]) -> bool:
    """Fill the empty (``.``) cells of ``board`` in place.

    Empty cells are filled in row-major order, trying digits 1 to 9 in turn.
    Returns True when a full solution was written; otherwise the board is
    left as it was and False is returned.
    """
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("a sudoku board must be 9 rows of 9 cells")

    rows = [set() for _ in range(9)]
    cols = [set() for _ in range(9)]
    boxes = [set() for _ in range(9)]
    empties: list[tuple[int, int]] = []
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == EMPTY:
                empties.append((r, c))
            else:
                rows[r].add(cell)
                cols[c].add(cell)
                boxes[_box(r, c)].add(cell)

    def fill(position: int) -> bool:
        if position >= len(empties):
            return True
        r, c = empties[position]
        b = _box(r, c)
        for digit in DIGITS:
            if digit in rows[r] or digit in cols[c] or digit in boxes[b]:
                continue
            board[r][c] = digit
            rows[r].add(digit)
            cols[c].add(digit)
            boxes[b].add(digit)
            if fill(position + 1):
                return True
            board[r][c] = EMPTY
            rows[r].discard(digit)
            cols[c].discard(digit)
            boxes[b].discard(digit)
        return False

    return fill(0)