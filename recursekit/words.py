"""Word search on a letter grid, dictionary segmentation and palindrome partitions."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Iterator, Sequence


def exist(board: Sequence[Sequence[str]], word: str) -> bool:
    """Whether ``word`` can be traced through adjacent cells of ``board``.

    Moves go up, down, left or right and no cell is used twice. The board is
    not modified.
    """
    if not word:
        return True
    if not board or not board[0]:
        return False
    rows, cols = len(board), len(board[0])
    used: set[tuple[int, int]] = set()

    def trace(row: int, col: int, k: int) -> bool:
        if k >= len(word):
            return True
        if not (0 <= row < rows and 0 <= col < cols):
            return False
        if (row, col) in used or board[row][col] != word[k]:
            return False
        used.add((row, col))
        found = (
            trace(row - 1, col, k + 1)
            or trace(row, col + 1, k + 1)
            or trace(row + 1, col, k + 1)
            or trace(row, col - 1, k + 1)
        )
        used.discard((row, col))
        return found

    return any(trace(r, c, 0) for r in range(rows) for c in range(cols))


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Whether ``s`` splits into a sequence of words from ``word_dict``."""
    words = set(word_dict)

    @lru_cache(maxsize=None)
    def splits_from(start: int) -> bool:
        if start == len(s):
            return True
        return any(
            s[start:end] in words and splits_from(end)
            for end in range(start + 1, len(s) + 1)
        )

    return splits_from(0)


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def partition(s: str) -> list[list[str]]:
    """Every way to cut ``s`` into palindromic pieces.

    Shorter first pieces come before longer ones, recursively.
    """

    def cuts(rest: str) -> Iterator[list[str]]:
        if not rest:
            yield []
            return
        for end in range(1, len(rest) + 1):
            piece = rest[:end]
            if not _is_palindrome(piece):
                continue
            for tail in cuts(rest[end:]):
                yield [piece, *tail]

    return list(cuts(s))