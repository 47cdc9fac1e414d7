"""Insertion of arithmetic operators between digits to reach a target."""

from __future__ import annotations

from typing import Iterator


def add_operators(num: str, target: int) -> list[str]:
    """Every way to put ``+``, ``-`` or ``*`` between the digits of ``num``
    so that the expression evaluates to ``target``.

    Operands never have leading zeros. At each split point the operators are
    tried in the order ``+``, ``*``, ``-``.
    """
    if not all("0" <= ch <= "9" for ch in num):
        raise ValueError("num must contain only decimal digits")

    def search(start: int, expr: str, total: int, last: int) -> Iterator[str]:
        if start >= len(num):
            if total == target:
                yield expr
            return
        for end in range(start, len(num)):
            if end > start and num[start] == "0":
                return
            piece = num[start:end + 1]
            value = int(piece)
            if start == 0:
                yield from search(end + 1, piece, value, value)
                continue
            yield from search(end + 1, f"{expr}+{piece}", total + value, value)
            yield from search(
                end + 1, f"{expr}*{piece}", total - last + last * value, last * value
            )
            yield from search(end + 1, f"{expr}-{piece}", total - value, -value)

    return list(search(0, "", 0, 0))