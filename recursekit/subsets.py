"""Subset enumeration and generation of constrained strings."""

from __future__ import annotations

from itertools import combinations
from typing import Iterator, Sequence


def subset_sums(arr: Sequence[int]) -> list[int]:
    """Sums of every subset, in depth-first order taking each element before skipping it."""
    values = list(arr)

    def search(index: int, total: int) -> Iterator[int]:
        if index >= len(values):
            yield total
            return
        yield from search(index + 1, total + values[index])
        yield from search(index + 1, total)

    return list(search(0, 0))


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Distinct subsets keeping input order within each, sorted lexicographically."""
    values = list(nums)
    unique = {
        combo
        for size in range(len(values) + 1)
        for combo in combinations(values, size)
    }
    return [list(combo) for combo in sorted(unique)]


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Distinct subsets of a multiset, each sorted, in lexicographic order."""
    values = sorted(nums)

    def search(start: int, chosen: list[int]) -> Iterator[list[int]]:
        yield chosen
        for index in range(start, len(values)):
            if index > start and values[index] == values[index - 1]:
                continue
            yield from search(index + 1, chosen + [values[index]])

    return list(search(0, []))


def generate_binary_strings(num: int) -> list[str]:
    """Binary strings of length ``num`` with no two adjacent 1s, in ascending order."""
    if num == 0:
        return []

    def search(left: int, prefix: str) -> Iterator[str]:
        if left <= 0:
            yield prefix
            return
        yield from search(left - 1, prefix + "0")
        if not prefix.endswith("1"):
            yield from search(left - 1, prefix + "1")

    return list(search(num, ""))


def generate_parenthesis(n: int) -> list[str]:
    """All balanced strings of ``n`` bracket pairs, in lexicographic order."""

    def search(opens: int, closes: int, prefix: str) -> Iterator[str]:
        if opens <= 0 and closes <= 0:
            yield prefix
            return
        if opens > 0:
            yield from search(opens - 1, closes, prefix + "(")
        if closes > opens:
            yield from search(opens, closes - 1, prefix + ")")

    return list(search(n, n, ""))