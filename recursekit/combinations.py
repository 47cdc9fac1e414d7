"""Combination searches and subset-sum counting."""

from __future__ import annotations

from collections import Counter
from typing import Iterator, Sequence

MOD = 10**9 + 7


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """All combinations of candidates (each reusable) that sum to ``target``.

    Combinations list candidates in input order; results come in depth-first
    order, choosing the current candidate before skipping it.
    """
    values = list(candidates)
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")

    def search(start: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if start >= len(values) or remaining <= 0:
            if remaining == 0:
                yield chosen
            return
        value = values[start]
        if value <= remaining:
            yield from search(start, remaining - value, chosen + [value])
        yield from search(start + 1, remaining, chosen)

    return list(search(0, target, []))


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Unique combinations using each candidate at most once, summing to ``target``.

    Each combination is sorted and the results are in lexicographic order.
    """
    values = sorted(candidates)

    def search(start: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if remaining == 0:
            yield chosen
            return
        for index in range(start, len(values)):
            value = values[index]
            if index > start and values[index - 1] == value:
                continue
            if remaining < value:
                break
            yield from search(index + 1, remaining - value, chosen + [value])

    return list(search(0, target, []))


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """All sets of ``k`` distinct digits 1..9 that sum to ``n``, in lexicographic order."""
    digits = range(1, 10)

    def search(start: int, remaining: int, left: int, chosen: list[int]) -> Iterator[list[int]]:
        if left <= 0:
            if remaining == 0:
                yield chosen
            return
        for digit in digits[start:]:
            if remaining < digit:
                break
            yield from search(digit, remaining - digit, left - 1, chosen + [digit])

    return list(search(0, n, k, []))


def perfect_sum(arr: Sequence[int], total: int) -> int:
    """Number of subsets (by position) of ``arr`` summing to ``total``, modulo 10**9 + 7."""
    counts: Counter[int] = Counter({0: 1})
    for value in arr:
        extended = counts.copy()
        for subtotal, ways in counts.items():
            extended[subtotal + value] += ways
        counts = extended
    return counts[total] % MOD


def is_subset_present(k: int, arr: Sequence[int]) -> bool:
    """Whether some subset of ``arr`` sums to ``k``.

    A partial sum that exceeds ``k`` is abandoned rather than extended.
    """
    reachable = {0} if 0 <= k else set()
    for value in arr:
        reachable |= {subtotal + value for subtotal in reachable}
        reachable = {subtotal for subtotal in reachable if subtotal <= k}
    return k in reachable