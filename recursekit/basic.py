"""Counting good digit strings, string-to-integer parsing and stack helpers."""

from __future__ import annotations

from typing import MutableSequence

MOD = 10**9 + 7
INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def count_good_numbers(n: int) -> int:
    """Count digit strings of length ``n`` with even digits at even indices
    and prime digits at odd indices, modulo 10**9 + 7."""
    if n < 0:
        raise ValueError("length must be non-negative")
    even_positions = (n + 1) // 2
    odd_positions = n // 2
    return pow(5, even_positions, MOD) * pow(4, odd_positions, MOD) % MOD


def my_atoi(s: str) -> int:
    """Parse a leading signed decimal integer, clamped to the 32-bit range.

    Leading spaces are skipped, one optional sign is read, then digits up to
    the first non-digit. Anything unparsable yields 0.
    """
    rest = s.lstrip(" ")
    negative = rest.startswith("-")
    if rest[:1] in ("-", "+"):
        rest = rest[1:]

    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digit = ord(ch) - ord("0")
        if value > INT_MAX // 10 or (value == INT_MAX // 10 and digit > 7):
            return INT_MIN if negative else INT_MAX
        value = value * 10 + digit
    return -value if negative else value


def reverse_stack(stack: MutableSequence) -> None:
    """Reverse a stack in place; the top of the stack is the end of the list."""
    stack.reverse()


def sort_stack(stack: list) -> list:
    """Sort a stack in place so the largest element is on top, and return it."""
    stack.sort()
    return stack