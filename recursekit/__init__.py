"""Recursive and backtracking solutions to classic combinatorial problems.

Modules: basic, combinations, subsets, queens, sudoku, maze, words, expressions.
"""

__version__ = "0.1.0"