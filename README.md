# recursekit

Recursive and backtracking solutions to classic combinatorial puzzles.
It covers counting, parsing, stacks, subsets, combination sums, N-Queens,
Sudoku, maze paths, word search, word segmentation, palindrome partitions
and operator insertion. It has no runtime dependencies and needs Python 3.10
or later.

## Installation

```
pip install recursekit
```

## Modules

| Module | Functions |
| --- | --- |
| `recursekit.basic` | `count_good_numbers`, `my_atoi`, `reverse_stack`, `sort_stack` |
| `recursekit.combinations` | `combination_sum`, `combination_sum2`, `combination_sum3`, `perfect_sum`, `is_subset_present` |
| `recursekit.subsets` | `subset_sums`, `subsets`, `subsets_with_dup`, `generate_binary_strings`, `generate_parenthesis` |
| `recursekit.queens` | `solve_n_queens` |
| `recursekit.sudoku` | `solve_sudoku` |
| `recursekit.maze` | `find_path` |
| `recursekit.words` | `exist`, `word_break`, `partition` |
| `recursekit.expressions` | `add_operators` |

### `recursekit.basic`

- `count_good_numbers(n)` counts the digit strings of length `n` that have
  even digits at even indices and prime digits at odd indices. The count is
  taken modulo 10**9 + 7. A negative `n` raises `ValueError`.
- `my_atoi(s)` skips leading spaces and reads one optional sign. It then
  reads the digits up to the first non-digit and clamps the result to the
  signed 32-bit range. Input that cannot be parsed gives 0.
- `reverse_stack(stack)` reverses a list in place. The top of the stack is
  the end of the list.
- `sort_stack(stack)` sorts a list in place so that the largest element is on
  top, and returns the same list.

### `recursekit.combinations`

- `combination_sum(candidates, target)` finds combinations that reach
  `target`. A candidate may be used any number of times. Non-positive
  candidates raise `ValueError`.
- `combination_sum2(candidates, target)` finds unique combinations that use
  each candidate at most once. Each combination is sorted.
- `combination_sum3(k, n)` finds every set of `k` distinct digits 1–9 that
  sums to `n`.
- `perfect_sum(arr, total)` counts the subsets, taken by position, that sum
  to `total`. The count is taken modulo 10**9 + 7.
- `is_subset_present(k, arr)` tells whether some subset of `arr` sums to `k`.

### `recursekit.subsets`

- `subset_sums(arr)` gives the sum of every subset.
- `subsets(nums)` gives the distinct subsets, each in input order, with the
  whole list in lexicographic order.
- `subsets_with_dup(nums)` gives the distinct subsets of a multiset, each
  sorted.
- `generate_binary_strings(num)` gives the binary strings of length `num`
  that have no two adjacent 1s, in ascending order.
- `generate_parenthesis(n)` gives every balanced string of `n` bracket pairs.

### The other modules

- `solve_n_queens(n)` returns every placement of `n` non-attacking queens.
  Each board is a list of row strings, with `Q` for a queen and `.` for an
  empty square.
- `solve_sudoku(board)` fills the `"."` cells of a 9×9 board of characters in
  place. It returns `True` when it finds a solution. Otherwise it returns
  `False` and leaves the board unchanged. A board of the wrong shape raises
  `ValueError`.
- `find_path(maze)` returns every simple path from the top-left corner to the
  bottom-right corner of a square 0/1 maze. Cells holding 0 are walls, and a
  path is a string of the moves `U`, `D`, `L` and `R`. The maze is not
  modified. A maze that is not square raises `ValueError`.
- `exist(board, word)` tells whether `word` can be traced through adjacent
  cells of a letter grid without using any cell twice.
- `word_break(s, word_dict)` tells whether `s` splits into words from
  `word_dict`.
- `partition(s)` returns every way to cut `s` into palindromic pieces.
- `add_operators(num, target)` returns every way to put `+`, `-` or `*`
  between the digits of `num` so that the expression equals `target`.
  Operands never have leading zeros. Non-digit input raises `ValueError`.

## Examples

```python
from recursekit.basic import count_good_numbers, my_atoi
from recursekit.combinations import combination_sum
from recursekit.subsets import generate_parenthesis
from recursekit.queens import solve_n_queens
from recursekit.words import partition
from recursekit.expressions import add_operators

count_good_numbers(1)              # 5
my_atoi("   -42")                  # -42
combination_sum([2, 3, 6, 7], 7)   # [[2, 2, 3], [7]]
generate_parenthesis(3)            # ["((()))", "(()())", "(())()", "()(())", "()()()"]
len(solve_n_queens(4))             # 2
partition("aab")                   # [["a", "a", "b"], ["aa", "b"]]
add_operators("123", 6)            # ["1+2+3", "1*2*3"]
```

## What it does not do

recursekit is a library only. It has no command-line program: you import the
functions and call them from Python.

## Running the tests

```
pip install recursekit[test]
pytest
```