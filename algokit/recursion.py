"""Memoised recursive searches over grids and strings."""

from __future__ import annotations

import operator
from functools import lru_cache
from typing import Callable, Iterable, Sequence

__all__ = ["count_squares", "max_moves", "diff_ways_to_compute", "min_extra_char"]

_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


def count_squares(matrix: Sequence[Sequence[int]]) -> int:
    """Number of square submatrices made only of ones."""
    if not matrix:
        return 0
    rows, cols = len(matrix), len(matrix[0])

    @lru_cache(maxsize=None)
    def side(i: int, j: int) -> int:
        if i >= rows or j >= cols or matrix[i][j] == 0:
            return 0
        return 1 + min(side(i, j + 1), side(i + 1, j + 1), side(i + 1, j))

    return sum(
        side(i, j)
        for i, row in enumerate(matrix)
        for j, cell in enumerate(row)
        if cell == 1
    )


def max_moves(grid: Sequence[Sequence[int]]) -> int:
    """Most moves rightwards (up-right, right, down-right) onto strictly larger cells."""
    if not grid:
        return 0
    rows, cols = len(grid), len(grid[0])

    @lru_cache(maxsize=None)
    def moves(row: int, col: int) -> int:
        best = 0
        following_col = col + 1
        if following_col >= cols:
            return best
        for following_row in (row - 1, row, row + 1):
            if 0 <= following_row < rows and grid[following_row][following_col] > grid[row][col]:
                best = max(best, 1 + moves(following_row, following_col))
        return best

    return max((moves(row, 0) for row in range(rows)), default=0)


def diff_ways_to_compute(expression: str) -> list[int]:
    """Every value the expression takes under all ways of parenthesising it."""

    @lru_cache(maxsize=None)
    def evaluate(part: str) -> tuple[int, ...]:
        results: list[int] = []
        for index, ch in enumerate(part):
            apply = _OPERATORS.get(ch)
            if apply is None:
                continue
            for left in evaluate(part[:index]):
                for right in evaluate(part[index + 1:]):
                    results.append(apply(left, right))
        if not results:
            results.append(int(part))
        return tuple(results)

    return list(evaluate(expression))


def min_extra_char(s: str, dictionary: Iterable[str]) -> int:
    """Fewest characters left over when splitting ``s`` into dictionary words."""
    words = set(dictionary)
    size = len(s)

    @lru_cache(maxsize=None)
    def best(start: int) -> int:
        if start >= size:
            return 0
        result = 1 + best(start + 1)
        for stop in range(start + 1, size + 1):
            if s[start:stop] in words:
                result = min(result, best(stop))
        return result

    return best(0)