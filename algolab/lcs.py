"""Longest common subsequence by bottom-up, memoised and plain recursion."""

from __future__ import annotations

import enum
import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

__all__ = [
    "LcsResult",
    "random_sequence",
    "lcs_bottom_up",
    "lcs_top_down",
    "lcs_divide_and_conquer",
]


class _Arrow(enum.Enum):
    DIAGONAL = enum.auto()
    UP = enum.auto()
    LEFT = enum.auto()


@dataclass(frozen=True)
class LcsResult:
    """Length and one longest common subsequence, with the steps counted."""

    length: int
    sequence: Any
    comparisons: int


def _as_sequence(x: Sequence[Any], items: Sequence[Any]) -> Any:
    return "".join(items) if isinstance(x, str) else list(items)


def _trace(x: Sequence[Any], arrows: Any, i: int, j: int) -> list[Any]:
    out: list[Any] = []
    while i > 0 and j > 0:
        arrow = arrows[i, j]
        if arrow is _Arrow.DIAGONAL:
            out.append(x[i - 1])
            i -= 1
            j -= 1
        elif arrow is _Arrow.UP:
            i -= 1
        else:
            j -= 1
    out.reverse()
    return out


def random_sequence(
    length: int, alphabet: Sequence[Any] = "ABC", rng: random.Random | None = None
) -> Any:
    """Draw ``length`` symbols uniformly from ``alphabet``."""
    if length < 0:
        raise ValueError("length must not be negative")
    if length and not alphabet:
        raise ValueError("alphabet must not be empty")
    rng = rng if rng is not None else random.Random()
    symbols = [rng.choice(alphabet) for _ in range(length)]
    return _as_sequence(alphabet, symbols)


def lcs_bottom_up(x: Sequence[Any], y: Sequence[Any]) -> LcsResult:
    """Fill the whole table row by row; one step per cell with i, j >= 1."""
    m, n = len(x), len(y)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    arrows: dict[tuple[int, int], _Arrow] = {}
    steps = 0
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            steps += 1
            if x[i - 1] == y[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
                arrows[i, j] = _Arrow.DIAGONAL
            elif table[i - 1][j] >= table[i][j - 1]:
                table[i][j] = table[i - 1][j]
                arrows[i, j] = _Arrow.UP
            else:
                table[i][j] = table[i][j - 1]
                arrows[i, j] = _Arrow.LEFT
    sequence = _as_sequence(x, _trace(x, arrows, m, n))
    return LcsResult(table[m][n], sequence, steps)


def lcs_top_down(x: Sequence[Any], y: Sequence[Any]) -> LcsResult:
    """Memoised recursion from (len(x), len(y)); one step per cell computed."""
    m, n = len(x), len(y)
    memo: dict[tuple[int, int], int] = {}
    arrows: dict[tuple[int, int], _Arrow] = {}
    steps = 0
    stack = [(m, n)]
    while stack:
        cell = stack[-1]
        if cell in memo:
            stack.pop()
            continue
        i, j = cell
        if i == 0 or j == 0:
            memo[cell] = 0
        elif x[i - 1] == y[j - 1]:
            diagonal = (i - 1, j - 1)
            if diagonal not in memo:
                stack.append(diagonal)
                continue
            memo[cell] = memo[diagonal] + 1
            arrows[cell] = _Arrow.DIAGONAL
        else:
            up, left = (i - 1, j), (i, j - 1)
            missing = [c for c in (left, up) if c not in memo]
            if missing:
                stack.extend(missing)
                continue
            if memo[up] >= memo[left]:
                memo[cell] = memo[up]
                arrows[cell] = _Arrow.UP
            else:
                memo[cell] = memo[left]
                arrows[cell] = _Arrow.LEFT
        steps += 1
        stack.pop()
    sequence = _as_sequence(x, _trace(x, arrows, m, n))
    return LcsResult(memo[m, n], sequence, steps)


def lcs_divide_and_conquer(x: Sequence[Any], y: Sequence[Any]) -> LcsResult:
    """Plain recursion without memoisation; one step per call."""
    steps = 0

    def solve(i: int, j: int) -> tuple[int, tuple[Any, ...]]:
        nonlocal steps
        steps += 1
        if i == 0 or j == 0:
            return 0, ()
        if x[i - 1] == y[j - 1]:
            length, found = solve(i - 1, j - 1)
            return length + 1, found + (x[i - 1],)
        up = solve(i - 1, j)
        left = solve(i, j - 1)
        return up if up[0] >= left[0] else left

    length, found = solve(len(x), len(y))
    return LcsResult(length, _as_sequence(x, found), steps)