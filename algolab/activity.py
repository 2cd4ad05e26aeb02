"""Greedy activity selection over activities ordered by finish time."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["greedy_activity_selector", "recursive_activity_selector"]


def _check(starts: Sequence[int], finishes: Sequence[int]) -> None:
    if len(starts) != len(finishes):
        raise ValueError("starts and finishes must have the same length")


def greedy_activity_selector(
    starts: Sequence[int], finishes: Sequence[int]
) -> list[int]:
    """Return the 1-based numbers of a maximal set of compatible activities.

    Activities must be ordered by non-decreasing finish time.
    """
    _check(starts, finishes)
    if not starts:
        return []
    selected = [1]
    last = 0
    for m in range(1, len(starts)):
        if starts[m] >= finishes[last]:
            selected.append(m + 1)
            last = m
    return selected


def recursive_activity_selector(
    starts: Sequence[int], finishes: Sequence[int]
) -> list[int]:
    """Recursive form of :func:`greedy_activity_selector`; same result."""
    _check(starts, finishes)
    n = len(starts)
    if n == 0:
        return []

    def select(k: int) -> list[int]:
        m = k + 1
        while m < n and starts[m] < finishes[k]:
            m += 1
        if m < n:
            return [m + 1, *select(m)]
        return []

    return [1, *select(0)]