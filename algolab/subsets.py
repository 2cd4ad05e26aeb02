"""Backtracking search for subsets that add up to a target sum."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["sum_of_subsets"]


def sum_of_subsets(values: Sequence[int], target: int) -> list[list[int]]:
    """Return every subset of ``values`` whose elements sum to ``target``.

    ``values`` must be positive and in non-decreasing order; subsets are
    returned in the order the search finds them, each in input order.
    """
    items = list(values)
    if any(v <= 0 for v in items):
        raise ValueError("values must be positive")
    if any(a > b for a, b in zip(items, items[1:])):
        raise ValueError("values must be in non-decreasing order")
    n = len(items)
    found: list[list[int]] = []
    if n == 0:
        return found
    chosen: list[int] = []

    def search(partial: int, k: int, remaining: int) -> None:
        value = items[k]
        has_next = k + 1 < n
        chosen.append(value)
        if partial + value == target:
            found.append(list(chosen))
        elif has_next and partial + value + items[k + 1] <= target:
            search(partial + value, k + 1, remaining - value)
        chosen.pop()
        if (
            has_next
            and partial + remaining - value >= target
            and partial + items[k + 1] <= target
        ):
            search(partial, k + 1, remaining - value)

    search(0, 0, sum(items))
    return found