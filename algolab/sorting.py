"""Comparison and distribution sorts that report how much work they did."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "SortResult",
    "bucket_sort",
    "counting_sort",
    "heap_sort",
    "merge_sort",
    "quick_sort",
    "randomized_quick_sort",
    "radix_sort",
]

_RADIX = 10


@dataclass(frozen=True)
class SortResult:
    """The sorted values and the number of counted steps the algorithm took."""

    values: list[Any] = field(default_factory=list)
    comparisons: int = 0


def bucket_sort(values: Iterable[float]) -> SortResult:
    """Sort numbers in the half-open interval [0, 1) using one bucket per value.

    One step is counted for every value dropped into a bucket, every bucket
    sorted and every value copied back out.
    """
    items = list(values)
    n = len(items)
    buckets: list[list[float]] = [[] for _ in range(n)]
    steps = 0
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(value * n)].insert(0, value)
        steps += 1
    for bucket in buckets:
        steps += 1
        bucket.sort()
    result: list[float] = []
    for bucket in buckets:
        steps += len(bucket)
        result.extend(bucket)
    return SortResult(result, steps)


def counting_sort(values: Iterable[int], max_value: int) -> SortResult:
    """Stable counting sort of integers in the range 0..max_value."""
    items = list(values)
    if max_value < 0:
        raise ValueError("max_value must not be negative")
    for value in items:
        if not 0 <= value <= max_value:
            raise ValueError(f"value {value!r} is outside 0..{max_value}")
    steps = 0
    counts = [0] * (max_value + 1)
    steps += max_value + 1
    for value in items:
        steps += 1
        counts[value] += 1
    for i in range(1, max_value + 1):
        steps += 1
        counts[i] += counts[i - 1]
    output: list[int] = [0] * len(items)
    for value in reversed(items):
        steps += 1
        counts[value] -= 1
        output[counts[value]] = value
    return SortResult(output, steps)


def heap_sort(values: Iterable[Any]) -> SortResult:
    """In-place max-heap sort; two steps are counted per heapify visit."""
    items = list(values)
    steps = 0

    def sift_down(size: int, i: int) -> None:
        nonlocal steps
        while True:
            left, right = 2 * i + 1, 2 * i + 2
            steps += 1
            largest = left if left < size and items[left] > items[i] else i
            steps += 1
            if right < size and items[right] > items[largest]:
                largest = right
            if largest == i:
                return
            items[i], items[largest] = items[largest], items[i]
            i = largest

    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        sift_down(n, i)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        sift_down(end, 0)
    return SortResult(items, steps)


def merge_sort(values: Iterable[Any]) -> SortResult:
    """Top-down merge sort; one step is counted per element placed by a merge."""
    items = list(values)
    steps = 0

    def merge(p: int, q: int, r: int) -> None:
        nonlocal steps
        left, right = items[p : q + 1], items[q + 1 : r + 1]
        i = j = 0
        for k in range(p, r + 1):
            steps += 1
            if j >= len(right) or (i < len(left) and left[i] <= right[j]):
                items[k] = left[i]
                i += 1
            else:
                items[k] = right[j]
                j += 1

    def sort(p: int, r: int) -> None:
        if p < r:
            q = (p + r) // 2
            sort(p, q)
            sort(q + 1, r)
            merge(p, q, r)

    sort(0, len(items) - 1)
    return SortResult(items, steps)


def _partition(items: list[Any], p: int, r: int) -> tuple[int, int]:
    """Lomuto partition around items[r]; returns the pivot index and comparisons."""
    pivot = items[r]
    i = p - 1
    for j in range(p, r):
        if items[j] <= pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[r] = items[r], items[i + 1]
    return i + 1, r - p


def _quick_sort(items: list[Any], rng: random.Random | None) -> int:
    steps = 0
    # Right halves are pushed first so ranges are handled in recursive order.
    pending = [(0, len(items) - 1)]
    while pending:
        p, r = pending.pop()
        if p >= r:
            continue
        if rng is not None:
            chosen = rng.randrange(p, r + 1)
            items[r], items[chosen] = items[chosen], items[r]
        q, compared = _partition(items, p, r)
        steps += compared
        pending.append((q + 1, r))
        pending.append((p, q - 1))
    return steps


def quick_sort(values: Iterable[Any]) -> SortResult:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    steps = _quick_sort(items, None)
    return SortResult(items, steps)


def randomized_quick_sort(
    values: Iterable[Any], rng: random.Random | None = None
) -> SortResult:
    """Quicksort with a pivot drawn uniformly from each range by ``rng``."""
    items = list(values)
    steps = _quick_sort(items, rng if rng is not None else random.Random())
    return SortResult(items, steps)


def _digit(number: int, place: int) -> int:
    return number // _RADIX ** (place - 1) % _RADIX


def radix_sort(values: Iterable[int], digits: int) -> SortResult:
    """LSD radix sort of non-negative integers over their lowest ``digits`` digits."""
    items = list(values)
    if digits < 0:
        raise ValueError("digits must not be negative")
    for value in items:
        if value < 0:
            raise ValueError(f"radix sort needs non-negative values, got {value!r}")
    steps = 0
    for place in range(1, digits + 1):
        counts = [0] * _RADIX
        steps += _RADIX
        for value in items:
            steps += 1
            counts[_digit(value, place)] += 1
        for i in range(1, _RADIX):
            steps += 1
            counts[i] += counts[i - 1]
        output = [0] * len(items)
        for value in reversed(items):
            steps += 1
            d = _digit(value, place)
            counts[d] -= 1
            output[counts[d]] = value
        items = output
    return SortResult(items, steps)