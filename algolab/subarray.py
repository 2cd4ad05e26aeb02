"""Divide-and-conquer search for the maximum-sum contiguous subarray."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["SubarrayResult", "find_max_subarray", "find_max_crossing_subarray"]


@dataclass(frozen=True)
class SubarrayResult:
    """Inclusive bounds and sum of a subarray, with the elements summed to find it."""

    low: int
    high: int
    total: int
    comparisons: int = 0


def _crossing(values: Sequence[int], low: int, mid: int, high: int) -> SubarrayResult:
    left_sum = -math.inf
    running = 0
    max_left = mid
    for i in range(mid, low - 1, -1):
        running += values[i]
        if running > left_sum:
            left_sum = running
            max_left = i
    right_sum = -math.inf
    running = 0
    max_right = mid + 1
    for j in range(mid + 1, high + 1):
        running += values[j]
        if running > right_sum:
            right_sum = running
            max_right = j
    return SubarrayResult(max_left, max_right, left_sum + right_sum, high - low + 1)


def find_max_crossing_subarray(
    values: Sequence[int], low: int, mid: int, high: int
) -> SubarrayResult:
    """Best subarray of values[low..high] that contains both mid and mid + 1."""
    if not 0 <= low <= mid < high < len(values):
        raise ValueError("need 0 <= low <= mid < high < len(values)")
    return _crossing(values, low, mid, high)


def find_max_subarray(values: Sequence[int]) -> SubarrayResult:
    """Maximum-sum non-empty contiguous subarray; ties favour the left half."""
    if not values:
        raise ValueError("values must not be empty")

    def search(low: int, high: int) -> SubarrayResult:
        if low == high:
            return SubarrayResult(low, high, values[low], 0)
        mid = (low + high) // 2
        left = search(low, mid)
        right = search(mid + 1, high)
        cross = _crossing(values, low, mid, high)
        work = left.comparisons + right.comparisons + cross.comparisons
        if left.total >= right.total and left.total >= cross.total:
            best = left
        elif right.total >= left.total and right.total >= cross.total:
            best = right
        else:
            best = cross
        return SubarrayResult(best.low, best.high, best.total, work)

    return search(0, len(values) - 1)