"""Matrix-chain multiplication order by dynamic programming and by recursion."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

__all__ = ["ChainOrder", "matrix_chain_order", "matrix_chain_cost"]


@dataclass(frozen=True)
class ChainOrder:
    """Minimum scalar multiplications for a chain, and where to split it."""

    cost: int
    matrices: int
    splits: Mapping[tuple[int, int], int] = field(default_factory=dict)
    comparisons: int = 0

    def parenthesize(self) -> str:
        """Render the optimal order, e.g. ``((A1A2)A3)``."""

        def render(i: int, j: int) -> str:
            if i == j:
                return f"A{i}"
            k = self.splits[i, j]
            return f"({render(i, k)}{render(k + 1, j)})"

        return render(1, self.matrices)


def _check(dimensions: Sequence[int]) -> list[int]:
    dims = list(dimensions)
    if len(dims) < 2:
        raise ValueError("at least two dimensions are needed for one matrix")
    if any(d <= 0 for d in dims):
        raise ValueError("dimensions must be positive")
    return dims


def matrix_chain_order(dimensions: Sequence[int]) -> ChainOrder:
    """Bottom-up table of optimal costs; one step per split point tried."""
    dims = _check(dimensions)
    n = len(dims) - 1
    cost: dict[tuple[int, int], int] = {(i, i): 0 for i in range(1, n + 1)}
    splits: dict[tuple[int, int], int] = {}
    steps = 0
    for span in range(1, n):
        for i in range(1, n - span + 1):
            j = i + span
            best: float = math.inf
            best_k = i
            for k in range(i, j):
                steps += 1
                q = cost[i, k] + cost[k + 1, j] + dims[i - 1] * dims[k] * dims[j]
                if q < best:
                    best = q
                    best_k = k
            cost[i, j] = int(best)
            splits[i, j] = best_k
    return ChainOrder(cost[1, n], n, splits, steps)


def matrix_chain_cost(dimensions: Sequence[int]) -> tuple[int, int]:
    """Optimal cost by plain recursion; returns (cost, split points tried)."""
    dims = _check(dimensions)
    steps = 0

    def solve(i: int, j: int) -> int:
        nonlocal steps
        if i == j:
            return 0
        best: float = math.inf
        for k in range(i, j):
            steps += 1
            q = solve(i, k) + solve(k + 1, j) + dims[i - 1] * dims[k] * dims[j]
            best = min(best, q)
        return int(best)

    cost = solve(1, len(dims) - 1)
    return cost, steps