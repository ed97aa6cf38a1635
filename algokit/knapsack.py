"""0/1 knapsack by dynamic programming."""

from __future__ import annotations

from collections.abc import Sequence


def knapsack(profits: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Return the largest total profit of items whose weights fit in ``capacity``.

    Each item is used at most once.
    """
    if len(profits) != len(weights):
        raise ValueError("profits and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    best = [0] * (capacity + 1)
    for profit, weight in zip(profits, weights):
        previous = best
        best = [0] + [
            max(profit + previous[room - weight], previous[room])
            if weight <= room
            else previous[room]
            for room in range(1, capacity + 1)
        ]
    return best[capacity]