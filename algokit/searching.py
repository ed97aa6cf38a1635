"""Searching a sequence for a value."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def linear_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    return next(
        (index for index, value in enumerate(values) if value == target),
        None,
    )


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in ascending ``values``, or None.

    The range is halved at its midpoint (rounded down) until the target is
    met or the range is empty.
    """
    left, right = 0, len(values) - 1
    while left <= right:
        middle = (left + right) // 2
        probe = values[middle]
        if probe == target:
            return middle
        if probe < target:
            left = middle + 1
        else:
            right = middle - 1
    return None