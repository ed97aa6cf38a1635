"""Smallest and largest element of a sequence."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def min_max(values: Iterable[Any]) -> tuple[Any, Any]:
    """Return ``(smallest, largest)`` in one pass; raise ValueError if empty."""
    iterator = iter(values)
    try:
        smallest = largest = next(iterator)
    except StopIteration:
        raise ValueError("min_max() of an empty sequence") from None
    for value in iterator:
        if value < smallest:
            smallest = value
        if value > largest:
            largest = value
    return smallest, largest