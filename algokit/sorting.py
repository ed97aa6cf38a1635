"""Classic comparison sorts.

Every function returns a new ascending list and leaves its argument alone.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from typing import Any

_Partition = Callable[[list, int, int], int]


def bubble_sort(values: Iterable[Any]) -> list:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for settled in range(len(items) - 1):
        for inner in range(len(items) - settled - 1):
            if items[inner] > items[inner + 1]:
                items[inner], items[inner + 1] = items[inner + 1], items[inner]
    return items


def selection_sort(values: Iterable[Any]) -> list:
    """Sort by moving the smallest remaining element to the front."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sorted(items: list) -> list:
    if len(items) <= 1:
        return items
    # The left half takes the middle element, as with (begin + end) // 2.
    center = (len(items) + 1) // 2
    return _merge(_merge_sorted(items[:center]), _merge_sorted(items[center:]))


def merge_sort(values: Iterable[Any]) -> list:
    """Stable top-down merge sort."""
    return _merge_sorted(list(values))


def _partition_first(items: list, low: int, high: int) -> int:
    pivot = items[low]
    left, right = low + 1, high
    while left <= right:
        while left <= high and items[left] <= pivot:
            left += 1
        while items[right] > pivot:
            right -= 1
        if left < right:
            items[left], items[right] = items[right], items[left]
    items[low] = items[right]
    items[right] = pivot
    return right


def _partition_last(items: list, low: int, high: int) -> int:
    pivot = items[high]
    smaller = low - 1
    for current in range(low, high):
        if items[current] < pivot:
            smaller += 1
            items[smaller], items[current] = items[current], items[smaller]
    items[smaller + 1], items[high] = items[high], items[smaller + 1]
    return smaller + 1


def _quick_sort(values: Iterable[Any], partition: _Partition) -> list:
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = partition(items, low, high)
            pending.append((split + 1, high))
            pending.append((low, split - 1))
    return items


def quick_sort_first(values: Iterable[Any]) -> list:
    """Quicksort that pivots on the first element of each range."""
    return _quick_sort(values, _partition_first)


def quick_sort_last(values: Iterable[Any]) -> list:
    """Quicksort that pivots on the last element of each range."""
    return _quick_sort(values, _partition_last)


def quick_sort_random(values: Iterable[Any], rng: random.Random | None = None) -> list:
    """Quicksort that pivots on a randomly chosen element of each range."""
    chooser = rng if rng is not None else random.Random()

    def partition(items: list, low: int, high: int) -> int:
        chosen = chooser.randint(low, high)
        items[chosen], items[high] = items[high], items[chosen]
        return _partition_last(items, low, high)

    return _quick_sort(values, partition)