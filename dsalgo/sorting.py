"""Comparison sorts: bubble, selection, insertion, shell, merge and quick sort."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by repeatedly swapping adjacent out-of-order pairs."""
    values = list(items)
    for last in range(len(values) - 1, 0, -1):
        for j in range(last):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
    return values


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by moving the least remaining one to the front."""
    values = list(items)
    for i in range(len(values) - 1):
        least = min(range(i, len(values)), key=values.__getitem__)
        if least != i:
            values[i], values[least] = values[least], values[i]
    return values


def _gapped_insertion(values: list[Any], first: int, gap: int) -> None:
    for i in range(first + gap, len(values), gap):
        key = values[i]
        j = i - gap
        while j >= 0 and key < values[j]:
            values[j + gap] = values[j]
            j -= gap
        values[j + gap] = key


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by inserting each into the sorted prefix."""
    values = list(items)
    _gapped_insertion(values, 0, 1)
    return values


def shell_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by insertion sorts over shrinking, always odd, gaps."""
    values = list(items)
    gap = len(values) // 2
    while gap > 0:
        if gap % 2 == 0:
            gap += 1
        for first in range(gap):
            _gapped_insertion(values, first, gap)
        gap //= 2
    return values


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by splitting in halves and merging the sorted halves."""
    values = list(items)
    if len(values) < 2:
        return values
    middle = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:middle]), merge_sort(values[middle:]))


def _partition(values: list[Any], left: int, right: int) -> int:
    pivot = values[left]
    low, high = left, right + 1
    while True:
        low += 1
        while low <= right and values[low] < pivot:
            low += 1
        high -= 1
        while values[high] > pivot:
            high -= 1
        if low < high:
            values[low], values[high] = values[high], values[low]
        else:
            break
    values[left], values[high] = values[high], values[left]
    return high


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by partitioning around the first element of each range."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        left, right = pending.pop()
        if left < right:
            split = _partition(values, left, right)
            pending.append((left, split - 1))
            pending.append((split + 1, right))
    return values


def is_sorted(items: Iterable[Any]) -> bool:
    """Return whether no item is smaller than the one before it."""
    values = list(items)
    return all(a <= b for a, b in zip(values, values[1:]))


def sort_dictionary(entries: Iterable[tuple[str, str]]) -> list[tuple[str, str]]:
    """Return ``(word, meaning)`` pairs ordered by word with an insertion sort.

    Entries with the same word keep their original order.
    """
    values = [(word, meaning) for word, meaning in entries]
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j][0] > key[0]:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key
    return values