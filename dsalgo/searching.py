"""Searching in lists: sequential, sentinel, binary, indexed sequential and interpolation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional

INDEX_SIZE = 3


def sequential_search(items: Sequence[Any], key: Any) -> Optional[int]:
    """Return the index of the first item equal to ``key``, or None."""
    return next((i for i, value in enumerate(items) if value == key), None)


def sentinel_search(items: Sequence[Any], key: Any) -> Optional[int]:
    """Sequential search that places ``key`` after the last item as a sentinel.

    The scan needs no bounds check because the sentinel always stops it;
    reaching the sentinel means the key is absent.
    """
    values = list(items)
    values.append(key)
    position = values.index(key)
    return None if position == len(items) else position


def binary_search(items: Sequence[Any], key: Any) -> Optional[int]:
    """Return an index holding ``key`` in the ascending ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        middle = (low + high) // 2
        value = items[middle]
        if value == key:
            return middle
        if value > key:
            high = middle - 1
        else:
            low = middle + 1
    return None


@dataclass(frozen=True)
class IndexEntry:
    """One row of an index table: a key and where it sits in the main list."""

    key: Any
    index: int


def build_index_table(items: Sequence[Any], index_size: int = INDEX_SIZE) -> list[IndexEntry]:
    """Return ``index_size`` entries sampling the sorted ``items`` at an even gap."""
    if index_size < 1:
        raise ValueError("index_size must be positive")
    if len(items) < index_size:
        raise ValueError("the list is shorter than the index table")
    gap = len(items) // index_size
    return [IndexEntry(items[gap * i], gap * i) for i in range(index_size)]


def indexed_search(
    items: Sequence[Any], key: Any, index_size: int = INDEX_SIZE
) -> Optional[int]:
    """Find ``key`` in the sorted ``items`` through an index table.

    The table picks the segment with ``entry.key <= key < next_entry.key``
    (the last segment otherwise) and only that segment is scanned.
    """
    if not items or key < items[0] or key > items[-1]:
        return None
    table = build_index_table(items, index_size)
    bounds = [entry.index for entry in table] + [len(items)]
    segment = next(
        (
            i
            for i, (entry, following) in enumerate(zip(table, table[1:]))
            if entry.key <= key < following.key
        ),
        len(table) - 1,
    )
    start, stop = bounds[segment], bounds[segment + 1]
    return next(
        (i for i, value in enumerate(items[start:stop], start) if value == key),
        None,
    )


def interpolation_search(items: Sequence[float], key: float) -> Optional[int]:
    """Find ``key`` in the ascending numeric ``items`` by estimating its position."""
    if not items:
        return None
    low, high = 0, len(items) - 1
    while items[high] >= key and items[low] < key:
        estimate = int(
            (key - items[low]) / (items[high] - items[low]) * (high - low)
        ) + low
        if key > items[estimate]:
            low = estimate + 1
        elif key < items[estimate]:
            high = estimate - 1
        else:
            low = estimate
    return low if items[low] == key else None