"""Binary heaps, heap sort and longest-processing-time machine scheduling."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import itemgetter
from typing import Any, Callable, ClassVar, Optional

MAX_ELEMENT = 100


class HeapEmptyError(IndexError):
    """Raised when removing from an empty heap."""


class _BinaryHeap:
    """A 1-indexed array heap; ``_largest_first`` decides which item rises to the top."""

    _largest_first: ClassVar[bool] = True

    def __init__(
        self,
        key: Optional[Callable[[Any], Any]] = None,
        capacity: int = MAX_ELEMENT - 1,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.key = key
        self.capacity = capacity
        self._heap: list[Any] = [None]

    def _key_of(self, item: Any) -> Any:
        return item if self.key is None else self.key(item)

    def _before(self, a: Any, b: Any) -> bool:
        ka, kb = self._key_of(a), self._key_of(b)
        return ka > kb if self._largest_first else ka < kb

    def _stops(self, item: Any, child: Any) -> bool:
        ki, kc = self._key_of(item), self._key_of(child)
        return ki >= kc if self._largest_first else ki < kc

    def __len__(self) -> int:
        return len(self._heap) - 1

    def _push(self, item: Any) -> None:
        if len(self) == self.capacity:
            raise OverflowError("heap is full")
        heap = self._heap
        heap.append(item)
        index = len(heap) - 1
        while index != 1 and self._before(item, heap[index // 2]):
            heap[index] = heap[index // 2]
            index //= 2
        heap[index] = item

    def _pop(self) -> Any:
        if not len(self):
            raise HeapEmptyError("heap is empty")
        heap = self._heap
        top = heap[1]
        last = heap.pop()
        size = len(heap) - 1
        if size == 0:
            return top
        parent, child = 1, 2
        while child <= size:
            if child < size and self._before(heap[child + 1], heap[child]):
                child += 1
            if self._stops(last, heap[child]):
                break
            heap[parent] = heap[child]
            parent, child = child, child * 2
        heap[parent] = last
        return top


class MaxHeap(_BinaryHeap):
    """A heap that returns the item with the largest key first."""

    _largest_first = True

    def insert(self, item: Any) -> None:
        self._push(item)

    def delete_max(self) -> Any:
        return self._pop()

    def __len__(self) -> int:
        return super().__len__()


class MinHeap(_BinaryHeap):
    """A heap that returns the item with the smallest key first."""

    _largest_first = False

    def insert(self, item: Any) -> None:
        self._push(item)

    def delete_min(self) -> Any:
        return self._pop()

    def __len__(self) -> int:
        return super().__len__()


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, sorted through a max heap."""
    values = list(items)
    if not values:
        return []
    heap = MaxHeap(capacity=len(values))
    for value in values:
        heap.insert(value)
    result = [heap.delete_max() for _ in values]
    result.reverse()
    return result


@dataclass(frozen=True)
class Assignment:
    """A job placed on a machine over the inclusive time span ``start``..``end``."""

    job: int
    machine: int
    start: int
    end: int


def schedule_lpt(durations: Sequence[int], machines: int = 3) -> list[Assignment]:
    """Assign jobs in the given order, each to the machine that frees up first.

    For the longest-processing-time rule pass the durations in descending
    order. Machines are numbered from 1.
    """
    if machines < 1:
        raise ValueError("at least one machine is needed")
    heap = MinHeap(key=itemgetter(1), capacity=machines)
    for machine in range(1, machines + 1):
        heap.insert((machine, 0))
    schedule: list[Assignment] = []
    for job, duration in enumerate(durations):
        if duration < 1:
            raise ValueError(f"job {job} has a non-positive duration")
        machine, available = heap.delete_min()
        schedule.append(Assignment(job, machine, available, available + duration - 1))
        heap.insert((machine, available + duration))
    return schedule