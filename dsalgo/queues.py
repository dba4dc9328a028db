"""Queues backed by a linear array, a circular array and linked nodes, plus a deque."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

MAX_QUEUE_SIZE = 5


class QueueEmptyError(IndexError):
    """Raised when removing from or inspecting an empty queue."""


class QueueFullError(OverflowError):
    """Raised when adding to a full bounded queue."""


class CircularQueue:
    """A ring-buffer queue that keeps one slot free, so it holds ``capacity - 1`` items."""

    def __init__(self, capacity: int = MAX_QUEUE_SIZE) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self.capacity = capacity
        self._data: list[Any] = [None] * capacity
        self.front = 0
        self.rear = 0

    def is_empty(self) -> bool:
        return self.front == self.rear

    def is_full(self) -> bool:
        return (self.rear + 1) % self.capacity == self.front

    def enqueue(self, item: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self.rear = (self.rear + 1) % self.capacity
        self._data[self.rear] = item

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        self.front = (self.front + 1) % self.capacity
        item = self._data[self.front]
        self._data[self.front] = None
        return item

    def __len__(self) -> int:
        return (self.rear - self.front) % self.capacity

    def __iter__(self) -> Iterator[Any]:
        index = self.front
        while index != self.rear:
            index = (index + 1) % self.capacity
            yield self._data[index]

    def __str__(self) -> str:
        items = "".join(f"{item} | " for item in self)
        return f"QUEUE(front={self.front} rear={self.rear}) = {items}"


class LinearQueue:
    """An array queue whose slots are never reused once the rear reaches the end."""

    def __init__(self, capacity: int = MAX_QUEUE_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._data: list[Any] = [None] * capacity
        self.front = -1
        self.rear = -1

    def is_empty(self) -> bool:
        return self.front == self.rear

    def is_full(self) -> bool:
        return self.rear == self.capacity - 1

    def enqueue(self, item: Any) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self.rear += 1
        self._data[self.rear] = item

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        self.front += 1
        return self._data[self.front]

    def __len__(self) -> int:
        return self.rear - self.front

    def __str__(self) -> str:
        return "".join(
            f"{self._data[i]} | " if self.front < i <= self.rear else "   | "
            for i in range(self.capacity)
        )


class CircularDeque:
    """A double-ended queue on a ring buffer holding ``capacity - 1`` items."""

    def __init__(self, capacity: int = MAX_QUEUE_SIZE) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self.capacity = capacity
        self._data: list[Any] = [None] * capacity
        self.front = 0
        self.rear = 0

    def is_empty(self) -> bool:
        return self.front == self.rear

    def is_full(self) -> bool:
        return (self.rear + 1) % self.capacity == self.front

    def _require_items(self) -> None:
        if self.is_empty():
            raise QueueEmptyError("deque is empty")

    def _require_room(self) -> None:
        if self.is_full():
            raise QueueFullError("deque is full")

    def add_rear(self, item: Any) -> None:
        self._require_room()
        self.rear = (self.rear + 1) % self.capacity
        self._data[self.rear] = item

    def add_front(self, item: Any) -> None:
        self._require_room()
        self._data[self.front] = item
        self.front = (self.front - 1) % self.capacity

    def delete_front(self) -> Any:
        self._require_items()
        self.front = (self.front + 1) % self.capacity
        item = self._data[self.front]
        self._data[self.front] = None
        return item

    def delete_rear(self) -> Any:
        self._require_items()
        item = self._data[self.rear]
        self._data[self.rear] = None
        self.rear = (self.rear - 1) % self.capacity
        return item

    def get_front(self) -> Any:
        self._require_items()
        return self._data[(self.front + 1) % self.capacity]

    def get_rear(self) -> Any:
        self._require_items()
        return self._data[self.rear]

    def __len__(self) -> int:
        return (self.rear - self.front) % self.capacity

    def __iter__(self) -> Iterator[Any]:
        index = self.front
        while index != self.rear:
            index = (index + 1) % self.capacity
            yield self._data[index]

    def __str__(self) -> str:
        items = "".join(f"{item} | " for item in self)
        return f"DEQUE(front={self.front} rear={self.rear}) = {items}"


@dataclass
class _Node:
    data: Any
    link: Optional[_Node] = None


class LinkedQueue:
    """An unbounded queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, item: Any) -> None:
        node = _Node(item)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.link = node
            self._rear = node

    def dequeue(self) -> Any:
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        node = self._front
        self._front = node.link
        if self._front is None:
            self._rear = None
        return node.data

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.link

    def __str__(self) -> str:
        return "".join(f"{item}->" for item in self) + "NULL"


def simulate_buffer(
    steps: int = 100,
    rng: Optional[random.Random] = None,
    capacity: int = MAX_QUEUE_SIZE,
) -> list[str]:
    """Run a producer/consumer simulation over a circular queue.

    Each step produces a random value with probability 4/5 (dropped when the
    queue is full) and consumes one with probability 9/10 (skipped when it is
    empty).  The queue is rendered after producing and after consuming, so the
    result holds two snapshots per step.
    """
    if steps < 0:
        raise ValueError("steps must not be negative")
    rng = random.Random() if rng is None else rng
    queue = CircularQueue(capacity)
    snapshots: list[str] = []
    for _ in range(steps):
        if rng.randrange(5):
            value = rng.randrange(100)
            if not queue.is_full():
                queue.enqueue(value)
        snapshots.append(str(queue))
        if rng.randrange(10) and not queue.is_empty():
            queue.dequeue()
        snapshots.append(str(queue))
    return snapshots