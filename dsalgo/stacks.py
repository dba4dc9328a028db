"""Stacks backed by a fixed array, a growing array and linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

MAX_STACK_SIZE = 100


class StackEmptyError(IndexError):
    """Raised when popping or peeking an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a full bounded stack."""


class ArrayStack:
    """A stack with a fixed capacity."""

    def __init__(self, capacity: int = MAX_STACK_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)


class DynamicStack:
    """An unbounded stack whose reserved capacity doubles when it fills."""

    def __init__(self) -> None:
        self.capacity = 1
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        if len(self._items) == self.capacity:
            self.capacity *= 2
        self._items.append(item)

    def pop(self) -> Any:
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Node:
    data: Any
    link: Optional[_Node] = None


class LinkedStack:
    """A stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None

    def push(self, item: Any) -> None:
        self._top = _Node(item, self._top)

    def pop(self) -> Any:
        if self._top is None:
            raise StackEmptyError("stack is empty")
        node = self._top
        self._top = node.link
        return node.data

    def peek(self) -> Any:
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None

    def __iter__(self) -> Iterator[Any]:
        node = self._top
        while node is not None:
            yield node.data
            node = node.link

    def __str__(self) -> str:
        return "".join(f"{item}->" for item in self) + "NULL"