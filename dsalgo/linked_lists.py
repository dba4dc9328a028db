"""Lists: singly linked, array backed, circular and doubly linked, plus a playlist."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

MAX_LIST_SIZE = 100


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    data: Any
    link: Optional[ListNode] = None


class SinglyLinkedList:
    """A singly linked list addressed through its head node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        for item in reversed(list(items)):
            self.insert_first(item)

    def insert_first(self, item: Any) -> ListNode:
        """Insert ``item`` at the front and return its node."""
        self.head = ListNode(item, self.head)
        return self.head

    def insert_after(self, node: ListNode, item: Any) -> ListNode:
        """Insert ``item`` right after ``node`` and return the new node."""
        node.link = ListNode(item, node.link)
        return node.link

    def delete_first(self) -> Any:
        if self.head is None:
            raise IndexError("list is empty")
        removed = self.head
        self.head = removed.link
        return removed.data

    def delete_after(self, node: ListNode) -> Any:
        removed = node.link
        if removed is None:
            raise IndexError("node has no successor")
        node.link = removed.link
        return removed.data

    def search(self, item: Any) -> Optional[ListNode]:
        """Return the first node holding ``item``, or None."""
        node = self.head
        while node is not None:
            if node.data == item:
                return node
            node = node.link
        return None

    def concat(self, other: SinglyLinkedList) -> SinglyLinkedList:
        """Append the nodes of ``other`` to this list; ``other`` is left empty."""
        if self.head is None:
            self.head = other.head
        else:
            tail = self.head
            while tail.link is not None:
                tail = tail.link
            tail.link = other.head
        other.head = None
        return self

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.link

    def __str__(self) -> str:
        return "".join(f"{item}->" for item in self) + "NULL"


class ArrayList:
    """A positional list stored in a bounded array."""

    def __init__(self, capacity: int = MAX_LIST_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def insert(self, pos: int, item: Any) -> None:
        if self.is_full():
            raise OverflowError("list is full")
        if not 0 <= pos <= len(self._items):
            raise IndexError(f"position {pos} is out of range")
        self._items.insert(pos, item)

    def insert_first(self, item: Any) -> None:
        self.insert(0, item)

    def insert_last(self, item: Any) -> None:
        self.insert(len(self._items), item)

    def delete(self, pos: int) -> Any:
        if self.is_empty():
            raise IndexError("list is empty")
        if not 0 <= pos < len(self._items):
            raise IndexError(f"position {pos} is out of range")
        return self._items.pop(pos)

    def get_entry(self, pos: int) -> Any:
        if not 0 <= pos < len(self._items):
            raise IndexError(f"position {pos} is out of range")
        return self._items[pos]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __str__(self) -> str:
        return "".join(f"{item}->" for item in self._items)


class CircularList:
    """A circular singly linked list reached through its last node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._tail: Optional[ListNode] = None
        for item in items:
            self.insert_last(item)

    def _link_in(self, item: Any) -> ListNode:
        node = ListNode(item)
        if self._tail is None:
            node.link = node
            self._tail = node
        else:
            node.link = self._tail.link
            self._tail.link = node
        return node

    def insert_first(self, item: Any) -> None:
        self._link_in(item)

    def insert_last(self, item: Any) -> None:
        self._tail = self._link_in(item)

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail.link
        while True:
            yield node.data
            if node is self._tail:
                return
            node = node.link

    def __str__(self) -> str:
        return "".join(f"{item}->" for item in self)

    def turns(self, count: int) -> Iterator[Any]:
        """Yield ``count`` items going round the ring from the first one."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count and self._tail is None:
            raise IndexError("list is empty")
        tail = self._tail

        def walk() -> Iterator[Any]:
            node = tail.link if tail is not None else None
            for _ in range(count):
                yield node.data
                node = node.link

        return walk()


@dataclass(eq=False)
class _DNode:
    data: Any
    llink: Optional[_DNode] = None
    rlink: Optional[_DNode] = None


def _sentinel() -> _DNode:
    head = _DNode(None)
    head.llink = head.rlink = head
    return head


def _link_after(head: _DNode, item: Any) -> _DNode:
    node = _DNode(item, llink=head, rlink=head.rlink)
    head.rlink.llink = node
    head.rlink = node
    return node


def _ring(head: _DNode) -> Iterator[_DNode]:
    node = head.rlink
    while node is not head:
        yield node
        node = node.rlink


class DoublyLinkedList:
    """A circular doubly linked list with a sentinel head; items go in at the front."""

    def __init__(self) -> None:
        self._head = _sentinel()

    def insert(self, item: Any) -> None:
        _link_after(self._head, item)

    def delete_first(self) -> Any:
        node = self._head.rlink
        if node is self._head:
            raise IndexError("list is empty")
        node.rlink.llink = self._head
        self._head.rlink = node.rlink
        return node.data

    def is_empty(self) -> bool:
        return self._head.rlink is self._head

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in _ring(self._head))

    def __str__(self) -> str:
        return " ".join(f"<-| |{item}| |->" for item in self)


class Playlist:
    """A ring of songs with a current position that moves both ways."""

    def __init__(self, songs: Iterable[str] = ()) -> None:
        self._head = _sentinel()
        self._current: Optional[_DNode] = None
        for song in songs:
            self.add(song)
        if not self._is_empty():
            self._current = self._head.rlink

    def _is_empty(self) -> bool:
        return self._head.rlink is self._head

    @property
    def current(self) -> Optional[str]:
        return None if self._current is None else self._current.data

    def add(self, song: str) -> None:
        """Put ``song`` at the front of the playlist."""
        node = _link_after(self._head, song)
        if self._current is None:
            self._current = node

    def next(self) -> str:
        if self._current is None:
            raise IndexError("playlist is empty")
        node = self._current.rlink
        if node is self._head:
            node = node.rlink
        self._current = node
        return node.data

    def previous(self) -> str:
        if self._current is None:
            raise IndexError("playlist is empty")
        node = self._current.llink
        if node is self._head:
            node = node.llink
        self._current = node
        return node.data

    def handle_command(self, command: str) -> bool:
        """Apply ``'<'`` or ``'>'``; return False once ``'q'`` asks to stop."""
        command = command.strip()
        if command == "<":
            self.previous()
        elif command == ">":
            self.next()
        return command != "q"

    def __str__(self) -> str:
        return " ".join(
            f"<-| #{node.data}# |->" if node is self._current else f"<-| {node.data} |->"
            for node in _ring(self._head)
        )