"""Hash tables: separate chaining, linear probing and quadratic probing."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

CHAIN_TABLE_SIZE = 7
PROBE_TABLE_SIZE = 13


class DuplicateKeyError(ValueError):
    """Raised when adding a key that the table already holds."""


class TableFullError(OverflowError):
    """Raised when probing finds no free slot for a new key."""


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def transform(key: str) -> int:
    """Turn a string into a signed 32-bit integer with Horner's rule (base 31)."""
    number = 0
    for byte in key.encode("utf-8"):
        char = byte - 256 if byte > 127 else byte
        number = _to_int32(31 * number + char)
    return number


def hash_string(key: str, size: int) -> int:
    """Return the slot of ``key`` in a table of ``size`` slots (division method)."""
    if size < 1:
        raise ValueError("table size must be positive")
    return transform(key) % size


class ChainedHashTable:
    """A table of integer keys where colliding keys share a chain."""

    def __init__(self, size: int = CHAIN_TABLE_SIZE) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.size = size
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def _bucket(self, key: int) -> int:
        return key % self.size

    def add(self, key: int) -> int:
        """Append ``key`` to its chain and return the chain's index."""
        index = self._bucket(key)
        chain = self._buckets[index]
        if key in chain:
            raise DuplicateKeyError(f"key {key!r} is already in the table")
        chain.append(key)
        return index

    def search(self, key: int) -> int:
        """Return the index of the chain holding ``key``; raise KeyError if absent."""
        index = self._bucket(key)
        if key not in self._buckets[index]:
            raise KeyError(key)
        return index

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and key in self._buckets[self._bucket(key)]

    def __str__(self) -> str:
        return "\n".join(
            f"[{i}] " + "".join(f"{key} -> " for key in chain)
            for i, chain in enumerate(self._buckets)
        )


class LinearProbingTable:
    """An open-addressing table of string keys probing one slot at a time."""

    def __init__(self, size: int = PROBE_TABLE_SIZE) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.size = size
        self._slots: list[Optional[str]] = [None] * size

    def _offset(self, step: int) -> int:
        return 1

    def _probe(self, key: str) -> Iterator[int]:
        start = hash_string(key, self.size)
        slot = start
        step = 1
        while True:
            yield slot
            slot = (slot + self._offset(step)) % self.size
            step += 1
            if slot == start:
                return

    def add(self, key: str) -> int:
        """Store ``key`` and return its slot."""
        if not key:
            raise ValueError("keys must be non-empty strings")
        for slot in self._probe(key):
            occupant = self._slots[slot]
            if occupant is None:
                self._slots[slot] = key
                return slot
            if occupant == key:
                raise DuplicateKeyError(f"key {key!r} is already in the table")
        raise TableFullError("no free slot for the key")

    def search(self, key: str) -> int:
        """Return the slot holding ``key``; raise KeyError if absent."""
        for slot in self._probe(key):
            occupant = self._slots[slot]
            if occupant is None:
                break
            if occupant == key:
                return slot
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or not key:
            return False
        try:
            self.search(key)
        except KeyError:
            return False
        return True

    def __str__(self) -> str:
        return "\n".join(
            f"[{i}] {key or ''} " for i, key in enumerate(self._slots)
        )


class QuadraticProbingTable(LinearProbingTable):
    """An open-addressing table whose k-th probe jumps a further k*k slots."""

    def _offset(self, step: int) -> int:
        return step * step