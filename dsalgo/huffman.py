"""Huffman trees built with a min heap, and the prefix codes they yield."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from dsalgo.heaps import MinHeap


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a symbol."""

    weight: int
    symbol: Optional[Any] = None
    left: Optional[HuffmanNode] = None
    right: Optional[HuffmanNode] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


@dataclass(frozen=True)
class HuffmanTree:
    """A finished Huffman tree with the merges that built it.

    Each merge is ``(first_weight, second_weight, combined_weight)`` in the
    order the merges happened.
    """

    root: HuffmanNode
    merges: tuple[tuple[int, int, int], ...]


def _weight(node: HuffmanNode) -> int:
    return node.weight


def build_huffman_tree(
    symbols: Iterable[Any], frequencies: Iterable[int]
) -> HuffmanTree:
    """Build a Huffman tree by repeatedly joining the two lightest subtrees.

    The lighter subtree of each pair becomes the left child.
    """
    symbol_list = list(symbols)
    frequency_list = list(frequencies)
    if len(symbol_list) != len(frequency_list):
        raise ValueError("every symbol needs exactly one frequency")
    if not symbol_list:
        raise ValueError("at least one symbol is needed")

    heap = MinHeap(key=_weight, capacity=len(symbol_list))
    for symbol, frequency in zip(symbol_list, frequency_list):
        heap.insert(HuffmanNode(frequency, symbol))

    merges: list[tuple[int, int, int]] = []
    for _ in range(len(symbol_list) - 1):
        first = heap.delete_min()
        second = heap.delete_min()
        joined = HuffmanNode(first.weight + second.weight, left=first, right=second)
        merges.append((first.weight, second.weight, joined.weight))
        heap.insert(joined)

    return HuffmanTree(heap.delete_min(), tuple(merges))


def huffman_codes(root: HuffmanNode) -> dict[Any, str]:
    """Return each leaf symbol's code: ``'1'`` for a left branch, ``'0'`` for a right one.

    Symbols appear in the order a left-first walk of the tree meets them.
    """

    def walk(node: HuffmanNode, prefix: str) -> Iterator[tuple[Any, str]]:
        if node.left is not None:
            yield from walk(node.left, prefix + "1")
        if node.right is not None:
            yield from walk(node.right, prefix + "0")
        if node.is_leaf:
            yield node.symbol, prefix

    return dict(walk(root, ""))