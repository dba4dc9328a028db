"""Binary tree nodes, traversals and recursive tree measurements."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    data: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass(eq=False)
class ThreadedNode:
    """A node of a threaded binary tree.

    When ``is_thread`` is true, ``right`` points to the inorder successor
    rather than to a right child.
    """

    data: Any
    left: Optional[ThreadedNode] = None
    right: Optional[ThreadedNode] = None
    is_thread: bool = False


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the node values in left-node-right order."""
    return list(_inorder(root))


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the node values in node-left-right order."""
    return list(_preorder(root))


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the node values in left-right-node order."""
    return list(_postorder(root))


def inorder_iterative(root: Optional[TreeNode]) -> list[Any]:
    """Return the inorder values, walking the tree with an explicit stack."""
    stack: list[TreeNode] = []
    visited: list[Any] = []
    node = root
    while True:
        while node is not None:
            stack.append(node)
            node = node.left
        if not stack:
            return visited
        node = stack.pop()
        visited.append(node.data)
        node = node.right


def directory_size(root: Optional[TreeNode]) -> int:
    """Return the total size of a directory tree: each node's own size plus its subtrees."""
    if root is None:
        return 0
    return root.data + directory_size(root.left) + directory_size(root.right)


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("division by zero in expression tree")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
}


def evaluate_expression(root: TreeNode) -> int:
    """Evaluate an expression tree whose leaves hold integers and inner nodes operators."""
    if root.left is None and root.right is None:
        return root.data
    if root.left is None or root.right is None:
        raise ValueError(f"operator node {root.data!r} needs two operands")
    operation = _OPERATIONS.get(root.data)
    if operation is None:
        raise ValueError(f"unknown operator {root.data!r}")
    return operation(evaluate_expression(root.left), evaluate_expression(root.right))


def count_nodes(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def count_leaves(root: Optional[TreeNode]) -> int:
    """Return the number of nodes without children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def height(root: Optional[TreeNode]) -> int:
    """Return the number of levels in the tree; an empty tree has height 0."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def find_successor(node: ThreadedNode) -> Optional[ThreadedNode]:
    """Return the inorder successor of ``node`` in a threaded tree."""
    successor = node.right
    if successor is None or node.is_thread:
        return successor
    while successor.left is not None:
        successor = successor.left
    return successor


def threaded_inorder(root: Optional[ThreadedNode]) -> list[Any]:
    """Return the inorder values of a threaded tree without recursion or a stack."""
    if root is None:
        return []
    node: Optional[ThreadedNode] = root
    while node.left is not None:
        node = node.left
    visited: list[Any] = []
    while node is not None:
        visited.append(node.data)
        node = find_successor(node)
    return visited