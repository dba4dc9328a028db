"""Binary search trees: a plain one and a self-balancing AVL tree."""

from __future__ import annotations

from typing import Any, Optional

from dsalgo.trees import TreeNode, inorder, preorder
from dsalgo.trees import height as _tree_height


class DuplicateKeyError(ValueError):
    """Raised when inserting a key that the tree already holds."""


def _find(node: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    while node is not None:
        if key < node.data:
            node = node.left
        elif key > node.data:
            node = node.right
        else:
            return node
    return None


class BinarySearchTree:
    """An unbalanced binary search tree of distinct keys."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None

    def insert(self, key: Any) -> None:
        """Insert ``key``; raise DuplicateKeyError if it is already present."""
        self.root = self._insert(self.root, key)

    def _insert(self, node: Optional[TreeNode], key: Any) -> TreeNode:
        if node is None:
            return TreeNode(key)
        if key < node.data:
            node.left = self._insert(node.left, key)
        elif key > node.data:
            node.right = self._insert(node.right, key)
        else:
            raise DuplicateKeyError(f"key {key!r} is already in the tree")
        return node

    def delete(self, key: Any) -> None:
        """Remove ``key``; raise KeyError if it is absent."""
        self.root = self._delete(self.root, key)

    def _delete(self, node: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
        if node is None:
            raise KeyError(key)
        if key < node.data:
            node.left = self._delete(node.left, key)
            return node
        if key > node.data:
            node.right = self._delete(node.right, key)
            return node
        if node.right is None:
            return node.left
        if node.left is None:
            return node.right
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.data = successor.data
        node.right = self._delete(node.right, successor.data)
        return node

    def search(self, key: Any) -> Optional[TreeNode]:
        """Return the node holding ``key``, or None."""
        return _find(self.root, key)

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        return inorder(self.root)


def _rotate_right(parent: TreeNode) -> TreeNode:
    child = parent.left
    parent.left = child.right
    child.right = parent
    return child


def _rotate_left(parent: TreeNode) -> TreeNode:
    child = parent.right
    parent.right = child.left
    child.left = parent
    return child


def _balance(node: TreeNode) -> int:
    return _tree_height(node.left) - _tree_height(node.right)


class AVLTree:
    """A height-balanced binary search tree of distinct keys."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None

    def insert(self, key: Any) -> None:
        """Insert ``key`` and rebalance; raise DuplicateKeyError if present."""
        self.root = self._insert(self.root, key)

    def _insert(self, node: Optional[TreeNode], key: Any) -> TreeNode:
        if node is None:
            return TreeNode(key)
        if key < node.data:
            node.left = self._insert(node.left, key)
        elif key > node.data:
            node.right = self._insert(node.right, key)
        else:
            raise DuplicateKeyError(f"key {key!r} is already in the tree")

        balance = _balance(node)
        if balance > 1:
            if key > node.left.data:
                node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1:
            if key < node.right.data:
                node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def __contains__(self, key: Any) -> bool:
        return _find(self.root, key) is not None

    def preorder(self) -> list[Any]:
        return preorder(self.root)

    def inorder(self) -> list[Any]:
        return inorder(self.root)

    def height(self) -> int:
        """Return the number of levels; an empty tree has height 0."""
        return _tree_height(self.root)