"""Unbalanced binary search tree of unique values."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding ``data`` and two optional children."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _insert(node: TreeNode | None, value: Any) -> TreeNode:
    if node is None:
        return TreeNode(value)
    if value > node.data:
        node.right = _insert(node.right, value)
    elif value < node.data:
        node.left = _insert(node.left, value)
    return node


def _max_node(node: TreeNode) -> TreeNode:
    while node.right is not None:
        node = node.right
    return node


def _delete(node: TreeNode | None, value: Any) -> TreeNode | None:
    if node is None:
        return None
    if value > node.data:
        node.right = _delete(node.right, value)
    elif value < node.data:
        node.left = _delete(node.left, value)
    elif node.left is None:
        return node.right
    elif node.right is None:
        return node.left
    else:
        # Replace with the greatest value of the left subtree.
        predecessor = _max_node(node.left)
        node.data = predecessor.data
        node.left = _delete(node.left, predecessor.data)
    return node


def _height(node: TreeNode | None) -> int:
    if node is None:
        return 0
    return max(_height(node.left), _height(node.right)) + 1


def _inorder(node: TreeNode | None, out: list[Any]) -> None:
    if node is not None:
        _inorder(node.left, out)
        out.append(node.data)
        _inorder(node.right, out)


class BinarySearchTree:
    """Binary search tree without rebalancing; duplicates are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` unless it is already present."""
        self.root = _insert(self.root, value)

    def delete(self, value: Any) -> None:
        """Remove ``value`` if present; absent values are ignored."""
        self.root = _delete(self.root, value)

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node is not None:
            if value > node.data:
                node = node.right
            elif value < node.data:
                node = node.left
            else:
                return True
        return False

    def height(self) -> int:
        """Number of levels: 0 for an empty tree, 1 for a single node."""
        return _height(self.root)

    def inorder(self) -> list[Any]:
        """Values in ascending order."""
        out: list[Any] = []
        _inorder(self.root, out)
        return out

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"