"""Self-balancing AVL binary search tree of unique keys."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class AVLNode:
    """A tree node; a leaf has height 0 and an empty subtree counts as -1."""

    key: Any
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 0


def _height(node: AVLNode | None) -> int:
    return -1 if node is None else node.height


def _balance(node: AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(z: AVLNode) -> AVLNode:
    y = z.left
    assert y is not None
    z.left = y.right
    y.right = z
    _update_height(z)
    _update_height(y)
    return y


def _rotate_left(z: AVLNode) -> AVLNode:
    y = z.right
    assert y is not None
    z.right = y.left
    y.left = z
    _update_height(z)
    _update_height(y)
    return y


def _rotate_left_right(z: AVLNode) -> AVLNode:
    assert z.left is not None
    z.left = _rotate_left(z.left)
    return _rotate_right(z)


def _rotate_right_left(z: AVLNode) -> AVLNode:
    assert z.right is not None
    z.right = _rotate_right(z.right)
    return _rotate_left(z)


def _insert(node: AVLNode | None, key: Any) -> tuple[AVLNode, bool]:
    if node is None:
        return AVLNode(key), True
    if key < node.key:
        node.left, added = _insert(node.left, key)
    elif key > node.key:
        node.right, added = _insert(node.right, key)
    else:
        return node, False

    _update_height(node)
    balance = _balance(node)
    if balance > 1:
        assert node.left is not None
        if key < node.left.key:
            return _rotate_right(node), added
        return _rotate_left_right(node), added
    if balance < -1:
        assert node.right is not None
        if key > node.right.key:
            return _rotate_left(node), added
        return _rotate_right_left(node), added
    return node, added


def _min_node(node: AVLNode) -> AVLNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: AVLNode | None, key: Any) -> AVLNode | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None:
        return node.right
    elif node.right is None:
        return node.left
    else:
        successor = _min_node(node.right)
        node.key = successor.key
        node.right = _delete(node.right, successor.key)

    _update_height(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) >= 0:
            return _rotate_right(node)
        return _rotate_left_right(node)
    if balance < -1:
        if _balance(node.right) <= 0:
            return _rotate_left(node)
        return _rotate_right_left(node)
    return node


def _preorder(node: AVLNode | None, out: list[Any]) -> None:
    if node is not None:
        out.append(node.key)
        _preorder(node.left, out)
        _preorder(node.right, out)


def _inorder(node: AVLNode | None, out: list[Any]) -> None:
    if node is not None:
        _inorder(node.left, out)
        out.append(node.key)
        _inorder(node.right, out)


def _postorder(node: AVLNode | None, out: list[Any]) -> None:
    if node is not None:
        _postorder(node.left, out)
        _postorder(node.right, out)
        out.append(node.key)


def _render(node: AVLNode | None, level: int) -> str:
    if node is None:
        return ""
    return (
        _render(node.right, level + 1)
        + "\n\n"
        + "\t" * level
        + str(node.key)
        + _render(node.left, level + 1)
    )


class AVLTree:
    """Binary search tree kept height-balanced by rotations."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: AVLNode | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> bool:
        """Add ``key``; return False if it was already present."""
        self.root, added = _insert(self.root, key)
        return added

    def delete(self, key: Any) -> None:
        """Remove ``key``; raise KeyError if it is not in the tree."""
        if self.find(key) is None:
            raise KeyError(key)
        self.root = _delete(self.root, key)

    def find(self, key: Any) -> AVLNode | None:
        """Return the node holding ``key``, or None."""
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def preorder(self) -> list[Any]:
        """Keys in root, left, right order."""
        out: list[Any] = []
        _preorder(self.root, out)
        return out

    def inorder(self) -> list[Any]:
        """Keys in ascending order."""
        out: list[Any] = []
        _inorder(self.root, out)
        return out

    def postorder(self) -> list[Any]:
        """Keys in left, right, root order."""
        out: list[Any] = []
        _postorder(self.root, out)
        return out

    def render(self) -> str:
        """Draw the tree sideways: right subtree above, one tab per level."""
        return _render(self.root, 1)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"