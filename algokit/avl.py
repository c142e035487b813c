"""Self-balancing AVL tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    key: Any
    height: int = 1
    left: _Node | None = None
    right: _Node | None = None


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: _Node | None, key: Any) -> _Node:
    if node is None:
        return _Node(key)

    if key < node.key:
        node.left = _insert(node.left, key)
    else:
        node.right = _insert(node.right, key)

    _update(node)
    balance = _balance(node)

    if balance > 1 and key < node.left.key:
        return _rotate_right(node)
    if balance < -1 and key > node.right.key:
        return _rotate_left(node)
    if balance > 1 and key > node.left.key:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and key < node.right.key:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """An AVL tree; equal keys go to the right subtree."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Add ``key`` and rebalance along the insertion path."""
        self._root = _insert(self._root, key)
        self._size += 1

    def inorder(self) -> list[Any]:
        """Return the stored keys in ascending order."""
        return list(self)

    def height(self) -> int:
        """Return the number of levels in the tree; zero when empty."""
        return _height(self._root)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False