"""Red-black tree with insertion and rebalancing."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


class Color(enum.Enum):
    RED = "red"
    BLACK = "black"


@dataclass(eq=False)
class _Node:
    data: Any
    color: Color = Color.RED
    left: _Node | None = None
    right: _Node | None = None
    parent: _Node | None = None


class RedBlackTree:
    """A red-black tree of distinct values; inserting a present value does nothing."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, data: Any) -> None:
        """Add ``data`` unless it is already present, then restore the colouring."""
        node = _Node(data)
        if self._root is None:
            self._root = node
        else:
            current = self._root
            while True:
                if data < current.data:
                    if current.left is None:
                        current.left = node
                        break
                    current = current.left
                elif data > current.data:
                    if current.right is None:
                        current.right = node
                        break
                    current = current.right
                else:
                    return
            node.parent = current
        self._size += 1
        self._fix_violation(node)

    def inorder(self) -> list[Any]:
        """Return the stored values in ascending order."""
        return list(self)

    def _rotate_left(self, pt: _Node) -> None:
        child = pt.right
        pt.right = child.left
        if pt.right is not None:
            pt.right.parent = pt
        child.parent = pt.parent
        if pt.parent is None:
            self._root = child
        elif pt is pt.parent.left:
            pt.parent.left = child
        else:
            pt.parent.right = child
        child.left = pt
        pt.parent = child

    def _rotate_right(self, pt: _Node) -> None:
        child = pt.left
        pt.left = child.right
        if pt.left is not None:
            pt.left.parent = pt
        child.parent = pt.parent
        if pt.parent is None:
            self._root = child
        elif pt is pt.parent.left:
            pt.parent.left = child
        else:
            pt.parent.right = child
        child.right = pt
        pt.parent = child

    def _fix_violation(self, pt: _Node) -> None:
        while (
            pt is not self._root
            and pt.color is Color.RED
            and pt.parent.color is Color.RED
        ):
            parent = pt.parent
            grandparent = parent.parent

            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle is not None and uncle.color is Color.RED:
                    grandparent.color = Color.RED
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    pt = grandparent
                else:
                    if pt is parent.right:
                        self._rotate_left(parent)
                        pt = parent
                        parent = pt.parent
                    self._rotate_right(grandparent)
                    parent.color, grandparent.color = grandparent.color, parent.color
                    pt = parent
            else:
                uncle = grandparent.left
                if uncle is not None and uncle.color is Color.RED:
                    grandparent.color = Color.RED
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    pt = grandparent
                else:
                    if pt is parent.left:
                        self._rotate_right(parent)
                        pt = parent
                        parent = pt.parent
                    self._rotate_left(grandparent)
                    parent.color, grandparent.color = grandparent.color, parent.color
                    pt = parent
        self._root.color = Color.BLACK

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, data: Any) -> bool:
        node = self._root
        while node is not None:
            if data == node.data:
                return True
            node = node.left if data < node.data else node.right
        return False