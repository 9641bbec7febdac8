"""A self-balancing AVL tree of distinct integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

__all__ = ["AVLTree"]


class _Node:
    __slots__ = ("value", "left", "right", "height")

    def __init__(self, value: int) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.height = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


class AVLTree:
    """Height-balanced binary search tree; duplicate values are ignored."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Add ``value``; returns False when it was already present."""
        before = self._size
        self._root = self._insert(self._root, value)
        return self._size > before

    def _insert(self, node: _Node | None, value: int) -> _Node:
        if node is None:
            self._size += 1
            return _Node(value)
        if value < node.value:
            node.left = self._insert(node.left, value)
        elif value > node.value:
            node.right = self._insert(node.right, value)
        else:
            return node

        _update(node)
        balance = _height(node.left) - _height(node.right)

        if balance > 1:
            assert node.left is not None
            if value > node.left.value:
                node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1:
            assert node.right is not None
            if value < node.right.value:
                node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right  # type: ignore[operator]
        return False

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""
        return _height(self._root)

    def clear(self) -> None:
        """Remove every value."""
        self._root = None
        self._size = 0