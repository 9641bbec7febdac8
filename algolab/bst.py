"""An unbalanced binary search tree that can be rebalanced on demand."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

__all__ = ["BinarySearchTree"]


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: int) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None


def _build_balanced(values: Sequence[int], start: int, end: int) -> _Node | None:
    if start > end:
        return None
    mid = start + (end - start) // 2
    node = _Node(values[mid])
    node.left = _build_balanced(values, start, mid - 1)
    node.right = _build_balanced(values, mid + 1, end)
    return node


class BinarySearchTree:
    """Plain binary search tree; equal values are placed in the right subtree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value`` to the tree, duplicates included."""
        new = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

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
        """Number of edges on the longest root-to-leaf path; -1 when empty."""
        level: list[_Node] = [self._root] if self._root is not None else []
        depth = -1
        while level:
            depth += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return depth

    def balance(self) -> None:
        """Rebuild the tree with minimal height, keeping the same values."""
        values = list(self)
        self._root = _build_balanced(values, 0, len(values) - 1)

    def clear(self) -> None:
        """Remove every value."""
        self._root = None
        self._size = 0