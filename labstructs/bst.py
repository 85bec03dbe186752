"""An unbalanced binary search tree with lowest-common-ancestor and drawing layout."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

BOX_SIZE = 40
LEVEL_HEIGHT = 80
SPREAD = 100


@dataclass(slots=True)
class _Node(Generic[T]):
    data: T
    left: Optional[_Node[T]] = None
    right: Optional[_Node[T]] = None


@dataclass(frozen=True)
class Placement(Generic[T]):
    """Where a node's box goes: its top-left corner and its parent's top-left corner."""

    value: T
    x: int
    y: int
    parent: Optional[tuple[int, int]] = None


class BST(Generic[T]):
    """A binary search tree of values; equal values go to the right."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._root: Optional[_Node[T]] = None
        for value in values:
            self.insert(value)

    def insert(self, value: T) -> None:
        """Add a value, duplicates included."""
        fresh = _Node(value)
        if self._root is None:
            self._root = fresh
            return
        node = self._root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = fresh
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = fresh
                    return
                node = node.right

    def _preorder(self) -> Iterator[T]:
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node is None:
                continue
            yield node.data
            stack.append(node.right)
            stack.append(node.left)

    def _postorder(self) -> list[T]:
        result: list[T] = []
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node is None:
                continue
            result.append(node.data)
            stack.append(node.left)
            stack.append(node.right)
        result.reverse()
        return result

    def insert_all(self, other: BST[T]) -> None:
        """Insert every value of another tree, in its preorder."""
        for value in list(other._preorder()):
            self.insert(value)

    def remove(self, value: T) -> None:
        """Delete one occurrence of value if present."""
        parent: Optional[_Node[T]] = None
        node = self._root
        while node is not None and node.data != value:
            parent = node
            node = node.left if value < node.data else node.right
        if node is None:
            return
        if node.left is not None and node.right is not None:
            holder = node
            successor = node.right
            while successor.left is not None:
                holder = successor
                successor = successor.left
            node.data = successor.data
            if holder is node:
                holder.right = successor.right
            else:
                holder.left = successor.right
            return
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def remove_all(self, other: BST[T]) -> None:
        """Remove every value of another tree, in its postorder."""
        for value in other._postorder():
            self.remove(value)

    def find(self, value: T) -> bool:
        node = self._root
        while node is not None:
            if node.data == value:
                return True
            node = node.left if value < node.data else node.right
        return False

    def __contains__(self, value: object) -> bool:
        return self.find(value)  # type: ignore[arg-type]

    def clear(self) -> None:
        self._root = None

    def lca(self, a: T, b: T) -> T:
        """Return the lowest common ancestor of two values."""
        node = self._root
        while node is not None:
            if node.data > a and node.data > b:
                node = node.left
            elif node.data < a and node.data < b:
                node = node.right
            else:
                return node.data
        raise ValueError("no common ancestor in this tree")

    def to_string(self) -> str:
        """Return the values in order, each followed by '-->'."""
        return "".join(f"{value}-->" for value in self)

    def __iter__(self) -> Iterator[T]:
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __len__(self) -> int:
        return sum(1 for _ in self._preorder())

    def layout(self) -> list[Placement[T]]:
        """Return box positions in preorder, children spread by 100/(level+1)."""
        placements: list[Placement[T]] = []
        stack: list[tuple[Optional[_Node[T]], int, int, int, Optional[tuple[int, int]]]] = [
            (self._root, 0, 0, 0, None)
        ]
        while stack:
            node, x, y, level, parent = stack.pop()
            if node is None:
                continue
            placements.append(Placement(node.data, x, y, parent))
            offset = SPREAD // (level + 1)
            stack.append((node.right, x + offset, y + LEVEL_HEIGHT, level + 1, (x, y)))
            stack.append((node.left, x - offset, y + LEVEL_HEIGHT, level + 1, (x, y)))
        return placements

    def locate(self, value: T) -> Optional[tuple[int, int]]:
        """Return the box position of the first node holding value, or None."""
        node = self._root
        x = y = level = 0
        while node is not None:
            offset = SPREAD // (level + 1)
            if node.data < value:
                node, x = node.right, x + offset
            elif node.data > value:
                node, x = node.left, x - offset
            else:
                return (x, y)
            y += LEVEL_HEIGHT
            level += 1
        return None

    def __repr__(self) -> str:
        return f"BST({list(self)!r})"