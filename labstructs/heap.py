"""Max-heaps stored in an array and in linked nodes."""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from labstructs.bst import Placement

T = TypeVar("T")

BOX_SIZE = 20
LEVEL_HEIGHT = 40
SPREAD = 100.0
WIDE_HEAP = 20


class BinaryHeap(Generic[T]):
    """A max-heap kept in a list."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[index] <= items[parent]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        while 2 * index + 1 < len(items):
            child = 2 * index + 1
            if child + 1 < len(items) and items[child + 1] > items[child]:
                child += 1
            if items[index] >= items[child]:
                break
            items[index], items[child] = items[child], items[index]
            index = child

    def insert(self, value: T) -> None:
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def extract_max(self) -> T:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("Heap is empty")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def peek_max(self) -> T:
        if not self._items:
            raise IndexError("Heap is empty")
        return self._items[0]

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._items):
            raise IndexError("Index out of bounds")

    def remove(self, index: int) -> None:
        """Remove the value stored at the given array position."""
        self._check_index(index)
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
            self._sift_down(index)
            self._sift_up(index)

    def change_priority(self, index: int, value: T) -> None:
        """Replace the value at index and restore the heap order."""
        self._check_index(index)
        old = self._items[index]
        self._items[index] = value
        if value > old:
            self._sift_up(index)
        else:
            self._sift_down(index)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def to_string(self) -> str:
        """Return the values in array order, each followed by a space."""
        return "".join(f"{value} " for value in self._items)

    def layout(self) -> list[Placement[T]]:
        """Return box positions in preorder; spacing widens past 20 values."""
        count = len(self._items)
        tab = SPREAD
        if count > WIDE_HEAP:
            tab *= count / WIDE_HEAP
        placements: list[Placement[T]] = []
        stack: list[tuple[int, int, int, int, Optional[tuple[int, int]]]] = []
        if count:
            stack.append((0, 0, 0, 0, None))
        while stack:
            index, x, y, level, parent = stack.pop()
            placements.append(Placement(self._items[index], x, y, parent))
            offset = int(tab / (level + 1))
            right, left = 2 * index + 2, 2 * index + 1
            if right < count:
                stack.append((right, x + offset, y + LEVEL_HEIGHT, level + 1, (x, y)))
            if left < count:
                stack.append((left, x - offset, y + LEVEL_HEIGHT, level + 1, (x, y)))
        return placements

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BinaryHeap({self._items!r})"


class _Node(Generic[T]):
    __slots__ = ("data", "left", "right", "parent")

    def __init__(self, data: T, parent: Optional[_Node[T]] = None) -> None:
        self.data = data
        self.left: Optional[_Node[T]] = None
        self.right: Optional[_Node[T]] = None
        self.parent = parent


class LinkedBinaryHeap(Generic[T]):
    """A max-heap of linked nodes forming a complete binary tree."""

    def __init__(self) -> None:
        self._root: Optional[_Node[T]] = None
        self._count = 0

    def _node_at(self, position: int) -> _Node[T]:
        node = self._root
        for bit in bin(position)[3:]:
            node = node.right if bit == "1" else node.left  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def insert(self, value: T) -> None:
        position = self._count + 1
        if self._root is None:
            self._root = _Node(value)
            self._count = 1
            return
        parent = self._node_at(position // 2)
        node = _Node(value, parent)
        if position % 2 == 0:
            parent.left = node
        else:
            parent.right = node
        self._count = position
        while node.parent is not None and node.data > node.parent.data:
            node.data, node.parent.data = node.parent.data, node.data
            node = node.parent

    def extract_max(self) -> T:
        """Remove and return the largest value."""
        if self._root is None:
            raise IndexError("Heap is empty")
        top = self._root.data
        if self._count == 1:
            self._root = None
            self._count = 0
            return top
        last = self._node_at(self._count)
        parent = last.parent
        assert parent is not None
        if parent.right is last:
            parent.right = None
        else:
            parent.left = None
        self._count -= 1
        node = self._root
        node.data = last.data
        while node.left is not None:
            child = node.left
            if node.right is not None and node.right.data > child.data:
                child = node.right
            if node.data >= child.data:
                break
            node.data, child.data = child.data, node.data
            node = child
        return top

    def peek_max(self) -> T:
        if self._root is None:
            raise IndexError("Heap is empty")
        return self._root.data

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None
        self._count = 0

    def to_string(self) -> str:
        """Return the values in preorder joined by '-->'."""
        parts: list[str] = []
        stack: list[Optional[_Node[Any]]] = [self._root]
        while stack:
            node = stack.pop()
            if node is None:
                continue
            parts.append(str(node.data))
            stack.append(node.right)
            stack.append(node.left)
        return "-->".join(parts)

    def __len__(self) -> int:
        return self._count