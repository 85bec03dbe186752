"""A red-black tree mapping ordered keys to values."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class RBNode(Generic[K, V]):
    """A tree node; search() hands these out so a stored value can be changed in place."""

    __slots__ = ("key", "value", "red", "parent", "left", "right")

    def __init__(self, key: K, value: V, parent: Optional[RBNode[K, V]] = None) -> None:
        self.key = key
        self.value = value
        self.red = True
        self.parent = parent
        self.left: Optional[RBNode[K, V]] = None
        self.right: Optional[RBNode[K, V]] = None

    def __repr__(self) -> str:
        colour = "red" if self.red else "black"
        return f"RBNode({self.key!r}, {self.value!r}, {colour})"


def _is_red(node: Optional[RBNode[Any, Any]]) -> bool:
    return node is not None and node.red


class RBTree(Generic[K, V]):
    """A self-balancing search tree; inserting an existing key leaves it unchanged."""

    def __init__(self) -> None:
        self._root: Optional[RBNode[K, V]] = None
        self._count = 0

    # -- rotations -------------------------------------------------------

    def _replace_child(
        self,
        parent: Optional[RBNode[K, V]],
        old: RBNode[K, V],
        new: Optional[RBNode[K, V]],
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, node: RBNode[K, V]) -> None:
        pivot = node.right
        assert pivot is not None
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        pivot.parent = node.parent
        self._replace_child(node.parent, node, pivot)
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: RBNode[K, V]) -> None:
        pivot = node.left
        assert pivot is not None
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        pivot.parent = node.parent
        self._replace_child(node.parent, node, pivot)
        pivot.right = node
        node.parent = pivot

    # -- insertion -------------------------------------------------------

    def insert(self, key: K, value: V) -> bool:
        """Add the pair unless the key is present; report whether it was added."""
        parent: Optional[RBNode[K, V]] = None
        node = self._root
        while node is not None:
            if key == node.key:
                return False
            parent = node
            node = node.left if key < node.key else node.right
        fresh: RBNode[K, V] = RBNode(key, value, parent)
        if parent is None:
            self._root = fresh
        elif key < parent.key:
            parent.left = fresh
        else:
            parent.right = fresh
        self._count += 1
        self._insert_fixup(fresh)
        return True

    def _insert_fixup(self, node: RBNode[K, V]) -> None:
        while _is_red(node.parent):
            parent = node.parent
            assert parent is not None
            grandparent = parent.parent
            assert grandparent is not None
            if parent is grandparent.left:
                uncle = grandparent.right
                if _is_red(uncle):
                    parent.red = False
                    uncle.red = False  # type: ignore[union-attr]
                    grandparent.red = True
                    node = grandparent
                    continue
                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                    parent = node.parent
                    assert parent is not None
                parent.red = False
                grandparent.red = True
                self._rotate_right(grandparent)
            else:
                uncle = grandparent.left
                if _is_red(uncle):
                    parent.red = False
                    uncle.red = False  # type: ignore[union-attr]
                    grandparent.red = True
                    node = grandparent
                    continue
                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                    parent = node.parent
                    assert parent is not None
                parent.red = False
                grandparent.red = True
                self._rotate_left(grandparent)
        assert self._root is not None
        self._root.red = False

    # -- lookup ----------------------------------------------------------

    def search(self, key: K) -> Optional[RBNode[K, V]]:
        """Return the node holding key, or None."""
        node = self._root
        while node is not None:
            if node.key == key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def __contains__(self, key: object) -> bool:
        return self.search(key) is not None  # type: ignore[arg-type]

    # -- removal ---------------------------------------------------------

    def remove(self, key: K) -> bool:
        """Delete key if present; report whether it was there."""
        node = self.search(key)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key, node.value = successor.key, successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        self._replace_child(parent, node, child)
        if not node.red:
            self._remove_fixup(child, parent)
        self._count -= 1
        return True

    def _remove_fixup(
        self, node: Optional[RBNode[K, V]], parent: Optional[RBNode[K, V]]
    ) -> None:
        while node is not self._root and not _is_red(node):
            assert parent is not None
            if node is parent.left:
                sibling = parent.right
                assert sibling is not None
                if sibling.red:
                    sibling.red = False
                    parent.red = True
                    self._rotate_left(parent)
                    sibling = parent.right
                    assert sibling is not None
                if not _is_red(sibling.left) and not _is_red(sibling.right):
                    sibling.red = True
                    node = parent
                    parent = node.parent
                else:
                    if not _is_red(sibling.right):
                        sibling.left.red = False  # type: ignore[union-attr]
                        sibling.red = True
                        self._rotate_right(sibling)
                        sibling = parent.right
                        assert sibling is not None
                    sibling.red = parent.red
                    parent.red = False
                    sibling.right.red = False  # type: ignore[union-attr]
                    self._rotate_left(parent)
                    node = self._root
                    parent = None
            else:
                sibling = parent.left
                assert sibling is not None
                if sibling.red:
                    sibling.red = False
                    parent.red = True
                    self._rotate_right(parent)
                    sibling = parent.left
                    assert sibling is not None
                if not _is_red(sibling.left) and not _is_red(sibling.right):
                    sibling.red = True
                    node = parent
                    parent = node.parent
                else:
                    if not _is_red(sibling.left):
                        sibling.right.red = False  # type: ignore[union-attr]
                        sibling.red = True
                        self._rotate_left(sibling)
                        sibling = parent.left
                        assert sibling is not None
                    sibling.red = parent.red
                    parent.red = False
                    sibling.left.red = False  # type: ignore[union-attr]
                    self._rotate_right(parent)
                    node = self._root
                    parent = None
        if node is not None:
            node.red = False

    def clear(self) -> None:
        self._root = None
        self._count = 0

    # -- traversal -------------------------------------------------------

    def _nodes(self, descending: bool = False) -> Iterator[RBNode[K, V]]:
        stack: list[RBNode[K, V]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right if descending else node.left
            node = stack.pop()
            yield node
            node = node.left if descending else node.right

    def items(self) -> list[tuple[K, V]]:
        """Return (key, value) pairs in ascending key order."""
        return [(node.key, node.value) for node in self._nodes()]

    def _edge(self, rightmost: bool) -> RBNode[K, V]:
        node = self._root
        if node is None:
            raise ValueError("tree is empty")
        while True:
            child = node.right if rightmost else node.left
            if child is None:
                return node
            node = child

    def min_key(self) -> K:
        return self._edge(False).key

    def max_key(self) -> K:
        return self._edge(True).key

    def is_valid(self) -> bool:
        """Check order, parent links and the red-black colour rules."""
        if self._root is None:
            return self._count == 0
        if self._root.red or self._root.parent is not None:
            return False

        def black_height(node: Optional[RBNode[K, V]], low: Any, high: Any) -> int:
            if node is None:
                return 1
            if low is not None and not low < node.key:
                return -1
            if high is not None and not node.key < high:
                return -1
            for child in (node.left, node.right):
                if child is not None:
                    if child.parent is not node:
                        return -1
                    if node.red and child.red:
                        return -1
            left = black_height(node.left, low, node.key)
            right = black_height(node.right, node.key, high)
            if left < 0 or left != right:
                return -1
            return left + (0 if node.red else 1)

        if black_height(self._root, None, None) < 0:
            return False
        return sum(1 for _ in self._nodes()) == self._count

    def __iter__(self) -> Iterator[V]:
        """Yield the values in ascending key order."""
        for node in self._nodes():
            yield node.value

    def __reversed__(self) -> Iterator[V]:
        """Yield the values in descending key order."""
        for node in self._nodes(descending=True):
            yield node.value

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.items()!r})"