"""An unbalanced binary search tree with DSW rebalancing and a string-valued variant."""

from __future__ import annotations

import enum
import random
import string
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

V = TypeVar("V")

ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
RANDOM_KEY_LIMIT = 2**31
RANDOM_TREE_SIZE = 64


class WalkMode(enum.Enum):
    """Order in which walk() visits the nodes."""

    DIRECT = "direct"
    REVERSE = "reverse"
    INCREMENTING = "incrementing"


@dataclass(slots=True)
class _Node(Generic[V]):
    key: Any
    value: V
    left: Optional[_Node[V]] = None
    right: Optional[_Node[V]] = None


class BinTree(Generic[V]):
    """A binary search tree mapping keys to values."""

    def __init__(self) -> None:
        self._root: Optional[_Node[V]] = None
        self._count = 0

    def insert(self, key: Any, value: V) -> None:
        """Store value under key, replacing the value of an existing key."""
        parent: Optional[_Node[V]] = None
        node = self._root
        while node is not None:
            if node.key == key:
                node.value = value
                return
            parent = node
            node = node.left if key < node.key else node.right
        fresh = _Node(key, value)
        if parent is None:
            self._root = fresh
        elif key < parent.key:
            parent.left = fresh
        else:
            parent.right = fresh
        self._count += 1

    def _find(self, key: Any) -> Optional[_Node[V]]:
        node = self._root
        while node is not None:
            if node.key == key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def contains(self, key: Any) -> bool:
        return self._find(key) is not None

    def __contains__(self, key: object) -> bool:
        return self.contains(key)

    def get(self, key: Any) -> V:
        """Return the value stored under key."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def remove(self, key: Any) -> None:
        """Delete key if present; a node with two children is replaced by its predecessor."""
        parent: Optional[_Node[V]] = None
        node = self._root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return

        if node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            holder = node
            replacement = node.left
            while replacement.right is not None:
                holder = replacement
                replacement = replacement.right
            if holder is node:
                replacement.right = node.right
            else:
                holder.right = replacement.left
                replacement.left = node.left
                replacement.right = node.right

        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        self._count -= 1

    def clear(self) -> None:
        self._root = None
        self._count = 0

    @staticmethod
    def _into_vine(tail: _Node[V]) -> int:
        count = 0
        current = tail.right
        while current is not None:
            if current.left is None:
                count += 1
                tail = current
                current = current.right
            else:
                pivot = current.left
                current.left = pivot.right
                pivot.right = current
                current = pivot
                tail.right = pivot
        return count

    @staticmethod
    def _compress(root: _Node[V], count: int) -> None:
        for _ in range(count):
            child = root.right
            root.right = child.right
            root = root.right
            child.right = root.left
            root.left = child

    def balance(self) -> None:
        """Rebalance the tree in place (Day-Stout-Warren)."""
        pseudo_root: _Node[V] = _Node(None, None)  # type: ignore[arg-type]
        pseudo_root.right = self._root
        count = self._into_vine(pseudo_root)
        full = 1 << ((count + 1).bit_length() - 1)
        leaves = count + 1 - full
        self._compress(pseudo_root, leaves)
        count -= leaves
        while count > 1:
            count //= 2
            self._compress(pseudo_root, count)
        self._root = pseudo_root.right

    def _walk_nodes(self, mode: WalkMode) -> Iterator[_Node[V]]:
        stack: list[tuple[Optional[_Node[V]], bool]] = [(self._root, False)]
        while stack:
            node, emit = stack.pop()
            if node is None:
                continue
            if emit:
                yield node
                continue
            if mode is WalkMode.DIRECT:
                order = [(node, True), (node.left, False), (node.right, False)]
            elif mode is WalkMode.INCREMENTING:
                order = [(node.left, False), (node, True), (node.right, False)]
            else:
                order = [(node.left, False), (node.right, False), (node, True)]
            stack.extend(reversed(order))

    def walk(self, mode: WalkMode = WalkMode.INCREMENTING) -> list[V]:
        """Return the values in preorder (DIRECT), postorder (REVERSE) or key order."""
        return [node.value for node in self._walk_nodes(WalkMode(mode))]

    def keys(self) -> list[Any]:
        """Return the keys in ascending order."""
        return [node.key for node in self._walk_nodes(WalkMode.INCREMENTING)]

    def height(self) -> int:
        """Return the number of levels; an empty tree has height 0."""
        levels = 0
        level = [self._root] if self._root is not None else []
        while level:
            levels += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return levels

    def copy(self) -> BinTree[V]:
        """Return an independent tree of the same shape and type."""
        clone = type(self).__new__(type(self))
        BinTree.__init__(clone)
        for node in self._walk_nodes(WalkMode.DIRECT):
            clone.insert(node.key, node.value)
        return clone

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        pairs = [(node.key, node.value) for node in self._walk_nodes(WalkMode.INCREMENTING)]
        return f"{type(self).__name__}({pairs!r})"


def random_string(rng: Optional[random.Random] = None) -> str:
    """Return 2 to 11 random letters and digits with '_' at every fourth place."""
    rng = rng or random.Random()
    length = rng.randrange(10) + 2
    return "".join(
        "_" if index % 4 == 3 else rng.choice(ALPHABET) for index in range(length)
    )


class StringTree(BinTree[str]):
    """A tree of string values that starts filled with random entries."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__()
        self._rng = rng or random.Random()
        self.randomize()

    def randomize(self, rng: Optional[random.Random] = None) -> None:
        """Replace the contents with 64 random keys and random strings."""
        rng = rng or self._rng
        self.clear()
        for _ in range(RANDOM_TREE_SIZE):
            self.insert(rng.randrange(RANDOM_KEY_LIMIT), random_string(rng))

    def total_length(self) -> int:
        """Return the summed length of all stored strings."""
        return sum(len(value) for value in self.walk(WalkMode.DIRECT))

    def outline(self) -> list[str]:
        """Return an indented line per node, marking missing children."""
        lines: list[str] = []
        stack: list[tuple[Optional[_Node[str]], int, str]] = [(self._root, 0, "")]
        while stack:
            node, depth, missing = stack.pop()
            indent = "  " * depth
            if node is None:
                if missing:
                    lines.append(f"{indent}{missing}")
                continue
            lines.append(f"{indent}node {node.key}: {node.value}")
            stack.append((node.right, depth + 1, "no right"))
            stack.append((node.left, depth + 1, "no left"))
        return lines