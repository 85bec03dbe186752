"""A chained hash table with universal hashing and a string-valued variant."""

from __future__ import annotations

import random
import string
from collections.abc import Iterator
from typing import Any, Generic, Optional, TypeVar

V = TypeVar("V")

UNIHASH_P = 65519
ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
LABEL_LENGTH = 11
RANDOM_KEY_LIMIT = 2**31
STRING_TABLE_SIZE = 255
RANDOM_ENTRY_COUNT = 1024

_UNSIGNED = 2**64


class HashTable(Generic[V]):
    """A fixed number of buckets, each a chain with the newest entry first."""

    def __init__(
        self,
        size: int,
        rng: Optional[random.Random] = None,
        *,
        hash_a: Optional[int] = None,
        hash_b: Optional[int] = None,
    ) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        rng = rng or random.Random()
        if hash_a is None:
            hash_a = rng.randrange(1, UNIHASH_P)
        if hash_b is None:
            hash_b = rng.randrange(UNIHASH_P)
        if not 1 <= hash_a < UNIHASH_P:
            raise ValueError(f"hash_a must be in 1..{UNIHASH_P - 1}")
        if not 0 <= hash_b < UNIHASH_P:
            raise ValueError(f"hash_b must be in 0..{UNIHASH_P - 1}")
        self._size = size
        self._hash_a = hash_a
        self._hash_b = hash_b
        self._buckets: list[list[tuple[int, V]]] = [[] for _ in range(size)]
        self._count = 0

    @property
    def size(self) -> int:
        """The number of buckets."""
        return self._size

    def bucket_index(self, key: int) -> int:
        """Return the bucket of key: ((a*key + b) mod P) mod size, as unsigned."""
        value = self._hash_a * key + self._hash_b
        remainder = abs(value) % UNIHASH_P
        if value < 0:
            remainder = -remainder
        return (remainder % _UNSIGNED) % self._size

    def _chain(self, key: int) -> list[tuple[int, V]]:
        return self._buckets[self.bucket_index(key)]

    @staticmethod
    def _position(chain: list[tuple[int, V]], key: int) -> Optional[int]:
        for position, (stored, _) in enumerate(chain):
            if stored == key:
                return position
        return None

    def insert(self, key: int, value: V) -> None:
        """Store value under key at the front of its chain, replacing any old entry."""
        self.remove(key)
        self._chain(key).insert(0, (key, value))
        self._count += 1

    def contains(self, key: int) -> bool:
        return self._position(self._chain(key), key) is not None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.contains(key)

    def get(self, key: int) -> V:
        """Return the value stored under key."""
        chain = self._chain(key)
        position = self._position(chain, key)
        if position is None:
            raise KeyError(key)
        return chain[position][1]

    def remove(self, key: int) -> None:
        """Delete key if it is present."""
        chain = self._chain(key)
        position = self._position(chain, key)
        if position is not None:
            del chain[position]
            self._count -= 1

    def clear(self) -> None:
        for chain in self._buckets:
            chain.clear()
        self._count = 0

    def buckets(self) -> list[list[tuple[int, V]]]:
        """Return a copy of every chain as (key, value) pairs, newest first."""
        return [list(chain) for chain in self._buckets]

    def copy(self) -> HashTable[V]:
        """Return an independent table with the same hash parameters and contents."""
        clone = type(self).__new__(type(self))
        HashTable.__init__(
            clone, self._size, hash_a=self._hash_a, hash_b=self._hash_b
        )
        for chain in self._buckets:
            for key, value in chain:
                clone.insert(key, value)
        return clone

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        for chain in self._buckets:
            for key, _ in chain:
                yield key


def random_label(rng: Optional[random.Random] = None) -> str:
    """Return 11 random letters and digits with '_' at every fourth place."""
    rng = rng or random.Random()
    return "".join(
        "_" if index % 4 == 3 else rng.choice(ALPHABET) for index in range(LABEL_LENGTH)
    )


class StringHashTable(HashTable[str]):
    """A 255-bucket table of strings that starts filled with random entries."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        super().__init__(STRING_TABLE_SIZE, self._rng)
        self.randomize()

    def randomize(self, rng: Optional[random.Random] = None) -> None:
        """Replace the contents with 1024 random keys and labels."""
        rng = rng or self._rng
        self.clear()
        for _ in range(RANDOM_ENTRY_COUNT):
            self.insert(rng.randrange(RANDOM_KEY_LIMIT), random_label(rng))

    def smallest_key(self) -> Optional[int]:
        """Return the smallest stored key, or None for an empty table."""
        return min(self, default=None)

    def rows(self) -> list[tuple[Optional[int], int, str]]:
        """Return (bucket, key, value) rows; the bucket is given on its first row only."""
        table: list[tuple[Optional[int], int, str]] = []
        for index, chain in enumerate(self._buckets):
            for position, (key, value) in enumerate(chain):
                table.append((index if position == 0 else None, key, value))
        return table