"""A chained hash map of bounded integer keys that doubles as it fills."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def scramble_hash(key: int, table_size: int) -> int:
    """Map an integer key to a bucket index using 32-bit integer arithmetic."""
    mixed = key ^ _wrap32(50 + 1337 - key * key + key * key * key + 13769)
    product = _wrap32(mixed * 47)
    quotient = abs(product) // 13
    if product < 0:
        quotient = -quotient
    return abs(_wrap32(quotient)) % table_size


class BoundedHashMap:
    """A separate-chaining map whose keys may not exceed its table size."""

    REHASH_FACTOR = 0.75

    def __init__(
        self, size: int = 16, default_factory: Optional[Callable[[], Any]] = None
    ) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self._size = size
        self._buckets: list[list[tuple[int, Any]]] = [[] for _ in range(size)]
        self._count = 0
        self.default_factory = default_factory

    @property
    def table_size(self) -> int:
        return self._size

    def _check_range(self, key: int) -> None:
        if key < 0 or key > self._size:
            raise IndexError("out of range")

    def _bucket(self, key: int) -> list[tuple[int, Any]]:
        return self._buckets[scramble_hash(key, self._size)]

    def _position(self, bucket: list[tuple[int, Any]], key: int) -> Optional[int]:
        for position, (stored, _) in enumerate(bucket):
            if stored == key:
                return position
        return None

    def insert(self, key: int, value: Any) -> bool:
        """Add a pair unless the key is present; grow the table if needed."""
        self._check_range(key)
        bucket = self._bucket(key)
        if self._position(bucket, key) is not None:
            return False
        bucket.insert(0, (key, value))
        self._count += 1
        self.rehash()
        return True

    def __getitem__(self, key: int) -> Any:
        self._check_range(key)
        bucket = self._bucket(key)
        position = self._position(bucket, key)
        if position is not None:
            return bucket[position][1]
        if self.default_factory is None:
            raise KeyError(key)
        value = self.default_factory()
        bucket.insert(0, (key, value))
        self._count += 1
        return value

    def __setitem__(self, key: int, value: Any) -> None:
        self._check_range(key)
        bucket = self._bucket(key)
        position = self._position(bucket, key)
        if position is not None:
            bucket[position] = (key, value)
        else:
            bucket.insert(0, (key, value))
            self._count += 1

    def contains(self, key: int) -> bool:
        return self._position(self._bucket(key), key) is not None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.contains(key)

    def erase(self, key: int) -> bool:
        """Remove the key; report whether it was there."""
        bucket = self._bucket(key)
        position = self._position(bucket, key)
        if position is None:
            return False
        del bucket[position]
        self._count -= 1
        return True

    def rehash(self) -> bool:
        """Double the table when the load factor passes 0.75; report whether it grew."""
        if self._count / self._size <= self.REHASH_FACTOR:
            return False
        old = self._buckets
        self._size *= 2
        self._buckets = [[] for _ in range(self._size)]
        for bucket in old:
            for key, value in bucket:
                self._bucket(key).insert(0, (key, value))
        return True

    def clear(self) -> None:
        """Drop every pair, keeping the current table size."""
        self._buckets = [[] for _ in range(self._size)]
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        for bucket in self._buckets:
            for key, _ in bucket:
                yield key