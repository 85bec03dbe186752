"""An open-addressing hash table of integer pairs and a lookup timing run."""

from __future__ import annotations

import random
import time
from collections.abc import Iterable
from typing import Any, Optional

_PROBE_STEP = 37


class ProbingHashTable:
    """A fixed-size hash table that resolves collisions by probing."""

    def __init__(self, size: int = 16) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.size = size
        self._slots: list[Optional[tuple[int, Any]]] = [None] * size
        self._count = 0

    def home_index(self, key: int) -> int:
        """Return the slot a key is first tried in."""
        scaled = abs(key * 228) // 1337
        if key < 0:
            scaled = -scaled
        return (scaled + 47) % self.size

    def next_index(self, index: int) -> int:
        """Return the slot tried after the given one."""
        i = _PROBE_STEP
        return (index + 228 * i + 1337 * i * i) % self.size

    def insert(self, key: int, value: Any) -> None:
        """Store a pair in the first free slot along the key's probe path."""
        if self._count >= self.size:
            raise OverflowError("hash table is full")
        index = self.home_index(key)
        for _ in range(self.size):
            if self._slots[index] is None:
                self._slots[index] = (key, value)
                self._count += 1
                return
            index = self.next_index(index)
        raise OverflowError("no free slot along the probe path")

    def find(self, key: int) -> Any:
        """Return the value stored under key."""
        index = self.home_index(key)
        if self._matches(index, key):
            return self._slots[index][1]
        index = self.next_index(index)
        attempts = 0
        while not self._matches(index, key):
            index = self.next_index(index)
            attempts += 1
            if attempts > self._count:
                raise KeyError("no such element with this key")
        return self._slots[index][1]

    def _matches(self, index: int, key: int) -> bool:
        slot = self._slots[index]
        return slot is not None and slot[0] == key

    def __len__(self) -> int:
        return self._count


def measure_lookup_times(
    sizes: Iterable[int] = (16, 64, 128, 2048),
    rng: Optional[random.Random] = None,
) -> dict[int, list[tuple[int, int]]]:
    """Fill a table of each size with random pairs and time every lookup.

    Returns, per size, a list of (element number, nanoseconds) points.
    """
    rng = rng or random.Random()
    results: dict[int, list[tuple[int, int]]] = {}
    for size in sizes:
        table = ProbingHashTable(size)
        keys = [rng.randrange(2**31) for _ in range(size)]
        for key in keys:
            table.insert(key, rng.randrange(2**31))
        points = []
        for number, key in enumerate(keys, start=1):
            start = time.perf_counter_ns()
            table.find(key)
            points.append((number, time.perf_counter_ns() - start))
        results[size] = points
    return results