import random

import pytest

from labstructs.probe_table import ProbingHashTable, measure_lookup_times


def test_home_index_of_zero():
    table = ProbingHashTable(16)
    assert table.home_index(0) == 47 % 16


def test_home_index_in_range():
    table = ProbingHashTable(64)
    rng = random.Random(5)
    for _ in range(100):
        assert 0 <= table.home_index(rng.randrange(-(2**31), 2**31)) < 64


def test_insert_and_find():
    table = ProbingHashTable(16)
    table.insert(1000, 7)
    table.insert(2000, 8)
    assert table.find(1000) == 7
    assert table.find(2000) == 8
    assert len(table) == 2


def test_colliding_keys_both_found():
    table = ProbingHashTable(16)
    assert table.home_index(0) == table.home_index(1)
    table.insert(0, "zero")
    table.insert(1, "one")
    assert table.find(0) == "zero"
    assert table.find(1) == "one"


def test_probe_path_visits_other_slot():
    table = ProbingHashTable(16)
    start = table.home_index(0)
    assert table.next_index(start) != start
    assert 0 <= table.next_index(start) < 16


def test_missing_key_raises():
    table = ProbingHashTable(16)
    table.insert(10, 1)
    with pytest.raises(KeyError):
        table.find(999999)


def test_full_table_lookups_and_overflow():
    table = ProbingHashTable(16)
    keys = list(range(100, 116))
    for key in keys:
        table.insert(key, key * 2)
    assert len(table) == 16
    assert [table.find(key) for key in keys] == [key * 2 for key in keys]
    with pytest.raises(OverflowError):
        table.insert(5000, 0)


def test_invalid_size():
    with pytest.raises(ValueError):
        ProbingHashTable(0)


def test_measure_lookup_times_shape():
    results = measure_lookup_times([16, 64], random.Random(2))
    assert sorted(results) == [16, 64]
    for size, points in results.items():
        assert [number for number, _ in points] == list(range(1, size + 1))
        assert all(elapsed >= 0 for _, elapsed in points)