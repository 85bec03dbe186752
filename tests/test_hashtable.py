import random

import pytest

from labstructs.hashtable import (
    ALPHABET,
    UNIHASH_P,
    HashTable,
    StringHashTable,
    random_label,
)


def _table():
    return HashTable(10, hash_a=1, hash_b=0)


def test_insert_get_contains():
    table = HashTable(16, random.Random(1))
    for key in (3, 19, 250, -7):
        table.insert(key, f"v{key}")
    assert len(table) == 4
    assert table.get(19) == "v19"
    assert table.get(-7) == "v-7"
    assert table.contains(250)
    assert not table.contains(4)
    assert 3 in table


def test_insert_replaces_existing():
    table = HashTable(8, random.Random(2))
    table.insert(5, "a")
    table.insert(5, "b")
    assert table.get(5) == "b"
    assert len(table) == 1


def test_get_missing_raises():
    with pytest.raises(KeyError):
        HashTable(8, random.Random(3)).get(99)


def test_remove_and_missing_remove():
    table = HashTable(8, random.Random(4))
    table.insert(1, "x")
    table.insert(2, "y")
    table.remove(1)
    table.remove(77)
    assert not table.contains(1)
    assert table.get(2) == "y"
    assert len(table) == 1


def test_bucket_index_with_identity_hash():
    assert _table().bucket_index(12) == 2


@pytest.mark.parametrize("key", [0, 1, 65519, 123456789, -1, -65520, -999999])
def test_bucket_index_in_range(key):
    table = HashTable(37, random.Random(key))
    assert 0 <= table.bucket_index(key) < 37


def test_chain_holds_newest_first():
    table = _table()
    table.insert(2, "old")
    table.insert(12, "new")
    assert table.buckets()[2] == [(12, "new"), (2, "old")]


def test_entries_sit_in_their_bucket():
    table = HashTable(13, random.Random(5))
    keys = random.Random(6).sample(range(10_000), 50)
    for key in keys:
        table.insert(key, key)
    buckets = table.buckets()
    for key in keys:
        assert (key, key) in buckets[table.bucket_index(key)]
    assert sorted(table) == sorted(keys)


def test_copy_is_independent():
    table = HashTable(11, random.Random(7))
    for key in range(20):
        table.insert(key, key * 2)
    clone = table.copy()
    assert sorted(clone) == sorted(table)
    assert all(clone.bucket_index(key) == table.bucket_index(key) for key in range(20))
    clone.remove(3)
    assert table.contains(3)
    assert clone.get(4) == table.get(4)


def test_clear():
    table = HashTable(5, random.Random(8))
    table.insert(1, 1)
    table.clear()
    assert len(table) == 0
    assert not table.contains(1)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"size": 0},
        {"size": 4, "hash_a": 0},
        {"size": 4, "hash_a": UNIHASH_P},
        {"size": 4, "hash_b": UNIHASH_P},
    ],
)
def test_invalid_parameters(kwargs):
    size = kwargs.pop("size")
    with pytest.raises(ValueError):
        HashTable(size, **kwargs)


@pytest.mark.parametrize("seed", range(20))
def test_random_label_shape(seed):
    label = random_label(random.Random(seed))
    assert len(label) == 11
    for index, char in enumerate(label):
        if index % 4 == 3:
            assert char == "_"
        else:
            assert char in ALPHABET


def test_string_table_is_reproducible():
    first = StringHashTable(random.Random(9))
    second = StringHashTable(random.Random(9))
    assert first.size == 255
    assert 0 < len(first) <= 1024
    assert first.rows() == second.rows()


def test_smallest_key():
    table = StringHashTable(random.Random(10))
    assert table.smallest_key() == min(key for _, key, _ in table.rows())
    table.clear()
    assert table.smallest_key() is None


def test_rows_mark_bucket_once():
    table = StringHashTable(random.Random(11))
    rows = table.rows()
    assert len(rows) == len(table)
    buckets = table.buckets()
    first_rows = [row for row in rows if row[0] is not None]
    assert len(first_rows) == sum(1 for chain in buckets if chain)
    for index, key, value in first_rows:
        assert buckets[index][0] == (key, value)