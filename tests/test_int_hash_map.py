import pytest

from labstructs.int_hash_map import BoundedHashMap, scramble_hash


@pytest.mark.parametrize("size", [1, 7, 16, 1024])
def test_scramble_hash_stays_in_range(size):
    for key in range(-50, 51):
        index = scramble_hash(key, size)
        assert 0 <= index < size
        assert scramble_hash(key, size) == index


def test_example_from_program():
    table = BoundedHashMap()
    assert table.insert(11, "фывапр") is True
    assert table.contains(11)
    table[12] = "йй"
    assert table[12] == "йй"
    assert table.contains(12)
    assert table[11] == "фывапр"
    assert len(table) == 2
    table.clear()
    assert len(table) == 0


def test_duplicate_insert_is_rejected():
    table = BoundedHashMap()
    assert table.insert(3, "a") is True
    assert table.insert(3, "b") is False
    assert table[3] == "a"
    assert len(table) == 1


@pytest.mark.parametrize("key", [17, -1])
def test_out_of_range_keys_raise(key):
    table = BoundedHashMap(16)
    with pytest.raises(IndexError):
        table.insert(key, "x")
    with pytest.raises(IndexError):
        table[key] = "x"


def test_key_equal_to_size_is_accepted():
    table = BoundedHashMap(16)
    assert table.insert(16, "edge")
    assert table[16] == "edge"


def test_missing_key_without_factory_raises():
    table = BoundedHashMap()
    with pytest.raises(KeyError):
        table[5]
    assert len(table) == 0


def test_missing_key_with_factory_inserts_default():
    table = BoundedHashMap(default_factory=str)
    assert table[5] == ""
    assert len(table) == 1
    assert table.contains(5)


def test_setitem_overwrites():
    table = BoundedHashMap()
    table[4] = "one"
    table[4] = "two"
    assert table[4] == "two"
    assert len(table) == 1


def test_erase():
    table = BoundedHashMap()
    table.insert(7, "x")
    assert table.erase(7) is True
    assert table.erase(7) is False
    assert not table.contains(7)
    assert len(table) == 0


def test_rehash_doubles_past_load_factor():
    table = BoundedHashMap(4)
    for key in range(3):
        table.insert(key, key)
    assert table.table_size == 4
    assert table.rehash() is False
    table.insert(3, 3)
    assert table.table_size == 8


def test_all_keys_survive_growth():
    table = BoundedHashMap(16)
    for key in range(40):
        table.insert(key, f"v{key}")
    assert len(table) == 40
    assert table.table_size >= 40
    assert all(table[key] == f"v{key}" for key in range(40))
    assert sorted(table) == list(range(40))


def test_clear_keeps_table_size():
    table = BoundedHashMap(16)
    for key in range(13):
        table.insert(key, key)
    size = table.table_size
    table.clear()
    assert table.table_size == size
    assert len(table) == 0
    assert not table.contains(0)