# labstructs

Classic data structures written in plain Python — binary search trees, a
red-black tree, max-heaps and hash tables — together with a small tool for
storing wrist-watch records in text and binary files.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `labstructs.watch` | `WristWatch` records with `describe()`, `preset_watches()`, `from_user_input(...)`, `render_report(...)` |
| `labstructs.watch_files` | saving and loading text, number arrays, watch records (text and binary) and sentences; the `main` menu |
| `labstructs.bintree` | `BinTree` with Day-Stout-Warren `balance()`, `walk()` in a `WalkMode` order, `height()`, `copy()`; `StringTree`, `random_string` |
| `labstructs.bst` | `BST` with `lca()`, `to_string()`, `layout()` and `locate()` |
| `labstructs.heap` | `BinaryHeap` (list based) and `LinkedBinaryHeap` (node based) max-heaps |
| `labstructs.hashtable` | `HashTable` with chaining and universal hashing; `StringHashTable`, `random_label` |
| `labstructs.probe_table` | `ProbingHashTable` with open addressing; `measure_lookup_times` |
| `labstructs.int_hash_map` | `BoundedHashMap`, a rehashing map for keys from 0 up to its table size; `scramble_hash` |
| `labstructs.rbtree` | `RBTree`, a red-black tree with `is_valid()` |

## Examples

```python
from labstructs.watch import preset_watches

print(preset_watches()["initWithStr"].describe())
# 100|100000.99|M|true|Rolex|-1, 2, 6, 9, -6, -3
```

```python
from labstructs.heap import BinaryHeap

heap = BinaryHeap()
for value in (4, 9, 1):
    heap.insert(value)
print(heap.extract_max())  # 9
print(len(heap))           # 2
```

```python
from labstructs.bst import BST

tree = BST([8, 3, 10, 1, 6])
print(tree.to_string())    # 1-->3-->6-->8-->10-->
print(tree.lca(1, 6))      # 3
```

```python
from labstructs.rbtree import RBTree

tree = RBTree()
for key in (5, 2, 8):
    tree.insert(key, str(key))
print(tree.items())        # [(2, '2'), (5, '5'), (8, '8')]
print(tree.is_valid())     # True
```

```python
from labstructs.bintree import BinTree

tree = BinTree()
tree.insert(5, "five")
tree.insert(3, "three")
print(tree.walk())         # ['three', 'five']
```

```python
from labstructs.int_hash_map import BoundedHashMap

table = BoundedHashMap()
table.insert(3, "x")
print(table[3])            # x
print(table.contains(4))   # False
```

Lookups of a missing key raise `KeyError` (`HashTable.get`, `BinTree.get`,
`ProbingHashTable.find`, and `BoundedHashMap[key]` without a
`default_factory`); keys outside `0..table_size` in `BoundedHashMap` raise
`IndexError`; reading from an empty heap raises `IndexError`.

## Command-line tool

Work with the data files through an interactive menu:

```
labstructs-watch-files
```

By default the files are kept in the current directory; pass
`-d DIRECTORY` (or `--directory DIRECTORY`) to use another one. Choose 0, or
end the input, to leave the menu.

## What it does not do

- There is no graphical interface. `BST.layout()`, `BST.locate()` and
  `BinaryHeap.layout()` only compute box coordinates; drawing them is left to
  the caller. `StringTree.outline()` and `StringHashTable.rows()` return plain
  lines and rows for display.
- `render_report()` produces an HTML string; it does not print or write a PDF.
- `measure_lookup_times()` returns the timing points; it does not plot them.