"""Binary trees, a red-black tree, max-heaps, hash tables and watch-record file tools."""

__version__ = "0.1.0"

__all__ = [
    "bintree",
    "bst",
    "hashtable",
    "heap",
    "int_hash_map",
    "probe_table",
    "rbtree",
    "watch",
    "watch_files",
]