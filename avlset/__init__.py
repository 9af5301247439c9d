"""
AVL-balanced ordered set.

This package provides a height-balanced binary search tree with:
- insert(value) / remove(value) - O(log N), no-ops on present/absent values
- contains(value) - O(log N) membership test
- min() / max() - O(log N), EmptyCollection on an empty tree
- Ordered iteration via cursors, __iter__ and range-bounded iterator(start, end)
- Whole-tree equality and lexicographic ordering
"""

from avlset.models.exceptions import EmptyCollection
from avlset.models.sortedcontainers import AVLTree, TreeCursor

__all__ = ["AVLTree", "EmptyCollection", "TreeCursor"]
