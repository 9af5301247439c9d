"""
Sorted container implementations.
"""

from avlset.models.sortedcontainers.avl_tree import AVLTree, TreeCursor

__all__ = ["AVLTree", "TreeCursor"]
