"""
Data models for ordered collections.
"""

from avlset.models.exceptions import EmptyCollection
from avlset.models.sortedcontainers import AVLTree, TreeCursor

__all__ = [
    "AVLTree",
    "EmptyCollection",
    "TreeCursor",
]
