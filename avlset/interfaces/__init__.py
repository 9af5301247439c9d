"""
Abstract base classes for ordered collections.
"""

from avlset.interfaces.ordered_iterable import OrderedIterable
from avlset.interfaces.sorted_set import SortedSet

__all__ = ["OrderedIterable", "SortedSet"]
