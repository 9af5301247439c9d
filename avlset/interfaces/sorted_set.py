"""
SortedSet abstract base class for ordered collections of unique elements.
"""

from abc import abstractmethod
from typing import Any

from avlset.interfaces.ordered_iterable import OrderedIterable


class SortedSet(OrderedIterable):
    """
    Abstract base class for sorted sets.

    Elements are unique under the collection's comparator: two elements are
    the same element when neither compares less than the other.

    Implementations:
    - AVLTree: height-balanced binary search tree
    """

    @abstractmethod
    def insert(self, value: Any) -> None:
        """
        Insert an element.

        Inserting an element that is already present leaves the set unchanged.

        Args:
            value: The element to insert.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def remove(self, value: Any) -> None:
        """
        Remove an element.

        Removing an element that is not present leaves the set unchanged.

        Args:
            value: The element to remove.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def contains(self, value: Any) -> bool:
        """
        Check if an element is present.

        Args:
            value: The element to look for.

        Returns:
            True if the element is present, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def min(self) -> Any:
        """
        Return the smallest element.

        Raises:
            EmptyCollection: If the set has no elements.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def max(self) -> Any:
        """
        Return the largest element.

        Raises:
            EmptyCollection: If the set has no elements.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of elements.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def empty(self) -> bool:
        """Return True if the set has no elements."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every element. Never raises."""
        pass
