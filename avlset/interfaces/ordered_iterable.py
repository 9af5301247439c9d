"""
OrderedIterable protocol for collections that iterate in comparator order.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class OrderedIterable(ABC):
    """
    Protocol for collections that yield their elements in ascending order.

    Implementations must support:
    - Full iteration via __iter__
    - Range-bounded iteration via iterator(start, end)
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all elements in ascending order."""
        pass

    @abstractmethod
    def iterator(self, start: Any | None = None, end: Any | None = None) -> Iterator[Any]:
        """
        Return an iterator over the elements in the specified range.

        Args:
            start: Lower bound (inclusive). If None, starts from the smallest element.
            end: Upper bound (exclusive). If None, iterates to the largest element.

        Returns:
            Iterator yielding elements in ascending order.
        """
        pass
