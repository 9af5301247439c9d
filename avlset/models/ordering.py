"""
Comparator helpers.

A comparator is a strict weak ordering ``less(a, b) -> bool``. Two values are
equivalent when neither is less than the other.
"""

import operator
from collections.abc import Callable, Iterable
from typing import Any

Less = Callable[[Any, Any], bool]

default_less: Less = operator.lt


def equivalent(less: Less, a: Any, b: Any) -> bool:
    return not less(a, b) and not less(b, a)


def lexicographical_less(less: Less, first: Iterable[Any], second: Iterable[Any]) -> bool:
    """
    Return True if ``first`` orders before ``second``.

    Sequences are compared element by element; the first pair that is not
    equivalent decides. A proper prefix orders before the longer sequence.
    """
    left = iter(first)
    right = iter(second)
    while True:
        try:
            a = next(left)
        except StopIteration:
            # first exhausted: less only if second still has elements
            for _ in right:
                return True
            return False
        try:
            b = next(right)
        except StopIteration:
            return False
        if less(a, b):
            return True
        if less(b, a):
            return False
