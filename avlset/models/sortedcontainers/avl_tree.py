"""
AVL Tree implementation for sorted sets.

Height-balanced binary search tree with O(log N) insert, remove and lookup.
"""

import copy
import io
import logging
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, TextIO

from avlset.interfaces.sorted_set import SortedSet
from avlset.models.exceptions import EmptyCollection
from avlset.models.ordering import Less, default_less, lexicographical_less

logger = logging.getLogger(__name__)


@dataclass(eq=False, repr=False)
class Node:
    """Node in the AVL Tree."""

    value: Any
    left: "Node | None" = None
    right: "Node | None" = None
    height: int = 1

    def __repr__(self) -> str:
        return f"Node(value={self.value!r}, height={self.height})"


def _height(node: Node | None) -> int:
    return node.height if node is not None else 0


def _update_height(node: Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _clone(node: Node | None, copy_value: Callable[[Any], Any]) -> Node | None:
    """Recursively clone a subtree, keeping cached heights."""
    if node is None:
        return None
    return Node(
        value=copy_value(node.value),
        left=_clone(node.left, copy_value),
        right=_clone(node.right, copy_value),
        height=node.height,
    )


def _push_left_spine(stack: list[Node], node: Node | None) -> None:
    while node is not None:
        stack.append(node)
        node = node.left


class AVLTree(SortedSet):
    """
    AVL Tree implementation of SortedSet.

    Properties maintained after every mutation:
    1. Left subtree values order strictly before the node, right subtree values strictly after
    2. No two nodes hold equivalent values
    3. Every node caches 1 + max(height(left), height(right))
    4. Subtree heights of every node differ by at most ALLOWED_IMBALANCE

    Cursors and iterators are invalidated by any structural mutation and raise
    RuntimeError when used afterwards. The tree is not thread-safe.
    """

    ALLOWED_IMBALANCE = 1

    def __init__(self, values: Iterable[Any] | None = None, less: Less | None = None) -> None:
        """
        Initialize the tree.

        Args:
            values: Optional elements to insert, in order.
            less: Strict weak ordering ``less(a, b) -> bool``. Defaults to ``a < b``.
        """
        if less is None:
            less = default_less
        if not callable(less):
            raise TypeError(f"less must be callable, got {type(less).__name__}")

        self._less: Less = less
        self._root: Node | None = None
        self._size: int = 0
        # Bumped on every structural change; cursors compare against it
        self._version: int = 0

        if values is not None:
            self.insert_all(values)

    @classmethod
    def move(cls, source: "AVLTree") -> "AVLTree":
        """Build a tree that takes over every node of ``source``, leaving it empty."""
        tree = cls(less=source._less)
        tree.move_from(source)
        return tree

    def move_from(self, source: "AVLTree") -> None:
        """
        Drop this tree's nodes and take over those of ``source``.

        ``source`` is left empty. Moving a tree into itself does nothing.
        """
        if source is self:
            return

        self._root = source._root
        self._size = source._size
        self._less = source._less
        self._version += 1

        source._root = None
        source._size = 0
        source._version += 1
        logger.debug(f"Moved {self._size} elements between trees")

    def swap(self, other: "AVLTree") -> None:
        """Exchange contents and comparators with ``other`` in O(1)."""
        if other is self:
            return

        self._root, other._root = other._root, self._root
        self._size, other._size = other._size, self._size
        self._less, other._less = other._less, self._less
        self._version += 1
        other._version += 1

    def assign(self, values: Iterable[Any]) -> None:
        """Replace the contents with ``values``."""
        # Materialize first: values may be this very tree
        values = list(values)
        self.clear()
        self.insert_all(values)

    def copy(self) -> "AVLTree":
        """Return a structural clone that shares no node with this tree."""
        return self._copy_with(lambda value: value)

    def __copy__(self) -> "AVLTree":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "AVLTree":
        return self._copy_with(lambda value: copy.deepcopy(value, memo))

    def _copy_with(self, copy_value: Callable[[Any], Any]) -> "AVLTree":
        clone = type(self)(less=self._less)
        clone._root = _clone(self._root, copy_value)
        clone._size = self._size
        return clone

    def insert(self, value: Any) -> None:
        """Insert value. No-op if an equivalent value is present. O(log N)"""
        self._root = self._insert(self._root, value)

    def insert_all(self, values: Iterable[Any]) -> None:
        for value in values:
            self.insert(value)

    def remove(self, value: Any) -> None:
        """Remove value. No-op if it is not present. O(log N)"""
        self._root = self._remove(self._root, value)

    def contains(self, value: Any) -> bool:
        current = self._root
        while current is not None:
            if self._less(value, current.value):
                current = current.left
            elif self._less(current.value, value):
                current = current.right
            else:
                return True
        return False

    def min(self) -> Any:
        if self._root is None:
            raise EmptyCollection("min")
        return self._find_min(self._root).value

    def max(self) -> Any:
        if self._root is None:
            raise EmptyCollection("max")
        return self._find_max(self._root).value

    def size(self) -> int:
        return self._size

    def empty(self) -> bool:
        return self._size == 0

    def height(self) -> int:
        return _height(self._root)

    def clear(self) -> None:
        if self._root is not None:
            logger.debug(f"Clearing tree of {self._size} elements")
        self._root = None
        self._size = 0
        self._version += 1

    @property
    def less(self) -> Less:
        return self._less

    def begin(self) -> "TreeCursor":
        return TreeCursor(self, end=False)

    def end(self) -> "TreeCursor":
        return TreeCursor(self, end=True)

    def __iter__(self) -> Iterator[Any]:
        return self.iterator()

    def iterator(self, start: Any | None = None, end: Any | None = None) -> Iterator[Any]:
        return _RangeIterator(self, start, end)

    def print(self, sink: TextIO | None = None, delimiter: str = " ") -> None:
        """Write every element in ascending order, each followed by ``delimiter``."""
        if sink is None:
            sink = sys.stdout
        for value in self:
            sink.write(f"{value}{delimiter}")

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AVLTree):
            return NotImplemented
        if other is self:
            return True
        if self._size != other._size:
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: "AVLTree") -> bool:
        if not isinstance(other, AVLTree):
            return NotImplemented
        return lexicographical_less(self._less, self, other)

    def __gt__(self, other: "AVLTree") -> bool:
        if not isinstance(other, AVLTree):
            return NotImplemented
        return lexicographical_less(self._less, other, self)

    def __le__(self, other: "AVLTree") -> bool:
        if not isinstance(other, AVLTree):
            return NotImplemented
        return not lexicographical_less(self._less, other, self)

    def __ge__(self, other: "AVLTree") -> bool:
        if not isinstance(other, AVLTree):
            return NotImplemented
        return not lexicographical_less(self._less, self, other)

    def __str__(self) -> str:
        buffer = io.StringIO()
        self.print(buffer)
        return buffer.getvalue()

    def __repr__(self) -> str:
        return f"AVLTree({list(self)!r})"

    def _insert(self, node: Node | None, value: Any) -> Node:
        if node is None:
            self._size += 1
            self._version += 1
            return Node(value=value)

        if self._less(value, node.value):
            node.left = self._insert(node.left, value)
        elif self._less(node.value, value):
            node.right = self._insert(node.right, value)
        else:
            # Already present
            return node

        return self._balance(node)

    def _remove(self, node: Node | None, value: Any) -> Node | None:
        if node is None:
            return None

        if self._less(value, node.value):
            node.left = self._remove(node.left, value)
        elif self._less(node.value, value):
            node.right = self._remove(node.right, value)
        elif node.left is not None and node.right is not None:
            # Two children: take the successor's value, then remove the successor
            node.value = self._find_min(node.right).value
            node.right = self._remove(node.right, node.value)
        else:
            self._size -= 1
            self._version += 1
            return node.left if node.left is not None else node.right

        return self._balance(node)

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def _balance(self, node: Node) -> Node:
        """Restore the AVL property at node and return the new subtree root."""
        left_height = _height(node.left)
        right_height = _height(node.right)

        if left_height > right_height + self.ALLOWED_IMBALANCE:
            assert node.left is not None
            if _height(node.left.left) >= _height(node.left.right):
                logger.debug(f"Single rotation with left child at {node.value!r}")
                node = self._rotate_with_left_child(node)
            else:
                logger.debug(f"Double rotation with left child at {node.value!r}")
                node = self._double_rotate_with_left_child(node)
        elif right_height > left_height + self.ALLOWED_IMBALANCE:
            assert node.right is not None
            if _height(node.right.right) >= _height(node.right.left):
                logger.debug(f"Single rotation with right child at {node.value!r}")
                node = self._rotate_with_right_child(node)
            else:
                logger.debug(f"Double rotation with right child at {node.value!r}")
                node = self._double_rotate_with_right_child(node)

        _update_height(node)
        return node

    def _rotate_with_left_child(self, node: Node) -> Node:
        """Promote node's left child above it."""
        left = node.left
        assert left is not None

        node.left = left.right
        left.right = node

        # node is now the lower of the two
        _update_height(node)
        _update_height(left)
        return left

    def _rotate_with_right_child(self, node: Node) -> Node:
        """Promote node's right child above it."""
        right = node.right
        assert right is not None

        node.right = right.left
        right.left = node

        _update_height(node)
        _update_height(right)
        return right

    def _double_rotate_with_left_child(self, node: Node) -> Node:
        assert node.left is not None
        node.left = self._rotate_with_right_child(node.left)
        return self._rotate_with_left_child(node)

    def _double_rotate_with_right_child(self, node: Node) -> Node:
        assert node.right is not None
        node.right = self._rotate_with_left_child(node.right)
        return self._rotate_with_right_child(node)


class TreeCursor:
    """
    Single-pass in-order cursor over an AVLTree.

    Holds the path of nodes along the open left spine. The end cursor has an
    index equal to the tree size and an empty stack. Two cursors are equal
    when they belong to the same tree and sit at the same index.
    """

    def __init__(self, tree: AVLTree, end: bool = False) -> None:
        self._tree = tree
        self._version = tree._version
        self._stack: list[Node] = []

        if end or tree._root is None:
            self._index = tree._size
        else:
            self._index = 0
            _push_left_spine(self._stack, tree._root)

    @property
    def index(self) -> int:
        return self._index

    @property
    def at_end(self) -> bool:
        return not self._stack

    @property
    def value(self) -> Any:
        """Element under the cursor."""
        self._check_valid()
        if not self._stack:
            raise IndexError("cannot dereference an end cursor")
        return self._stack[-1].value

    def advance(self) -> "TreeCursor":
        """Move to the next element in ascending order. Returns self."""
        self._check_valid()
        if not self._stack:
            raise IndexError("cannot advance past the end cursor")

        node = self._stack.pop()
        _push_left_spine(self._stack, node.right)
        self._index += 1
        return self

    def copy(self) -> "TreeCursor":
        clone = TreeCursor.__new__(TreeCursor)
        clone._tree = self._tree
        clone._version = self._version
        clone._stack = list(self._stack)
        clone._index = self._index
        return clone

    def __copy__(self) -> "TreeCursor":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeCursor):
            return NotImplemented
        return self._tree is other._tree and self._index == other._index

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TreeCursor(index={self._index}, at_end={self.at_end})"

    def _check_valid(self) -> None:
        if self._version != self._tree._version:
            raise RuntimeError("AVLTree changed after cursor was created")


class _RangeIterator(Iterator[Any]):
    """Iterator for range queries on AVL Tree."""

    def __init__(self, tree: AVLTree, start: Any | None, end: Any | None) -> None:
        self._tree = tree
        self._version = tree._version
        self._less = tree._less
        self._stack: list[Node] = []
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(tree._root, start)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._version != self._tree._version:
            raise RuntimeError("AVLTree changed during iteration")
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Check end bound
        if self._end is not None and not self._less(node.value, self._end):
            self._stack.clear()
            raise StopIteration

        self._push_left_path(node.right, None)
        return node.value

    def _push_left_path(self, node: Node | None, start: Any | None) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while node is not None:
            if start is not None and self._less(node.value, start):
                # Skip nodes less than start
                node = node.right
            else:
                self._stack.append(node)
                node = node.left
