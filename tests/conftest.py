"""
Shared pytest fixtures for AVL tree tests.
"""

import random

import pytest

from avlset.models.sortedcontainers import AVLTree
from avlset.models.sortedcontainers.avl_tree import Node


def _check_subtree(tree: AVLTree, node: Node | None, low, high) -> tuple[int, int]:
    """Return (height, node count) of a subtree, asserting every AVL property."""
    if node is None:
        return 0, 0

    less = tree.less
    if low is not None:
        assert less(low, node.value), f"{node.value!r} not greater than {low!r}"
    if high is not None:
        assert less(node.value, high), f"{node.value!r} not less than {high!r}"

    left_height, left_count = _check_subtree(tree, node.left, low, node.value)
    right_height, right_count = _check_subtree(tree, node.right, node.value, high)

    assert abs(left_height - right_height) <= 1, f"unbalanced at {node.value!r}"
    assert node.height == 1 + max(left_height, right_height), f"stale height at {node.value!r}"
    return node.height, left_count + right_count + 1


@pytest.fixture
def check_invariants():
    """Provide a checker for order, balance, height cache and size."""

    def check(tree: AVLTree) -> None:
        height, count = _check_subtree(tree, tree._root, None, None)
        assert height == tree.height()
        assert count == tree.size() == len(tree)

    return check


@pytest.fixture
def rng():
    """Provide a seeded random generator for reproducible property tests."""
    return random.Random(20261017)


@pytest.fixture
def sample_tree():
    """Provide the seven-element tree {5, 3, 8, 1, 4, 7, 9}."""
    return AVLTree([5, 3, 8, 1, 4, 7, 9])


@pytest.fixture
def large_sample_values(rng):
    """Provide 1000 unique shuffled integers."""
    values = list(range(1000))
    rng.shuffle(values)
    return values
