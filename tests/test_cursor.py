"""
Tests for ordered iteration: TreeCursor and range iterators.
"""

import pytest

from avlset import AVLTree, TreeCursor


class TestTreeCursor:
    """Tests for begin/end cursors."""

    def test_walk_from_begin_to_end(self, sample_tree):
        """Test advancing a cursor yields ascending values."""
        values = []
        cursor = sample_tree.begin()
        end = sample_tree.end()
        while cursor != end:
            values.append(cursor.value)
            cursor.advance()

        assert values == [1, 3, 4, 5, 7, 8, 9]
        assert cursor.index == sample_tree.size()
        assert cursor.at_end

    def test_empty_tree_begin_equals_end(self):
        """Test begin and end coincide on an empty tree."""
        tree = AVLTree()
        assert tree.begin() == tree.end()
        assert tree.begin().at_end

    def test_end_cursor_index(self, sample_tree):
        """Test the end cursor sits at index size()."""
        end = sample_tree.end()
        assert end.index == 7
        assert end.at_end

    def test_cursors_of_different_trees_differ(self):
        """Test equality requires the same tree."""
        first = AVLTree([1, 2])
        second = AVLTree([1, 2])

        assert first.begin() != second.begin()
        assert first.end() != second.end()
        assert first.begin() == first.begin()

    def test_dereference_end_raises(self, sample_tree):
        """Test reading the end cursor."""
        with pytest.raises(IndexError):
            sample_tree.end().value

    def test_advance_past_end_raises(self):
        """Test advancing the end cursor."""
        tree = AVLTree([1])
        cursor = tree.begin().advance()
        assert cursor == tree.end()

        with pytest.raises(IndexError):
            cursor.advance()

    def test_copy_is_independent(self, sample_tree):
        """Test post-increment style copies."""
        cursor = sample_tree.begin()
        saved = cursor.copy()
        cursor.advance()

        assert saved.value == 1
        assert cursor.value == 3
        assert saved != cursor
        assert saved.advance() == cursor

    def test_insert_invalidates_cursor(self, sample_tree):
        """Test a cursor cannot be used after the tree changes."""
        cursor = sample_tree.begin()
        sample_tree.insert(6)

        with pytest.raises(RuntimeError):
            cursor.value
        with pytest.raises(RuntimeError):
            cursor.advance()

    def test_remove_invalidates_cursor(self, sample_tree):
        """Test removal invalidates live cursors."""
        cursor = sample_tree.begin()
        sample_tree.remove(5)

        with pytest.raises(RuntimeError):
            cursor.advance()

    def test_noop_mutations_keep_cursor_valid(self, sample_tree):
        """Test duplicate inserts and absent removes are not structural changes."""
        cursor = sample_tree.begin()
        sample_tree.insert(5)
        sample_tree.remove(100)

        assert cursor.value == 1

    def test_cursor_type(self, sample_tree):
        """Test the public cursor type."""
        assert isinstance(sample_tree.begin(), TreeCursor)


class TestIteration:
    """Tests for __iter__ and range iteration."""

    def test_iteration_matches_cursor(self, large_sample_values):
        """Test both traversal mechanisms agree."""
        tree = AVLTree(large_sample_values)

        via_cursor = []
        cursor = tree.begin()
        while not cursor.at_end:
            via_cursor.append(cursor.value)
            cursor.advance()

        assert via_cursor == list(tree) == sorted(large_sample_values)

    def test_range_iteration(self):
        """Test range iteration."""
        tree = AVLTree(range(10))

        # Range [3, 7)
        assert list(tree.iterator(3, 7)) == [3, 4, 5, 6]

    def test_open_ended_ranges(self, sample_tree):
        """Test ranges bounded on one side."""
        assert list(sample_tree.iterator(start=5)) == [5, 7, 8, 9]
        assert list(sample_tree.iterator(end=5)) == [1, 3, 4]
        assert list(sample_tree.iterator()) == [1, 3, 4, 5, 7, 8, 9]

    def test_range_bounds_between_elements(self, sample_tree):
        """Test bounds that are not themselves elements."""
        assert list(sample_tree.iterator(2, 6)) == [3, 4, 5]
        assert list(sample_tree.iterator(6, 6)) == []
        assert list(sample_tree.iterator(10, 20)) == []

    def test_range_respects_comparator(self):
        """Test range bounds use the tree's ordering."""
        tree = AVLTree(range(10), less=lambda a, b: a > b)
        assert list(tree.iterator(7, 3)) == [7, 6, 5, 4]

    def test_mutation_during_iteration_raises(self):
        """Test iterators detect structural changes."""
        tree = AVLTree([1, 2, 3])
        iterator = iter(tree)
        assert next(iterator) == 1

        tree.insert(4)
        with pytest.raises(RuntimeError):
            next(iterator)

    def test_clear_during_iteration_raises(self):
        """Test clear invalidates iterators."""
        tree = AVLTree([1, 2, 3])
        with pytest.raises(RuntimeError):
            for value in tree:
                tree.clear()

    def test_iterating_empty_tree(self):
        """Test iterating nothing."""
        assert list(AVLTree()) == []
        assert list(AVLTree().iterator(1, 5)) == []
