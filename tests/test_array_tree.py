"""Unit tests for the array-backed binary tree.

Tests storage operations, index-based navigation and the error raised for
keys that do not reference a slot.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from arraytreelib import BinaryTreeArray, NodeKey, OutOfRangeError


SOURCE = ["a", "b", "c", "d", "e", "f"]


class TestBinaryTreeArray(unittest.TestCase):
    """Test storage and navigation on a six-node tree.

    Structure:
            a
          /   \\
         b     c
        / \\   /
       d   e f
    """

    def setUp(self):
        """Build the tree and look up a key for every node."""
        self.tree = BinaryTreeArray.of(SOURCE)

        self.root_key = self.tree.get_root()
        self.left_key = self.tree.get_left(self.root_key)
        self.right_key = self.tree.get_right(self.root_key)
        self.left_left_key = self.tree.get_left(self.left_key)
        self.left_right_key = self.tree.get_right(self.left_key)
        self.right_left_key = self.tree.get_left(self.right_key)

    def test_size(self):
        self.assertEqual(len(SOURCE), self.tree.size())
        self.assertEqual(len(SOURCE), len(self.tree))

    def test_source_is_copied(self):
        source = list(SOURCE)
        tree = BinaryTreeArray.of(source)
        source.append("z")
        self.assertEqual(len(SOURCE), tree.size())

    def test_add(self):
        empty_tree = BinaryTreeArray.empty()
        self.assertEqual(0, empty_tree.size())

        for entry in SOURCE:
            key = empty_tree.add(entry)
            self.assertEqual(entry, empty_tree.get(key))

        self.assertEqual(len(SOURCE), empty_tree.size())

    def test_add_allows_duplicates(self):
        tree = BinaryTreeArray.empty()
        first = tree.add("x")
        second = tree.add("x")
        self.assertNotEqual(first, second)
        self.assertEqual(2, tree.size())

    def test_get(self):
        self.assertEqual("a", self.tree.get(self.root_key))
        self.assertEqual("b", self.tree.get(self.left_key))
        self.assertEqual("c", self.tree.get(self.right_key))
        self.assertEqual("d", self.tree.get(self.left_left_key))
        self.assertEqual("e", self.tree.get(self.left_right_key))
        self.assertEqual("f", self.tree.get(self.right_left_key))

    def test_get_out_of_range(self):
        with self.assertRaises(OutOfRangeError):
            self.tree.get(NodeKey(len(SOURCE)))
        with self.assertRaises(OutOfRangeError):
            self.tree.get(NodeKey(-1))

    def test_out_of_range_is_index_error(self):
        with self.assertRaises(IndexError):
            self.tree.get(NodeKey(100))

    def test_get_rejects_non_keys(self):
        with self.assertRaises(TypeError):
            self.tree.get(0)

    def test_swap(self):
        self.tree.swap(self.root_key, self.right_key)

        self.assertEqual("a", self.tree.get(self.right_key))
        self.assertEqual("c", self.tree.get(self.root_key))
        self.assertEqual(len(SOURCE), self.tree.size())

    def test_swap_twice_restores(self):
        self.tree.swap(self.left_key, self.right_left_key)
        self.tree.swap(self.left_key, self.right_left_key)
        self.assertEqual(SOURCE, list(self.tree))

    def test_swap_with_itself(self):
        self.tree.swap(self.left_key, self.left_key)
        self.assertEqual(SOURCE, list(self.tree))

    def test_swap_invalid_key_leaves_tree_unchanged(self):
        with self.assertRaises(OutOfRangeError):
            self.tree.swap(self.root_key, NodeKey(99))
        with self.assertRaises(OutOfRangeError):
            self.tree.swap(NodeKey(99), self.root_key)
        self.assertEqual(SOURCE, list(self.tree))

    def test_remove_last(self):
        self.assertEqual("f", self.tree.remove_last())
        self.assertEqual(len(SOURCE) - 1, self.tree.size())
        self.assertFalse(self.tree.has_left(self.right_key))

        # The removed slot's key is no longer valid
        with self.assertRaises(OutOfRangeError):
            self.tree.get(self.right_left_key)

    def test_remove_last_empty(self):
        with self.assertRaises(OutOfRangeError):
            BinaryTreeArray.empty().remove_last()

    def test_keys(self):
        keys = list(self.tree.keys())
        self.assertEqual(len(SOURCE), len(keys))
        self.assertEqual(self.root_key, keys[0])
        self.assertEqual(SOURCE, [self.tree.get(key) for key in keys])

    def test_get_root(self):
        self.assertEqual("a", self.tree.get(self.root_key))
        self.assertIsNone(BinaryTreeArray.empty().get_root())

    def test_has_parent(self):
        self.assertTrue(self.tree.has_parent(self.left_key))
        self.assertTrue(self.tree.has_parent(self.right_key))
        self.assertTrue(self.tree.has_parent(self.left_left_key))
        self.assertTrue(self.tree.has_parent(self.left_right_key))
        self.assertTrue(self.tree.has_parent(self.right_left_key))

        self.assertFalse(self.tree.has_parent(self.root_key))

    def test_get_parent(self):
        self.assertEqual(self.root_key, self.tree.get_parent(self.left_key))
        self.assertEqual(self.root_key, self.tree.get_parent(self.right_key))
        self.assertEqual(self.left_key, self.tree.get_parent(self.left_left_key))
        self.assertEqual(self.left_key, self.tree.get_parent(self.left_right_key))
        self.assertEqual(self.right_key, self.tree.get_parent(self.right_left_key))

        self.assertIsNone(self.tree.get_parent(self.root_key))

    def test_has_left(self):
        self.assertTrue(self.tree.has_left(self.root_key))
        self.assertTrue(self.tree.has_left(self.left_key))
        self.assertTrue(self.tree.has_left(self.right_key))

        self.assertFalse(self.tree.has_left(self.left_left_key))
        self.assertFalse(self.tree.has_left(self.left_right_key))
        self.assertFalse(self.tree.has_left(self.right_left_key))

    def test_get_left(self):
        self.assertEqual(self.left_key, self.tree.get_left(self.root_key))
        self.assertEqual(self.left_left_key, self.tree.get_left(self.left_key))
        self.assertEqual(self.right_left_key, self.tree.get_left(self.right_key))

        self.assertIsNone(self.tree.get_left(self.left_left_key))
        self.assertIsNone(self.tree.get_left(self.left_right_key))
        self.assertIsNone(self.tree.get_left(self.right_left_key))

    def test_has_right(self):
        self.assertTrue(self.tree.has_right(self.root_key))
        self.assertTrue(self.tree.has_right(self.left_key))

        self.assertFalse(self.tree.has_right(self.right_key))
        self.assertFalse(self.tree.has_right(self.left_left_key))
        self.assertFalse(self.tree.has_right(self.left_right_key))
        self.assertFalse(self.tree.has_right(self.right_left_key))

    def test_get_right(self):
        self.assertEqual(self.right_key, self.tree.get_right(self.root_key))
        self.assertEqual(self.left_right_key, self.tree.get_right(self.left_key))

        self.assertIsNone(self.tree.get_right(self.right_key))
        self.assertIsNone(self.tree.get_right(self.right_left_key))

    def test_navigation_out_of_range(self):
        bad_key = NodeKey(len(SOURCE))
        for method in (
            self.tree.has_parent, self.tree.get_parent,
            self.tree.has_left, self.tree.get_left,
            self.tree.has_right, self.tree.get_right,
        ):
            with self.subTest(method=method.__name__):
                with self.assertRaises(OutOfRangeError):
                    method(bad_key)

    def test_get_depth(self):
        self.assertEqual(0, self.tree.get_depth(self.root_key))
        self.assertEqual(1, self.tree.get_depth(self.right_key))
        self.assertEqual(2, self.tree.get_depth(self.right_left_key))


class TestNodeKey(unittest.TestCase):
    """Test key equality and hashing."""

    def test_equality(self):
        tree = BinaryTreeArray.of("abc")
        root = tree.get_root()
        self.assertEqual(root, tree.get_parent(tree.get_left(root)))
        self.assertNotEqual(tree.get_left(root), tree.get_right(root))

    def test_not_equal_to_raw_index(self):
        self.assertNotEqual(NodeKey(0), 0)

    def test_usable_in_sets(self):
        tree = BinaryTreeArray.of(range(7))
        keys = set(tree.keys())
        keys.add(tree.get_root())
        self.assertEqual(7, len(keys))


if __name__ == "__main__":
    unittest.main()
