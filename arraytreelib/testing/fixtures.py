"""Test fixtures for ArrayTreeLib consumers.

These helpers give test suites a stable way to build sample trees and to
check tree and heap state through the public navigation contract only.
"""

import string
from typing import Any, Dict, List, Union
from ..core.tree import BinaryTree
from ..core.array_tree import BinaryTreeArray
from ..core.heap import MaxHeap
from ..config import TraversalOrder
from ..api import collect_values, get_tree_stats


def letters_tree(count: int = 10) -> BinaryTreeArray:
    """Build a tree holding the first count lowercase letters in slot order.

    With the default count of 10 the tree is::

                 a
              /     \\
             b       c
           /   \\    / \\
          d     e  f   g
         / \\   /
        h   i j
    """
    if not 0 <= count <= len(string.ascii_lowercase):
        raise ValueError(f"count must be between 0 and {len(string.ascii_lowercase)}")
    return BinaryTreeArray.of(string.ascii_lowercase[:count])


def is_max_heap(tree: Union[BinaryTree, MaxHeap]) -> bool:
    """Check that no node holds a value larger than its parent's."""
    if isinstance(tree, MaxHeap):
        tree = tree.tree
    for key in tree.keys():
        parent = tree.get_parent(key)
        if parent is not None and tree.get(key) > tree.get(parent):
            return False
    return True


class TreeTestHelper:
    """Public test fixture for tree verification.

    Example:
        helper = TreeTestHelper(letters_tree())
        assert helper.values_in("in")[:3] == ['h', 'd', 'i']
        assert helper.summary()['height'] == 3
    """

    def __init__(self, tree: Union[BinaryTree, MaxHeap]):
        self._tree = tree.tree if isinstance(tree, MaxHeap) else tree

    def values_in(self, order: Union[TraversalOrder, str]) -> List[Any]:
        """Return every value of the tree in the given order."""
        return collect_values(self._tree, order)

    def summary(self) -> Dict[str, Any]:
        """Returns structural stats plus whether the tree is a max-heap."""
        summary = get_tree_stats(self._tree)
        summary['is_max_heap'] = is_max_heap(self._tree)
        return summary
