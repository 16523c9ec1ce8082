"""Testing utilities for ArrayTreeLib consumers."""

from .fixtures import letters_tree, is_max_heap, TreeTestHelper

__all__ = ['letters_tree', 'is_max_heap', 'TreeTestHelper']
