"""ArrayTreeLib - Array-backed binary trees, traversals and heaps.

ArrayTreeLib stores a nearly-complete binary tree in a flat list and derives
every parent/child relationship from index arithmetic. On top of that
navigation contract it provides:

    Traversals:
        from arraytreelib import create_traverser, TraversalOrder

    Max-heap:
        from arraytreelib import MaxHeap

    Functional helpers:
        from arraytreelib import traverse_tree, heap_sort
"""

__version__ = "0.1.0"

from .core import (
    ArrayTreeError,
    OutOfRangeError,
    EndOfSequenceError,
    EmptyHeapError,
    ConfigurationError,
    ParseError,
    NodeKey,
    BinaryTree,
    BinaryTreeArray,
    TreeTraversal,
    PreOrderTraversal,
    InOrderTraversal,
    PostOrderTraversal,
    LevelOrderTraversal,
    create_traverser,
    Heap,
    MaxHeap,
)
from .config import TraversalOrder, TraversalConfig
from .api import (
    build_tree,
    build_heap,
    traverse_tree,
    collect_values,
    count_nodes,
    find_values,
    heap_sort,
    get_tree_stats,
)
from . import parsing

__all__ = [
    "__version__",
    # Errors
    "ArrayTreeError",
    "OutOfRangeError",
    "EndOfSequenceError",
    "EmptyHeapError",
    "ConfigurationError",
    "ParseError",
    # Core
    "NodeKey",
    "BinaryTree",
    "BinaryTreeArray",
    "TreeTraversal",
    "PreOrderTraversal",
    "InOrderTraversal",
    "PostOrderTraversal",
    "LevelOrderTraversal",
    "create_traverser",
    "Heap",
    "MaxHeap",
    # Config
    "TraversalOrder",
    "TraversalConfig",
    # API
    "build_tree",
    "build_heap",
    "traverse_tree",
    "collect_values",
    "count_nodes",
    "find_values",
    "heap_sort",
    "get_tree_stats",
    "parsing",
]
