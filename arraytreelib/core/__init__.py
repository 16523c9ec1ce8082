"""Core abstractions for ArrayTreeLib.

This package contains the node key, the binary tree navigation contract
and its array-backed implementation, the traversals, and the max-heap.
"""

from .errors import (
    ArrayTreeError,
    OutOfRangeError,
    EndOfSequenceError,
    EmptyHeapError,
    ConfigurationError,
    ParseError,
)
from .node import NodeKey
from .tree import BinaryTree
from .array_tree import BinaryTreeArray
from .traverser import (
    TreeTraversal,
    PreOrderTraversal,
    InOrderTraversal,
    PostOrderTraversal,
    LevelOrderTraversal,
    create_traverser,
)
from .heap import Heap, MaxHeap

__all__ = [
    "ArrayTreeError",
    "OutOfRangeError",
    "EndOfSequenceError",
    "EmptyHeapError",
    "ConfigurationError",
    "ParseError",
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
]
