"""Max-heap built on the BinaryTree navigation contract.

The heap never touches tree storage directly. Sift-up and sift-down are
expressed entirely in terms of keys, get, swap and the parent/child
lookups, so any BinaryTree implementation can back a heap.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional
from .node import NodeKey
from .tree import BinaryTree
from .array_tree import BinaryTreeArray
from .errors import EmptyHeapError

logger = logging.getLogger(__name__)


class Heap(ABC):
    """Abstract heap contract: the largest value is always popped first."""

    @abstractmethod
    def push(self, value: Any) -> None:
        """Push a value into the heap."""
        pass

    @abstractmethod
    def pop(self) -> Any:
        """Remove and return the largest value.

        Raises:
            EmptyHeapError: If the heap holds no values
        """
        pass


class MaxHeap(Heap):
    """Max-heap stored in a nearly-complete binary tree.

    Invariant: every node's value is <= its parent's value, so the root
    holds the maximum. Values must be mutually comparable with ``>``.
    Equal values never trigger a swap, and there is no stability
    guarantee among them.

    Example:
        >>> heap = MaxHeap.of([3, 9, 4])
        >>> heap.pop()
        9
    """

    def __init__(self, tree: Optional[BinaryTree] = None):
        """Initialize heap over a tree.

        Args:
            tree: Tree already satisfying the heap invariant. A new empty
                BinaryTreeArray is used if None. Use MaxHeap.of to build
                a heap from arbitrary values.
        """
        self._tree = tree if tree is not None else BinaryTreeArray.empty()

    @classmethod
    def empty(cls) -> 'MaxHeap':
        return cls()

    @classmethod
    def of(cls, values: Iterable[Any]) -> 'MaxHeap':
        """Build a heap from arbitrary values in one bottom-up pass.

        The values are copied into a new tree as-is, then every non-leaf
        node is sifted down, from the last non-leaf back to the root. Each
        sift-down therefore runs on subtrees that are already heaps.

        Args:
            values: Values in any order

        Returns:
            MaxHeap holding all values
        """
        heap = cls(BinaryTreeArray.of(values))
        heap._build()
        return heap

    @property
    def tree(self) -> BinaryTree:
        """The underlying tree, for navigation and traversal."""
        return self._tree

    def size(self) -> int:
        return self._tree.size()

    def __len__(self) -> int:
        return self._tree.size()

    def __bool__(self) -> bool:
        return self._tree.size() > 0

    def push(self, value: Any) -> None:
        key = self._tree.add(value)
        self._sift_up(key)

    def push_all(self, values: Iterable[Any]) -> None:
        """Push each value in order."""
        for value in values:
            self.push(value)

    def peek(self) -> Any:
        """Return the largest value without removing it.

        Raises:
            EmptyHeapError: If the heap holds no values
        """
        root = self._tree.get_root()
        if root is None:
            raise EmptyHeapError("Cannot peek an empty heap")
        return self._tree.get(root)

    def pop(self) -> Any:
        root = self._tree.get_root()
        if root is None:
            raise EmptyHeapError("Cannot pop an empty heap")

        largest = self._tree.get(root)

        # Move the last node to the root, drop the old root off the end
        last = self._last_key()
        self._tree.swap(root, last)
        self._tree.remove_last()

        if self._tree.size() > 0:
            self._sift_down(root)
        return largest

    def _build(self) -> None:
        """Restore the heap invariant over the whole tree, bottom-up."""
        internal = [key for key in self._tree.keys() if self._tree.has_left(key)]
        for key in reversed(internal):
            self._sift_down(key)
        logger.debug("Built max-heap of %d values (%d internal nodes)",
                     self._tree.size(), len(internal))

    def _last_key(self) -> NodeKey:
        """Key of the last slot: the deepest node on the bottom level."""
        # In a nearly-complete tree the last slot is reached by walking the
        # binary digits of size, skipping the leading 1.
        key = self._tree.get_root()
        for bit in bin(self._tree.size())[3:]:
            key = self._tree.get_right(key) if bit == '1' else self._tree.get_left(key)
        return key

    def _sift_up(self, key: NodeKey) -> None:
        """Climb the node at key past any smaller ancestor."""
        parent = self._tree.get_parent(key)
        while parent is not None and self._is_larger(key, parent):
            self._tree.swap(key, parent)
            key = parent
            parent = self._tree.get_parent(key)

    def _sift_down(self, key: NodeKey) -> None:
        """Max-heapify: push the node at key below any larger child.

        Assumes the subtrees under key are already heaps.
        """
        while True:
            largest = key

            left = self._tree.get_left(key)
            if left is not None and self._is_larger(left, largest):
                largest = left

            right = self._tree.get_right(key)
            if right is not None and self._is_larger(right, largest):
                largest = right

            if largest == key:
                return

            self._tree.swap(largest, key)
            key = largest

    def _is_larger(self, key1: NodeKey, key2: NodeKey) -> bool:
        """Check if the value at key1 is strictly larger than at key2."""
        return self._tree.get(key1) > self._tree.get(key2)
