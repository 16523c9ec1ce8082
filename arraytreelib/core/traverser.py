"""Tree traversal strategies for ArrayTreeLib.

Traversals walk a BinaryTree in one of four classic orders. They work with
any BinaryTree through its navigation contract, never through its storage.

Pre-, in- and post-order are written as explicit state machines: each one
keeps a single pending key, computed one step ahead, and finds the step
after it by climbing parent links instead of keeping a stack. Level-order
keeps a FIFO queue of pending keys.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterator, Optional, Union
from .node import NodeKey
from .tree import BinaryTree
from .errors import EndOfSequenceError
from ..config import TraversalOrder


class TreeTraversal(ABC):
    """Abstract base class for single-pass traversals.

    A traversal is an iterator over node values. It is bound to one tree
    and cannot be restarted; create a new traversal to start over. The tree
    is borrowed, not copied, so it must not be mutated mid-traversal.
    """

    def __init__(self, tree: BinaryTree):
        """Initialize traversal and compute its first key.

        Args:
            tree: BinaryTree to walk
        """
        self.tree = tree
        self._next_key: Optional[NodeKey] = None
        root = tree.get_root()
        if root is not None:
            self._next_key = self._first(root)

    @abstractmethod
    def _first(self, root: NodeKey) -> Optional[NodeKey]:
        """Return the first key visited in a non-empty tree."""
        pass

    @abstractmethod
    def _following(self, current: NodeKey) -> Optional[NodeKey]:
        """Return the key visited after current, or None when done."""
        pass

    def has_next(self) -> bool:
        """Check if another value is pending."""
        return self._next_key is not None

    def next_key(self) -> NodeKey:
        """Advance the traversal and return the pending key.

        Raises:
            EndOfSequenceError: If the traversal is exhausted
        """
        if self._next_key is None:
            raise EndOfSequenceError("There is no next node")
        current = self._next_key
        self._next_key = self._following(current)
        return current

    def keys(self) -> Iterator[NodeKey]:
        """Drain the remaining keys of the traversal."""
        while self.has_next():
            yield self.next_key()

    def __iter__(self) -> 'TreeTraversal':
        return self

    def __next__(self) -> Any:
        return self.tree.get(self.next_key())


class PreOrderTraversal(TreeTraversal):
    """Pre-order: a node, then its left subtree, then its right subtree."""

    def _first(self, root: NodeKey) -> Optional[NodeKey]:
        return root

    def _following(self, current: NodeKey) -> Optional[NodeKey]:
        # Go left when possible, otherwise resume at the closest unvisited
        # right branch above us.
        left = self.tree.get_left(current)
        if left is not None:
            return left
        return self.tree.right_of_nearest_left_ancestor(current)


class InOrderTraversal(TreeTraversal):
    """In-order: left subtree, then the node, then its right subtree."""

    def _first(self, root: NodeKey) -> Optional[NodeKey]:
        return self.tree.leftmost_descendant(root)

    def _following(self, current: NodeKey) -> Optional[NodeKey]:
        right = self.tree.get_right(current)
        if right is not None:
            return self.tree.leftmost_descendant(right)
        return self.tree.nearest_left_ancestor(current)


class PostOrderTraversal(TreeTraversal):
    """Post-order: left subtree, then right subtree, then the node."""

    def _first(self, root: NodeKey) -> Optional[NodeKey]:
        return self.tree.leftmost_leaf(root)

    def _following(self, current: NodeKey) -> Optional[NodeKey]:
        # The root has no parent, so the traversal ends there.
        parent = self.tree.get_parent(current)
        if parent is None:
            return None

        # A left child hands over to the parent's right branch, if any
        if self.tree.is_left_child_of(parent, current):
            right = self.tree.get_right(parent)
            if right is not None:
                return self.tree.leftmost_leaf(right)

        return parent


class LevelOrderTraversal(TreeTraversal):
    """Level-order: every node at depth N before any node at depth N+1."""

    def __init__(self, tree: BinaryTree):
        self._queue: Deque[NodeKey] = deque()
        super().__init__(tree)

    def _first(self, root: NodeKey) -> Optional[NodeKey]:
        self._queue.append(root)
        return root

    def _following(self, current: NodeKey) -> Optional[NodeKey]:
        self._queue.popleft()

        left = self.tree.get_left(current)
        if left is not None:
            self._queue.append(left)
        right = self.tree.get_right(current)
        if right is not None:
            self._queue.append(right)

        return self._queue[0] if self._queue else None


_TRAVERSALS = {
    TraversalOrder.PRE_ORDER: PreOrderTraversal,
    TraversalOrder.IN_ORDER: InOrderTraversal,
    TraversalOrder.POST_ORDER: PostOrderTraversal,
    TraversalOrder.LEVEL_ORDER: LevelOrderTraversal,
}


def create_traverser(order: Union[TraversalOrder, str], tree: BinaryTree) -> TreeTraversal:
    """Create a traversal over tree in the given order.

    Args:
        order: TraversalOrder member or its name (pre, in, post, level,
            pre_order, preorder, ...)
        tree: BinaryTree to walk

    Returns:
        TreeTraversal instance positioned at its first node

    Raises:
        ValueError: If the order name is not recognized
    """
    return _TRAVERSALS[TraversalOrder.parse(order)](tree)
