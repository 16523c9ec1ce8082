"""BinaryTree abstraction for ArrayTreeLib.

The BinaryTree is the navigation contract every other component builds on.
Traversals and heaps only ever talk to a tree through these methods, so a
tree with a different storage layout can be dropped in without changing
them.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional
from .node import NodeKey


class BinaryTree(ABC):
    """Abstract navigation contract for binary trees.

    Concrete trees supply storage access (add, get, swap, remove_last) and
    the basic relatives of a node (parent, left, right). Everything else -
    leftmost descendants, nearest left ancestors, depth - is derived here
    from those primitives.

    All methods taking a key raise OutOfRangeError if the key does not
    reference a slot of this tree. Lookups of a relative that does not
    exist return None rather than raising.
    """

    @abstractmethod
    def size(self) -> int:
        """Return the number of nodes in the tree."""
        pass

    @abstractmethod
    def add(self, value: Any) -> NodeKey:
        """Add a node holding value to the tree.

        Args:
            value: Value stored in the new node

        Returns:
            Key identifying where the node was added
        """
        pass

    @abstractmethod
    def get(self, key: NodeKey) -> Any:
        """Return the value of the node at key."""
        pass

    @abstractmethod
    def swap(self, key1: NodeKey, key2: NodeKey) -> None:
        """Exchange the values held by two nodes.

        Both keys are validated before either node is modified.
        Swapping a key with itself is allowed and changes nothing.
        """
        pass

    @abstractmethod
    def remove_last(self) -> Any:
        """Remove the last node of the tree and return its value.

        Raises:
            OutOfRangeError: If the tree is empty
        """
        pass

    @abstractmethod
    def keys(self) -> Iterator[NodeKey]:
        """Iterate every key of the tree in slot (breadth-first) order."""
        pass

    @abstractmethod
    def get_root(self) -> Optional[NodeKey]:
        """Return the key of the root node, or None for an empty tree."""
        pass

    @abstractmethod
    def has_parent(self, key: NodeKey) -> bool:
        pass

    @abstractmethod
    def get_parent(self, key: NodeKey) -> Optional[NodeKey]:
        pass

    @abstractmethod
    def has_left(self, key: NodeKey) -> bool:
        pass

    @abstractmethod
    def get_left(self, key: NodeKey) -> Optional[NodeKey]:
        pass

    @abstractmethod
    def has_right(self, key: NodeKey) -> bool:
        pass

    @abstractmethod
    def get_right(self, key: NodeKey) -> Optional[NodeKey]:
        pass

    def __len__(self) -> int:
        return self.size()

    # Derived navigation - built only from the primitives above

    def is_left_child_of(self, parent: NodeKey, candidate: NodeKey) -> bool:
        """Check whether candidate is the left child of parent.

        Args:
            parent: The possible parent node
            candidate: The node to test

        Returns:
            True if candidate is parent's left child. A right child, or a
            node unrelated to parent, gives False.

        Raises:
            ValueError: If either key is None
        """
        if parent is None or candidate is None:
            raise ValueError("parent and candidate keys are required")
        return self.get_left(parent) == candidate

    def is_leaf(self, key: NodeKey) -> bool:
        """Check if the node has no children.

        In a nearly-complete tree a node without a left child cannot have
        a right child, so only the left side is checked.
        """
        return not self.has_left(key)

    def leftmost_descendant(self, key: NodeKey) -> NodeKey:
        """Follow left children from key for as long as they exist.

        Returns:
            The deepest node reached, or key itself if it has no left child
        """
        current = key
        left = self.get_left(current)
        while left is not None:
            current = left
            left = self.get_left(current)
        return current

    def leftmost_leaf(self, key: NodeKey) -> NodeKey:
        """Find the first leaf visited under key in in-order or post-order.

        Drills down to the leftmost descendant; if that node still has a
        right subtree the descent starts again inside it.

        Args:
            key: Root of the subtree to search

        Returns:
            Key of the leftmost leaf of the subtree
        """
        current = self.leftmost_descendant(key)
        right = self.get_right(current)
        while right is not None:
            current = self.leftmost_descendant(right)
            right = self.get_right(current)
        return current

    def nearest_left_ancestor(self, key: NodeKey) -> Optional[NodeKey]:
        """Find the first ancestor reached by climbing through its left edge.

        Args:
            key: Node to start climbing from

        Returns:
            That ancestor, or None if key lies on the right spine of the tree
        """
        child = key
        parent = self.get_parent(child)
        while parent is not None:
            if self.is_left_child_of(parent, child):
                return parent
            child = parent
            parent = self.get_parent(child)
        return None

    def right_of_nearest_left_ancestor(self, key: NodeKey) -> Optional[NodeKey]:
        """Find the right child of the nearest left ancestor that has one.

        Like nearest_left_ancestor, except ancestors without a right child
        are climbed past.

        Args:
            key: Node to start climbing from

        Returns:
            Right child of the qualifying ancestor, or None if none exists
        """
        child = key
        parent = self.get_parent(child)
        while parent is not None:
            if self.is_left_child_of(parent, child):
                right = self.get_right(parent)
                if right is not None:
                    return right
            child = parent
            parent = self.get_parent(child)
        return None

    def get_depth(self, key: NodeKey) -> int:
        """Calculate the depth of a node in the tree.

        Default implementation walks up to root.
        Trees can override for more efficient implementations.

        Args:
            key: The node to get depth for

        Returns:
            Depth where root = 0
        """
        depth = 0
        parent = self.get_parent(key)
        while parent is not None:
            depth += 1
            parent = self.get_parent(parent)
        return depth
