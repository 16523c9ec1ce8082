"""Array-backed nearly-complete binary tree.

Nodes fill list slots 0..size-1 with no gaps, so every relationship is
plain index arithmetic:

    parent(i) = ((i + 1) // 2) - 1
    left(i)   = 2 * i + 1
    right(i)  = 2 * i + 2
"""

from typing import Any, Iterable, Iterator, List, Optional
from .node import NodeKey
from .tree import BinaryTree
from .errors import OutOfRangeError


class BinaryTreeArray(BinaryTree):
    """Nearly complete binary tree stored in a Python list.

    New values are always appended to the end of the list, which keeps the
    tree nearly complete by construction. There is no rebalancing.

    Example:
        >>> tree = BinaryTreeArray.of("abc")
        >>> root = tree.get_root()
        >>> tree.get(tree.get_left(root))
        'b'
    """

    def __init__(self, values: Optional[Iterable[Any]] = None):
        """Initialize the tree.

        Args:
            values: Initial contents in slot order (copied). Empty if None.
        """
        self._array: List[Any] = list(values) if values is not None else []

    @classmethod
    def of(cls, values: Iterable[Any]) -> 'BinaryTreeArray':
        """Create a tree initialized with values in slot order."""
        return cls(values)

    @classmethod
    def empty(cls) -> 'BinaryTreeArray':
        """Create an empty tree."""
        return cls()

    def size(self) -> int:
        return len(self._array)

    def add(self, value: Any) -> NodeKey:
        self._array.append(value)
        return NodeKey(len(self._array) - 1)

    def get(self, key: NodeKey) -> Any:
        return self._array[self._index_of(key)]

    def swap(self, key1: NodeKey, key2: NodeKey) -> None:
        index1 = self._index_of(key1)
        index2 = self._index_of(key2)
        self._array[index1], self._array[index2] = self._array[index2], self._array[index1]

    def remove_last(self) -> Any:
        if not self._array:
            raise OutOfRangeError(0, 0)
        return self._array.pop()

    def keys(self) -> Iterator[NodeKey]:
        for index in range(len(self._array)):
            yield NodeKey(index)

    def get_root(self) -> Optional[NodeKey]:
        if not self._array:
            return None
        return NodeKey(0)

    def has_parent(self, key: NodeKey) -> bool:
        return self._in_bounds(self._parent_of(self._index_of(key)))

    def get_parent(self, key: NodeKey) -> Optional[NodeKey]:
        return self._relative(self._parent_of(self._index_of(key)))

    def has_left(self, key: NodeKey) -> bool:
        return self._in_bounds(self._left_of(self._index_of(key)))

    def get_left(self, key: NodeKey) -> Optional[NodeKey]:
        return self._relative(self._left_of(self._index_of(key)))

    def has_right(self, key: NodeKey) -> bool:
        return self._in_bounds(self._right_of(self._index_of(key)))

    def get_right(self, key: NodeKey) -> Optional[NodeKey]:
        return self._relative(self._right_of(self._index_of(key)))

    def get_depth(self, key: NodeKey) -> int:
        """Depth straight from the slot index: floor(log2(index + 1))."""
        return (self._index_of(key) + 1).bit_length() - 1

    def __iter__(self) -> Iterator[Any]:
        """Iterate values in slot order."""
        return iter(list(self._array))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._array!r})"

    # Index arithmetic

    @staticmethod
    def _parent_of(index: int) -> int:
        return ((index + 1) // 2) - 1

    @staticmethod
    def _left_of(index: int) -> int:
        return (index * 2) + 1

    @staticmethod
    def _right_of(index: int) -> int:
        return (index * 2) + 2

    def _in_bounds(self, index: int) -> bool:
        return 0 <= index < len(self._array)

    def _relative(self, index: int) -> Optional[NodeKey]:
        """Wrap a computed relative index, or None if it is out of bounds."""
        if not self._in_bounds(index):
            return None
        return NodeKey(index)

    def _index_of(self, key: NodeKey) -> int:
        """Unwrap key, raising OutOfRangeError if it is not a valid slot."""
        if not isinstance(key, NodeKey):
            raise TypeError(f"Expected NodeKey, got {type(key).__name__}")
        index = key._index
        if not self._in_bounds(index):
            raise OutOfRangeError(index, len(self._array))
        return index
