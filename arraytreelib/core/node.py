"""NodeKey abstraction for ArrayTreeLib.

A NodeKey is intentionally kept simple - it only identifies a slot.
Navigation logic is delegated to the BinaryTree, which derives every
parent/child relationship on demand from the key's position.
"""


class NodeKey:
    """Opaque identifier for a position in a BinaryTree.

    Two keys are equal if they denote the same slot, and keys hash
    consistently so they can be used in sets and as dict keys.

    The key carries no parent or child pointers. The slot index it wraps
    is private to the tree implementation; callers should treat a key as a
    token handed out by the tree and handed back to it.
    """

    __slots__ = ("_index",)

    def __init__(self, index: int):
        self._index = index

    def __eq__(self, other: object) -> bool:
        """Keys are equal if they reference the same slot."""
        if not isinstance(other, NodeKey):
            return NotImplemented
        return self._index == other._index

    def __hash__(self) -> int:
        """Hash based on slot for use in sets and dicts."""
        return hash(self._index)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self._index})"
