"""Exception hierarchy for ArrayTreeLib.

Every error raised by the library derives from ArrayTreeError and from the
builtin exception a Python caller would expect for the same situation, so
both ``except ArrayTreeError`` and ``except IndexError`` style handlers work.
"""


class ArrayTreeError(Exception):
    """Base class for all ArrayTreeLib errors."""
    pass


class OutOfRangeError(ArrayTreeError, IndexError):
    """Raised when a key or index does not reference a slot in the tree."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Index {index} out of bounds, size={size}")
        self.index = index
        self.size = size


class EndOfSequenceError(ArrayTreeError, StopIteration):
    """Raised when a traversal or cursor is asked for more than it holds.

    Subclasses StopIteration so ``for`` loops and ``list()`` end normally.
    """
    pass


class EmptyHeapError(ArrayTreeError, IndexError):
    """Raised when popping or peeking an empty heap."""
    pass


class ConfigurationError(ArrayTreeError, ValueError):
    """Raised when a TraversalConfig does not validate."""
    pass


class ParseError(ArrayTreeError, ValueError):
    """Raised when a parser stops in a state that is not a legal end state."""
    pass
