"""Character cursor over a string."""

from typing import Iterator, Optional
from ..core.errors import EndOfSequenceError


class CharCursor(Iterator[str]):
    """Iterate the characters of a string, one at a time.

    A None source behaves like an empty string. The cursor is single-pass;
    parser states share one cursor and each consumes what it needs.
    """

    def __init__(self, source: Optional[str]):
        self._source = source if source is not None else ""
        self._at = 0

    def has_next(self) -> bool:
        """Check if we are not at the end of the source."""
        return self._at < len(self._source)

    def __next__(self) -> str:
        if not self.has_next():
            raise EndOfSequenceError("Past end of input")
        char = self._source[self._at]
        self._at += 1
        return char

    def __iter__(self) -> 'CharCursor':
        return self
