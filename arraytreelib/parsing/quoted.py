"""Quoted-string tokenizer built on the state-based parser.

Rules:
1. A string starts with either a single or a double quote and ends at the
   next matching quote.
2. The other kind of quote is an ordinary character inside a string.
3. Inside a string, a backslash escapes the following character.

Text outside quotes is skipped.
"""

from typing import List, Optional
from .cursor import CharCursor
from .parser import ParserState, ParserStateFactory, parse

DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"
BACK_SLASH = '\\'


class _StartState(ParserState):
    """Outside any string. This is where we start."""

    def accept(self, cursor: CharCursor, parsed: List[str]) -> Optional[ParserState]:
        while cursor.has_next():
            char = next(cursor)
            if char == DOUBLE_QUOTE:
                return IN_DOUBLE_QUOTE
            if char == SINGLE_QUOTE:
                return IN_SINGLE_QUOTE
        return None

    def __repr__(self) -> str:
        return "START"


class _InStringState(ParserState):
    """Inside a string, until the closing quote."""

    def __init__(self, ender: str, name: str):
        self.ender = ender
        self.name = name

    def accept(self, cursor: CharCursor, parsed: List[str]) -> Optional[ParserState]:
        chars = []
        while cursor.has_next():
            char = next(cursor)
            if char == self.ender:
                parsed.append(''.join(chars))
                return START

            # A trailing backslash has nothing to escape and is kept as-is
            if char == BACK_SLASH and cursor.has_next():
                char = next(cursor)
            chars.append(char)

        # Ran out of input mid-string
        return None

    def __repr__(self) -> str:
        return self.name


START = _StartState()
IN_DOUBLE_QUOTE = _InStringState(DOUBLE_QUOTE, "IN_DOUBLE_QUOTE")
IN_SINGLE_QUOTE = _InStringState(SINGLE_QUOTE, "IN_SINGLE_QUOTE")


class QuotedStringParser(ParserStateFactory):
    """Factory for the quoted-string states. Parsing must end outside a string."""

    def get_start_state(self) -> ParserState:
        return START

    def illegal_end_state(self, end_state: ParserState) -> Optional[str]:
        if end_state is START:
            return None
        return "Reached end of input while within a string"


def parse_quoted(text: str) -> List[str]:
    """Return the quoted strings found in text.

    Example:
        >>> parse_quoted('A \\'dog\\' barks and "bites"')
        ['dog', 'bites']

    Raises:
        ParseError: If text ends inside a string
    """
    return parse(QuotedStringParser(), text)
