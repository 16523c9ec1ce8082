"""String parsing collaborators for ArrayTreeLib.

A CharCursor feeds characters to a state-based parser; QuotedStringParser
is a ready-made set of states that extracts quoted strings.
"""

from .cursor import CharCursor
from .parser import ParserState, ParserStateFactory, parse
from .quoted import QuotedStringParser, parse_quoted

__all__ = [
    'CharCursor',
    'ParserState',
    'ParserStateFactory',
    'parse',
    'QuotedStringParser',
    'parse_quoted',
]
