"""General state-based parser.

The parser takes a string as input and produces a list of string tokens.
It knows nothing about the format being parsed: the caller passes a
ParserStateFactory, and the states it provides contain all parsing logic.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional
from .cursor import CharCursor
from ..core.errors import ParseError

logger = logging.getLogger(__name__)


class ParserState(ABC):
    """A state of a state-based parser."""

    @abstractmethod
    def accept(self, cursor: CharCursor, parsed: List[str]) -> Optional['ParserState']:
        """Consume input, appending any completed tokens to parsed.

        Args:
            cursor: Shared input cursor
            parsed: Tokens parsed so far

        Returns:
            State to transition to, or None to stay in this state
        """
        pass


class ParserStateFactory(ABC):
    """Supplies the states a parser runs through."""

    @abstractmethod
    def get_start_state(self) -> ParserState:
        """Return the state the parser starts in."""
        pass

    @abstractmethod
    def illegal_end_state(self, end_state: ParserState) -> Optional[str]:
        """Check whether the parser may stop in end_state.

        Returns:
            Error message if end_state is not a legal place to stop,
            None otherwise
        """
        pass


def parse(factory: ParserStateFactory, text: str) -> List[str]:
    """Parse text with the states supplied by factory.

    The current state is given the input for as long as any remains. A
    state returning another state makes the parser transition to it.
    Once the input runs out the factory decides whether the final state
    is a legal place to stop.

    Args:
        factory: Provides the states
        text: Input to parse

    Returns:
        List of parsed tokens

    Raises:
        ValueError: If factory or text is None
        ParseError: If parsing ended in an illegal state
    """
    if factory is None or text is None:
        raise ValueError("factory and text cannot be None")

    parsed: List[str] = []
    cursor = CharCursor(text)
    state = factory.get_start_state()

    while cursor.has_next():
        next_state = state.accept(cursor, parsed)
        if next_state is not None:
            state = next_state

    message = factory.illegal_end_state(state)
    if message is not None:
        raise ParseError(message)

    logger.debug("Parsed %d tokens from %d characters", len(parsed), len(text))
    return parsed
