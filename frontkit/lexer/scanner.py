"""
Generic scanning engine.

A ``TokenScanner`` walks the input one character at a time and hands each
character to ``try_process``, which a concrete language implements. The
engine owns the cursors and the token/error lists; the subclass only decides
what a character means and emits tokens through ``emit_token``.

Two coordinate systems are tracked at once: an absolute cursor into the
input (used to slice lexemes) and a line-relative cursor plus a line counter
(used for everything reported to humans). The engine never looks for
newlines itself. ``try_process`` must call ``mark_next_line`` whenever it
consumes a character it treats as a line terminator; forgetting to do so
shifts every later line number and position.

Example:
    class Calc(TokenScanner):
        def try_process(self, char):
            if self.is_digit(char):
                while self.advance_if(self.is_digit):
                    pass
                self.emit_token(Kind.NUMBER, int(self.current_lexeme()))
                return True
            if char == "\\n":
                self.mark_next_line()
                return True
            return char == " "

Author: xwest
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Tuple, Union

from .tokens import Token
from .errors import ScanError, create_unknown_character_error

logger = logging.getLogger(__name__)

CharPredicate = Callable[[str], bool]


@dataclass(frozen=True)
class ScanResult:
    """Tokens and lexical errors produced by one ``scan()`` call."""
    tokens: Tuple[Token, ...]
    errors: Tuple[ScanError, ...]

    def has_errors(self) -> bool:
        """Check if scanning found any errors."""
        return len(self.errors) > 0


class TokenScanner(ABC):
    """
    Base class for character scanners.

    Subclasses implement ``try_process``. Every other method is a primitive
    meant to be called from inside it.
    """

    def __init__(self, source: str):
        """
        Initialize the scanner with source text.

        Args:
            source: The string to scan
        """
        self.source = source
        self._reset()

    def _reset(self):
        self._start = 0
        self._current = 0
        self._start_position = 0
        self._current_position = 0
        self._line = 0
        self._tokens: List[Token] = []
        self._errors: List[ScanError] = []

    @abstractmethod
    def try_process(self, char: str) -> bool:
        """
        Classify a character that has just been consumed.

        Return True when the character was recognized (after emitting any
        tokens it starts), False to have it reported as an unknown character.
        """

    def scan(self) -> ScanResult:
        """
        Scan the whole input.

        Returns:
            ScanResult with every emitted token followed by the end-of-stream
            sentinel, and one error per unrecognized character
        """
        self._reset()

        while not self.is_complete:
            self._start = self._current
            self._start_position = self._current_position
            self._scan_token()

        self._tokens.append(Token.end_of_stream(
            self._line, self._current_position, self._current))

        logger.debug("Scanned %d tokens with %d errors",
                     len(self._tokens), len(self._errors))

        return ScanResult(tokens=tuple(self._tokens), errors=tuple(self._errors))

    def _scan_token(self):
        char = self.advance()
        if not self.try_process(char):
            error = create_unknown_character_error(
                char, self._line, self._start_position, self._current_position)
            logger.debug("Line %d: %s", self._line, error.message)
            self._errors.append(error)

    @property
    def is_complete(self) -> bool:
        """Check if every character of the input has been consumed."""
        return self._current >= len(self.source)

    def peek(self, offset: int, expected: Union[str, CharPredicate]) -> bool:
        """
        Look at the character ``offset`` places after the cursor.

        ``expected`` is either a character to compare with or a predicate.
        Returns False past the end of the input.
        """
        index = self._current + offset
        if index < 0 or index >= len(self.source):
            return False
        return self._matches(self.source[index], expected)

    def advance(self) -> str:
        """
        Consume and return the next character.

        Raises:
            IndexError: If the input is already exhausted
        """
        if self.is_complete:
            raise IndexError(f"No character left to scan at offset {self._current}")
        char = self.source[self._current]
        self._current += 1
        self._current_position += 1
        return char

    def advance_if(self, expected: Union[str, CharPredicate]) -> bool:
        """Consume the next character only if it matches ``expected``."""
        if self.is_complete:
            return False
        if not self._matches(self.source[self._current], expected):
            return False
        self.advance()
        return True

    def mark_next_line(self):
        """Start a new line: bump the line counter, reset the line position."""
        self._line += 1
        self._current_position = 0

    def emit_token(self, token_type: Enum, literal: Any = None):
        """
        Add a token spanning everything consumed since the token start.

        Args:
            token_type: Kind of the scanned token
            literal: Decoded value for strings, numbers, etc.
        """
        self._tokens.append(Token(
            type=token_type,
            lexeme=self.current_lexeme(),
            literal=literal,
            line_number=self._line,
            start_position=self._start_position,
            end_position=self._current_position,
            offset=self._start,
        ))

    def current_lexeme(self) -> str:
        """Return the text consumed since the token start without emitting."""
        return self.source[self._start:self._current]

    @staticmethod
    def is_digit(char: str) -> bool:
        return "0" <= char <= "9"

    @staticmethod
    def is_alpha(char: str) -> bool:
        return "a" <= char <= "z" or "A" <= char <= "Z"

    @staticmethod
    def _matches(char: str, expected: Union[str, CharPredicate]) -> bool:
        if callable(expected):
            return bool(expected(char))
        return char == expected
