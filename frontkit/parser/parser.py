"""
Generic recursive descent parsing engine.

A ``TokenParser`` holds a sentinel-terminated token sequence and a single
cursor into it. Concrete grammars subclass it, implement ``parse_root`` and
build their rules from the lookahead and consumption primitives below.

Error handling follows two strategies, and a grammar may mix them:

- Panic mode: ``consume`` records an error and raises ``ParseAbort`` when the
  expected token is missing. The abort unwinds every grammar routine up to
  ``parse()``, which returns a result without an AST.
- Manual recovery: a rule checks for trouble itself, records a soft error
  with ``add_error`` and resynchronises with ``skip`` / ``skip_until``. The
  parse continues and may still produce a best-effort AST.

Author: xwest
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple

from ..lexer.tokens import Token
from .errors import ParseError, ParseAbort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """AST and syntax errors produced by one ``parse()`` call."""
    ast: Any                        # None when the parse was aborted
    errors: Tuple[ParseError, ...]

    def has_errors(self) -> bool:
        """Check if parsing found any errors."""
        return len(self.errors) > 0


class TokenParser(ABC):
    """
    Base class for recursive descent parsers over a token sequence.

    The cursor never moves past the end-of-stream sentinel, so ``peek()``
    always has a token to return.
    """

    def __init__(self, tokens: Sequence[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: Tokens from the scanner, ending with the sentinel

        Raises:
            ValueError: If the sequence is empty or not sentinel-terminated
        """
        if not tokens or not tokens[-1].is_end:
            raise ValueError("Token sequence must end with the end-of-stream token")

        self.tokens = tuple(tokens)
        self.current = 0
        self._errors: List[ParseError] = []

    @abstractmethod
    def parse_root(self) -> Any:
        """Grammar entry point. Returns the AST root."""

    def parse(self) -> ParseResult:
        """
        Parse the token sequence into an AST.

        Returns:
            ParseResult carrying the AST, or no AST if the parse was aborted
        """
        self.current = 0
        self._errors = []

        try:
            ast = self.parse_root()
        except ParseAbort:
            if not self._errors:
                self.add_error(self.peek(), "Unable to parse the token sequence.", code="P002")
            logger.debug("Parse aborted at %r with %d errors", self.peek(), len(self._errors))
            return ParseResult(ast=None, errors=tuple(self._errors))

        return ParseResult(ast=ast, errors=tuple(self._errors))

    # Error reporting

    def add_error(self, token: Token, message: str, code: str = "P001") -> ParseError:
        """Record a syntax error without interrupting the parse."""
        error = ParseError(token=token, message=message, code=code)
        logger.debug("Line %d: %s (found %s)", token.line_number, message, token)
        self._errors.append(error)
        return error

    def error(self, token: Token, message: str) -> ParseAbort:
        """Record a syntax error and return the signal that aborts the parse."""
        self.add_error(token, message)
        return ParseAbort(message)

    # Cursor state

    @property
    def is_complete(self) -> bool:
        """Check if the cursor sits on the end-of-stream token."""
        return self.peek().is_end

    def peek(self) -> Token:
        """Return current token without consuming."""
        return self.tokens[self.current]

    def previous(self) -> Token:
        """
        Return the most recently consumed token.

        Raises:
            IndexError: If nothing has been consumed yet
        """
        if not self.has_previous():
            raise IndexError("No token has been consumed yet")
        return self.tokens[self.current - 1]

    def has_previous(self) -> bool:
        return self.current > 0

    def advance(self, count: int = 1) -> Optional[Token]:
        """
        Consume ``count`` tokens and return the last one consumed.

        Stops at the end-of-stream token, which is never consumed past.
        """
        token = None
        for _ in range(count):
            if not self.is_complete:
                self.current += 1
            token = self.previous() if self.has_previous() else self.peek()
        return token

    # Lookahead

    def check(self, token_type: Optional[Enum]) -> bool:
        """Check if current token matches type without consuming."""
        if self.is_complete:
            return False
        return self.peek().type == token_type

    def check_at(self, offset: int, token_type: Optional[Enum]) -> bool:
        """Check the token ``offset`` places ahead. False past the end."""
        index = self.current + offset
        if index < 0 or index >= len(self.tokens):
            return False
        return self.tokens[index].type == token_type

    def check_skipping(self, token_type: Optional[Enum], *allowed_skip: Optional[Enum]) -> bool:
        """
        Check if ``token_type`` comes next once tokens in ``allowed_skip``
        are ignored. The cursor does not move.
        """
        for offset in range(len(self.tokens) - self.current):
            if self.check_at(offset, token_type):
                return True
            if not any(self.check_at(offset, skipped) for skipped in allowed_skip):
                break
        return False

    def check_repeated(self, token_type: Optional[Enum], count: int) -> bool:
        """Check if the next ``count`` tokens are all of ``token_type``."""
        return all(self.check_at(offset, token_type) for offset in range(count))

    def check_sequential(self, *token_types: Optional[Enum]) -> bool:
        """Check if the next tokens match ``token_types`` position by position."""
        return all(self.check_at(offset, token_type)
                   for offset, token_type in enumerate(token_types))

    def get_next_offset(self, token_type: Optional[Enum]) -> Optional[int]:
        """Return the distance to the next token of ``token_type``, or None."""
        for offset in range(len(self.tokens) - self.current):
            if self.check_at(offset, token_type):
                return offset
        return None

    # Consumption

    def match(self, *token_types: Optional[Enum]) -> bool:
        """Consume the current token if it is one of ``token_types``."""
        if not any(self.check(token_type) for token_type in token_types):
            return False
        self.advance()
        return True

    def consume(self, token_type: Enum, message: str) -> Token:
        """
        Consume token of expected type or abort the parse.

        Raises:
            ParseAbort: After recording ``message`` against the current token
        """
        if self.check(token_type):
            return self.advance()
        raise self.error(self.peek(), message)

    def skip(self, *token_types: Optional[Enum]):
        """Consume tokens for as long as they are one of ``token_types``."""
        while self.match(*token_types):
            pass

    def skip_until(self, *token_types: Optional[Enum]):
        """
        Consume tokens up to, but not including, the next one of
        ``token_types`` or the end of the stream.
        """
        while not self.is_complete and not any(self.check(t) for t in token_types):
            self.advance()
