"""
Error handling for the parsing engine.

Syntax errors are recorded as ``ParseError`` values. ``ParseAbort`` is the
signal used to unwind a failed descent back to ``TokenParser.parse()``; it
never escapes the engine.

Author: xwest
"""

from dataclasses import dataclass

from ..lexer.tokens import Token


@dataclass(frozen=True)
class ParseError:
    """A syntax error attached to the token found where it was detected."""
    token: Token
    message: str
    code: str = "P001"

    def __str__(self) -> str:
        return (f"{self.code}: {self.message} "
                f"(found {self.token}, line {self.token.line_number})")


class ParseAbort(Exception):
    """
    Raised to abandon the current parse.

    Caught only by ``TokenParser.parse()``, which turns it into a result
    without an AST.
    """


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Expected token not found",
    "P002": "Parse abandoned without a recorded error",
}
