"""
frontkit Parser Package

Implements the generic recursive descent parsing engine over a token
sequence produced by ``frontkit.lexer`` (or any sentinel-terminated source).

Key Features:
- Token cursor with non-consuming lookahead that never raises
- Panic-mode aborts through ``consume``, caught once at ``parse()``
- Soft errors and resynchronisation for manual recovery
- Results always well-formed: no AST when the parse was aborted

Author: xwest
"""

from .parser import TokenParser, ParseResult
from .errors import ParseError, ParseAbort, PARSER_ERROR_CODES

__all__ = [
    # Core parser
    "TokenParser",
    "ParseResult",

    # Error handling
    "ParseError",
    "ParseAbort",
    "PARSER_ERROR_CODES",
]
