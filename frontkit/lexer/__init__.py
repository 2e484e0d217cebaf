"""
frontkit Lexer Package

Implements the generic scanning engine: a character cursor with line/position
bookkeeping that turns raw text into a token sequence, collecting every
lexical error instead of stopping at the first one.

Key Features:
- Language-neutral: token kinds and character rules come from a subclass
- Absolute and line-relative positions tracked side by side
- One error per unknown character, scanning always runs to the end
- Every token sequence ends with an end-of-stream sentinel

Author: xwest
"""

from .tokens import Token
from .scanner import TokenScanner, ScanResult
from .errors import ScanError, ERROR_CODES, create_unknown_character_error

__all__ = [
    "TokenScanner",
    "ScanResult",
    "Token",
    "ScanError",
    "ERROR_CODES",
    "create_unknown_character_error",
]
