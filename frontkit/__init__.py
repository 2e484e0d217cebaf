"""
frontkit Package

Reusable front end for language processors: a generic character scanner that
turns text into tokens and a generic recursive descent parser that turns
tokens into an AST. Both collect every error they find instead of stopping at
the first one.

Architecture:
    frontkit/
    ├── lexer/           # Scanning engine, tokens, lexical errors
    ├── parser/          # Parsing engine, syntax errors, abort signal
    └── diagnostics/     # Uniform compile errors and fail-fast helpers

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Token, TokenScanner, ScanResult, ScanError
from .parser import TokenParser, ParseResult, ParseError, ParseAbort
from .diagnostics import (
    CompileError, CompileException, get_compile_errors, raise_on_any, raise_on_any_error
)

__all__ = [
    # Core classes
    "TokenScanner",
    "TokenParser",

    # Data model
    "Token",
    "ScanResult",
    "ScanError",
    "ParseResult",
    "ParseError",
    "ParseAbort",

    # Diagnostics
    "CompileError",
    "CompileException",
    "get_compile_errors",
    "raise_on_any",
    "raise_on_any_error",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
