"""
frontkit Diagnostics Package

Maps scan and parse errors onto one uniform ``CompileError`` shape and
offers an opt-in ``CompileException`` for callers that want to fail fast.

Author: xwest
"""

from .errors import CompileError, CompileException, raise_on_any
from .translate import (
    compile_errors_from_scan, compile_errors_from_parse,
    get_compile_errors, raise_on_any_error
)

__all__ = [
    "CompileError",
    "CompileException",
    "raise_on_any",
    "compile_errors_from_scan",
    "compile_errors_from_parse",
    "get_compile_errors",
    "raise_on_any_error",
]
