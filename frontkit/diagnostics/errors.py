"""
Uniform compile diagnostics.

Scan and parse errors each carry their own shape; ``CompileError`` is the
single shape handed to tools that report problems to users.

Author: xwest
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class CompileError:
    """An error found while compiling, positioned by line and line offset."""
    message: str
    start_position: int
    end_position: int
    start_line_number: int
    end_line_number: int
    code: Optional[str] = None

    def __str__(self) -> str:
        severity = f"ERROR[{self.code}]" if self.code else "ERROR"
        result = f"{severity}: {self.message}\n"
        result += f"  --> line {self.start_line_number}, {self.start_position}-{self.end_position}\n"
        return result


class CompileException(Exception):
    """
    Exception carrying every error of a failed compilation.

    The message lists the individual error messages, one per line, in the
    order they were reported.
    """

    def __init__(self, errors: Iterable[CompileError]):
        self.errors: List[CompileError] = list(errors)
        super().__init__("\n".join(error.message for error in self.errors))


def raise_on_any(errors: Iterable[CompileError]):
    """
    Raise if the passed collection holds any error.

    Raises:
        CompileException: If ``errors`` is not empty
    """
    errors = list(errors)
    if errors:
        raise CompileException(errors)
