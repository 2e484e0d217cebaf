"""
Token definitions shared by the scanning and parsing engines.

Token kinds are not defined here: every language built on frontkit supplies
its own ``Enum`` of kinds. The only kind known to the engines is ``None``,
which marks the end-of-stream sentinel closing every token sequence.

Author: xwest
"""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Token:
    """
    Represents a classified, positioned unit of lexical input.

    Positions are relative to the start of the token's line and zero-based;
    ``end_position`` is exclusive. ``offset`` is the absolute index of the
    first character of the lexeme in the scanned input.
    """
    type: Optional[Enum]            # None for the end-of-stream sentinel
    lexeme: Optional[str]           # Raw text from source, None for the sentinel
    literal: Any                    # Decoded value (e.g., int for a number)
    line_number: int
    start_position: int
    end_position: int
    offset: int = 0

    @classmethod
    def end_of_stream(cls, line_number: int, position: int, offset: int) -> "Token":
        """Build the sentinel token placed after the last character."""
        return cls(
            type=None,
            lexeme=None,
            literal=None,
            line_number=line_number,
            start_position=position,
            end_position=position,
            offset=offset,
        )

    @property
    def is_end(self) -> bool:
        """Check if this token is the end-of-stream sentinel."""
        return self.type is None

    @property
    def type_name(self) -> str:
        return "EOF" if self.type is None else self.type.name

    def __str__(self) -> str:
        if self.is_end:
            return "EOF"
        if self.literal is not None and self.literal != self.lexeme:
            return f"{self.type_name}({self.lexeme!r} -> {self.literal!r})"
        return f"{self.type_name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type_name}, {self.lexeme!r}, {self.literal!r}, "
                f"line={self.line_number}, {self.start_position}:{self.end_position})")
