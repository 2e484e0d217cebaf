"""
Error records for the scanning engine.

Lexical errors are collected, never raised: the scanner records one
``ScanError`` per character its classification routine rejects and keeps
going.

Author: xwest
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScanError:
    """A character the scanner could not classify."""
    message: str
    line_number: int
    start_position: int
    end_position: int
    code: str = "L001"

    def __str__(self) -> str:
        return (f"{self.code}: {self.message} "
                f"(line {self.line_number}, {self.start_position}:{self.end_position})")


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unknown character",
}


def create_unknown_character_error(char: str, line_number: int,
                                   start_position: int, end_position: int) -> ScanError:
    """Create an error for a character no scanning rule accepts."""
    if char.isprintable():
        message = f"Unknown character '{char}'."
    else:
        message = f"Unknown character U+{ord(char):04X}."

    return ScanError(
        message=message,
        line_number=line_number,
        start_position=start_position,
        end_position=end_position,
        code="L001",
    )
