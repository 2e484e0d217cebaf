"""
Conversion of engine results into ``CompileError`` lists.

Author: xwest
"""

from typing import List, Union

from ..lexer.scanner import ScanResult
from ..parser.parser import ParseResult
from .errors import CompileError, raise_on_any


def compile_errors_from_scan(scan_result: ScanResult) -> List[CompileError]:
    """Get errors from the scan result as ``CompileError`` list."""
    return [
        CompileError(
            message=f"Syntax error: {scan_error.message}",
            start_position=scan_error.start_position,
            end_position=scan_error.end_position,
            start_line_number=scan_error.line_number,
            end_line_number=scan_error.line_number,
            code=scan_error.code,
        )
        for scan_error in scan_result.errors
    ]


def compile_errors_from_parse(parse_result: ParseResult) -> List[CompileError]:
    """Get errors from the parse result as ``CompileError`` list."""
    errors = []

    for parse_error in parse_result.errors:
        token = parse_error.token

        # The end-of-stream token has no lexeme to quote
        if token.lexeme is None:
            message = f"Syntax error: {parse_error.message}"
        else:
            message = f"Syntax error on token '{token.lexeme}': {parse_error.message}"

        errors.append(CompileError(
            message=message,
            start_position=token.start_position,
            end_position=token.end_position,
            start_line_number=token.line_number,
            end_line_number=token.line_number,
            code=parse_error.code,
        ))

    return errors


def get_compile_errors(result: Union[ScanResult, ParseResult]) -> List[CompileError]:
    """
    Get errors from a scan or parse result.

    Raises:
        TypeError: If ``result`` is neither a ScanResult nor a ParseResult
    """
    if isinstance(result, ScanResult):
        return compile_errors_from_scan(result)
    if isinstance(result, ParseResult):
        return compile_errors_from_parse(result)
    raise TypeError(f"Cannot collect compile errors from {type(result).__name__}")


def raise_on_any_error(result: Union[ScanResult, ParseResult]):
    """
    Raise if any error exists in the scan or parse result.

    Raises:
        CompileException: If the result has errors
    """
    raise_on_any(get_compile_errors(result))
