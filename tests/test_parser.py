"""
Test suite for the frontkit parsing engine.

Tests cover:
- Parse results and the abort signal
- Lookahead primitives, including offsets past the end
- Consumption primitives and the cursor at the sentinel
- Soft errors and manual recovery

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from frontkit.parser import TokenParser, ParseResult, ParseAbort
from tests.calculator import (
    CalcParser, RecoveringCalcParser, CalcToken, Number, Add, Subtract, scan, parse
)


class ProbeParser(TokenParser):
    """Runs an arbitrary function as the grammar entry point."""

    def __init__(self, tokens, rule=None):
        super().__init__(tokens)
        self.rule = rule or (lambda parser: None)

    def parse_root(self):
        return self.rule(self)


def probe(source, rule=None):
    return ProbeParser(scan(source).tokens, rule)


class TestParseResult(unittest.TestCase):
    """parse() always returns a well-formed result."""

    def test_successful_parse(self):
        result = parse("1+2")

        self.assertIsInstance(result, ParseResult)
        self.assertEqual(result.ast, Add(Number(1), Number(2)))
        self.assertFalse(result.has_errors())

    def test_nested_expression(self):
        result = parse("10 - (2 + 3)")

        self.assertEqual(result.ast, Subtract(Number(10), Add(Number(2), Number(3))))

    def test_missing_token_aborts(self):
        tokens = scan("1+").tokens
        result = CalcParser(tokens).parse()

        self.assertIsNone(result.ast)
        self.assertEqual(len(result.errors), 1)
        self.assertIs(result.errors[0].token, tokens[-1])
        self.assertEqual(result.errors[0].message, "Expected Number.")

    def test_abort_inside_nested_rule(self):
        tokens = scan("(1 + 2 3").tokens
        result = CalcParser(tokens).parse()

        self.assertIsNone(result.ast)
        self.assertEqual(len(result.errors), 1)
        self.assertEqual(result.errors[0].token, tokens[4])
        self.assertEqual(result.errors[0].token.lexeme, "3")

    def test_empty_token_sequence(self):
        result = parse("")

        self.assertIsNone(result.ast)
        self.assertTrue(result.errors[0].token.is_end)

    def test_abort_without_recorded_error(self):
        def rule(parser):
            raise ParseAbort()

        result = probe("1", rule).parse()

        self.assertIsNone(result.ast)
        self.assertEqual(len(result.errors), 1)
        self.assertEqual(result.errors[0].code, "P002")

    def test_other_exceptions_propagate(self):
        def rule(parser):
            raise KeyError("grammar bug")

        with self.assertRaises(KeyError):
            probe("1", rule).parse()

    def test_ast_absent_iff_errors_for_panic_mode_grammar(self):
        for source in ["1", "1+2", "1+", "+", "(1", "1 2", "((3))-4", ")"]:
            result = parse(source)
            self.assertEqual(result.ast is None, result.has_errors(), source)

    def test_parse_twice_gives_same_result(self):
        parser = CalcParser(scan("1 + + 2").tokens)

        self.assertEqual(parser.parse(), parser.parse())

    def test_sequence_must_end_with_sentinel(self):
        tokens = scan("1").tokens

        with self.assertRaises(ValueError):
            CalcParser(tokens[:-1])
        with self.assertRaises(ValueError):
            CalcParser([])


class TestLookahead(unittest.TestCase):
    """Lookahead never moves the cursor and never raises."""

    def test_peek_at_start_and_end(self):
        parser = probe("1+2")

        self.assertEqual(parser.peek().lexeme, "1")
        parser.advance(10)
        self.assertTrue(parser.peek().is_end)
        self.assertTrue(parser.is_complete)

    def test_check(self):
        parser = probe("1+")

        self.assertTrue(parser.check(CalcToken.NUMBER))
        self.assertFalse(parser.check(CalcToken.PLUS))
        parser.advance(2)
        self.assertFalse(parser.check(None))

    def test_check_at_offsets(self):
        parser = probe("1+2")

        self.assertTrue(parser.check_at(1, CalcToken.PLUS))
        self.assertTrue(parser.check_at(3, None))
        self.assertFalse(parser.check_at(4, None))
        self.assertFalse(parser.check_at(10 ** 9, CalcToken.NUMBER))
        self.assertFalse(parser.check_at(-1, CalcToken.NUMBER))
        self.assertEqual(parser.current, 0)

    def test_check_skipping(self):
        parser = probe("((1")

        self.assertTrue(parser.check_skipping(CalcToken.NUMBER, CalcToken.LEFT_PAREN))
        self.assertFalse(parser.check_skipping(CalcToken.NUMBER))
        self.assertFalse(parser.check_skipping(CalcToken.PLUS, CalcToken.LEFT_PAREN))
        self.assertTrue(parser.check_skipping(
            None, CalcToken.LEFT_PAREN, CalcToken.NUMBER))
        self.assertEqual(parser.current, 0)

    def test_check_repeated(self):
        parser = probe("((1")

        self.assertTrue(parser.check_repeated(CalcToken.LEFT_PAREN, 2))
        self.assertFalse(parser.check_repeated(CalcToken.LEFT_PAREN, 3))
        self.assertTrue(parser.check_repeated(CalcToken.NUMBER, 0))
        self.assertFalse(parser.check_repeated(CalcToken.LEFT_PAREN, 50))

    def test_check_sequential(self):
        parser = probe("1+2")

        self.assertTrue(parser.check_sequential(CalcToken.NUMBER, CalcToken.PLUS))
        self.assertTrue(parser.check_sequential(
            CalcToken.NUMBER, CalcToken.PLUS, CalcToken.NUMBER, None))
        self.assertFalse(parser.check_sequential(CalcToken.NUMBER, CalcToken.MINUS))
        self.assertFalse(parser.check_sequential(
            CalcToken.NUMBER, CalcToken.PLUS, CalcToken.NUMBER, None, None))

    def test_get_next_offset(self):
        parser = probe("1+2-3")

        self.assertEqual(parser.get_next_offset(CalcToken.MINUS), 3)
        self.assertEqual(parser.get_next_offset(CalcToken.NUMBER), 0)
        self.assertIsNone(parser.get_next_offset(CalcToken.LEFT_PAREN))

    def test_lookahead_records_no_errors(self):
        def rule(parser):
            parser.check(CalcToken.MINUS)
            parser.check_at(99, CalcToken.MINUS)
            parser.check_skipping(CalcToken.MINUS, CalcToken.NUMBER)
            parser.check_sequential(CalcToken.MINUS)
            return "done"

        result = probe("1", rule).parse()

        self.assertEqual(result.ast, "done")
        self.assertFalse(result.has_errors())


class TestConsumption(unittest.TestCase):
    """match, consume, advance, skip and previous."""

    def test_match_any_of_several_kinds(self):
        parser = probe("-1")

        self.assertFalse(parser.match(CalcToken.PLUS, CalcToken.NUMBER))
        self.assertTrue(parser.match(CalcToken.PLUS, CalcToken.MINUS))
        self.assertEqual(parser.current, 1)
        self.assertFalse(parser.match(None))

    def test_consume_returns_token(self):
        parser = probe("1")

        token = parser.consume(CalcToken.NUMBER, "Expected Number.")
        self.assertEqual(token.literal, 1)
        self.assertTrue(parser.is_complete)

    def test_consume_failure_raises_abort(self):
        parser = probe("+")

        with self.assertRaises(ParseAbort):
            parser.consume(CalcToken.NUMBER, "Expected Number.")
        self.assertEqual(parser.current, 0)

    def test_advance_stops_at_sentinel(self):
        parser = probe("1+2")

        self.assertEqual(parser.advance().lexeme, "1")
        self.assertEqual(parser.advance(2).lexeme, "2")
        self.assertEqual(parser.current, 3)
        self.assertEqual(parser.advance().lexeme, "2")
        self.assertEqual(parser.current, 3)

    def test_advance_on_empty_sequence(self):
        parser = probe("")

        self.assertTrue(parser.advance().is_end)
        self.assertEqual(parser.current, 0)

    def test_previous(self):
        parser = probe("1+")

        self.assertFalse(parser.has_previous())
        with self.assertRaises(IndexError):
            parser.previous()
        parser.advance()
        self.assertTrue(parser.has_previous())
        self.assertEqual(parser.previous().lexeme, "1")

    def test_skip(self):
        parser = probe("((1")

        parser.skip(CalcToken.LEFT_PAREN)
        self.assertTrue(parser.check(CalcToken.NUMBER))

    def test_skip_without_matches_is_a_no_op(self):
        def rule(parser):
            parser.skip(CalcToken.MINUS, CalcToken.PLUS)
            return parser.current

        result = probe("1", rule).parse()

        self.assertEqual(result.ast, 0)
        self.assertFalse(result.has_errors())

    def test_skip_stops_at_sentinel(self):
        parser = probe("1 2 3")

        parser.skip(CalcToken.NUMBER)
        self.assertTrue(parser.is_complete)

    def test_skip_until(self):
        parser = probe("1 + ) 2 - 3")

        parser.skip_until(CalcToken.MINUS)
        self.assertTrue(parser.check(CalcToken.MINUS))
        parser.skip_until(CalcToken.LEFT_PAREN)
        self.assertTrue(parser.is_complete)


class TestManualRecovery(unittest.TestCase):
    """Soft errors keep the parse going."""

    def test_soft_errors_keep_ast(self):
        tokens = scan(") 1 + 2 ) ) 3").tokens
        result = RecoveringCalcParser(tokens).parse()

        self.assertEqual(result.ast, [Add(Number(1), Number(2)), Number(3)])
        self.assertEqual(len(result.errors), 2)
        self.assertEqual([e.token for e in result.errors], [tokens[0], tokens[4]])

    def test_abort_after_soft_error_keeps_all_errors(self):
        tokens = scan(") 1 +").tokens
        result = RecoveringCalcParser(tokens).parse()

        self.assertIsNone(result.ast)
        self.assertEqual([e.message for e in result.errors],
                         ["Expected expression.", "Expected Number."])

    def test_error_returns_abort_signal(self):
        def rule(parser):
            signal = parser.error(parser.peek(), "Not allowed here.")
            self.assertIsInstance(signal, ParseAbort)
            return "kept"

        result = probe("1", rule).parse()

        self.assertEqual(result.ast, "kept")
        self.assertEqual(result.errors[0].message, "Not allowed here.")


if __name__ == '__main__':
    unittest.main()
