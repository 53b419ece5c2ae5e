"""Test quoted bit literals."""

import pytest

from kror.errors import LexError, LexErrorKind
from kror.tokens import BitLiteral, TokenType

from tests.conftest import assert_types, assert_values


class TestBitLiterals:
    def test_alternating(self, lex_code):
        tokens = lex_code('"_@_@"')
        assert_types(tokens, [TokenType.LITERAL])
        assert_values(tokens, [BitLiteral(bitwidth=4, value=5)])
        assert tokens[0].raw == '"_@_@"'

    def test_msb_first(self, lex_code):
        assert_values(lex_code('"@__"'), [BitLiteral(3, 4)])

    def test_all_ones(self, lex_code):
        assert_values(lex_code('"@@@@@@@@"'), [BitLiteral(8, 255)])

    def test_leading_zeros_count_in_width(self, lex_code):
        assert_values(lex_code('"___@"'), [BitLiteral(4, 1)])

    def test_empty_literal(self, lex_code):
        assert_values(lex_code('""'), [BitLiteral(0, 0)])

    def test_closing_quote_ends_literal(self, lex_code):
        tokens = lex_code('"@_";')
        assert_types(tokens, [TokenType.LITERAL, TokenType.SEMI])
        assert_values(tokens, [BitLiteral(2, 2), None])

    def test_back_to_back_literals(self, lex_code):
        tokens = lex_code('"@""_"')
        assert_types(tokens, [TokenType.LITERAL, TokenType.LITERAL])
        assert_values(tokens, [BitLiteral(1, 1), BitLiteral(1, 0)])

    def test_position(self, lex):
        tokens = lex('x = "@_";')
        lit = [t for t in tokens if t.type == TokenType.LITERAL][0]
        assert (lit.line, lit.column) == (1, 5)
        assert (lit.span.end.line, lit.span.end.column) == (1, 9)

    def test_thirty_two_bits(self, lex_code):
        assert_values(lex_code('"' + "@" * 32 + '"'), [BitLiteral(32, 0xFFFFFFFF)])


class TestUnterminated:
    def test_other_character_stops_run_unconsumed(self, lex_code):
        tokens = lex_code('"@@;')
        assert_types(tokens, [TokenType.LITERAL, TokenType.SEMI])
        assert_values(tokens, [BitLiteral(2, 3), None])
        assert tokens[0].raw == '"@@'

    def test_terminator_stops_run(self, lex):
        tokens = lex('"@_')
        assert_types(tokens, [TokenType.LITERAL, TokenType.WHITESPACE])
        assert tokens[0].value == BitLiteral(2, 2)

    def test_quote_after_other_chars_opens_new_literal(self, lex_code):
        tokens = lex_code('"@ x"_"')
        assert_types(tokens, [TokenType.LITERAL, TokenType.IDENT, TokenType.LITERAL])
        assert_values(tokens, [BitLiteral(1, 1), "x", BitLiteral(1, 0)])


class TestLiteralErrors:
    def test_question_mark_bit(self, lex):
        with pytest.raises(LexError) as exc_info:
            lex('"@?_"')
        err = exc_info.value
        assert err.kind is LexErrorKind.UNSUPPORTED_LITERAL_BIT
        assert (err.position.line, err.position.column) == (1, 3)

    def test_wide_literal_overflows(self, lex):
        with pytest.raises(LexError) as exc_info:
            lex('"@' + "_" * 32 + '"')
        assert exc_info.value.kind is LexErrorKind.NUMBER_OVERFLOW

    def test_wide_zero_literal_fits(self, lex_code):
        assert_values(lex_code('"' + "_" * 40 + '"'), [BitLiteral(40, 0)])
