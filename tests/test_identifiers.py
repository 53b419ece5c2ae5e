"""Test identifier and reserved keyword lexing."""

import pytest

from kror.errors import LexError
from kror.tokens import ReservedKind, TokenType, detect_reserved, is_ident_char, is_ident_start

from tests.conftest import assert_types, assert_values


class TestCharClasses:
    def test_ident_start(self):
        assert is_ident_start("a")
        assert is_ident_start("Z")
        assert not is_ident_start("_")
        assert not is_ident_start("1")
        assert not is_ident_start("é")

    def test_ident_char(self):
        for ch in "aZ09_":
            assert is_ident_char(ch), f"Expected '{ch}' to be ident_char"
        for ch in "-.@\" é":
            assert not is_ident_char(ch), f"Expected '{ch}' to NOT be ident_char"


class TestDetectReserved:
    def test_keywords(self):
        assert detect_reserved("type") is ReservedKind.TYPE
        assert detect_reserved("enum") is ReservedKind.ENUM
        assert detect_reserved("logic") is ReservedKind.LOGIC

    def test_not_keywords(self):
        for word in ("Type", "types", "enum_", "logical", ""):
            assert detect_reserved(word) is None


class TestIdentifierLexing:
    def test_simple(self, lex_code):
        tokens = lex_code("Bus")
        assert_types(tokens, [TokenType.IDENT])
        assert_values(tokens, ["Bus"])

    def test_underscores_and_digits(self, lex_code):
        assert_values(lex_code("data_in0"), ["data_in0"])

    def test_stops_at_punctuator(self, lex_code):
        tokens = lex_code("a.b")
        assert_types(tokens, [TokenType.IDENT, TokenType.DOT, TokenType.IDENT])
        assert_values(tokens, ["a", None, "b"])

    def test_leading_underscore_is_not_ident(self, lex_code):
        with pytest.raises(LexError):
            lex_code("_x")


class TestReserved:
    @pytest.mark.parametrize(
        "word,kind",
        [("type", ReservedKind.TYPE), ("enum", ReservedKind.ENUM), ("logic", ReservedKind.LOGIC)],
    )
    def test_keyword(self, lex_code, word, kind):
        tokens = lex_code(word)
        assert_types(tokens, [TokenType.RESERVED])
        assert_values(tokens, [kind])
        assert tokens[0].raw == word

    @pytest.mark.parametrize("word", ["type2", "types", "enum_x", "Logic", "TYPE"])
    def test_near_miss_is_ident(self, lex_code, word):
        tokens = lex_code(word)
        assert_types(tokens, [TokenType.IDENT])
        assert_values(tokens, [word])

    def test_declaration(self, lex_code):
        tokens = lex_code("type Bus = logic[8];")
        assert_types(
            tokens,
            [
                TokenType.RESERVED,
                TokenType.IDENT,
                TokenType.EQ,
                TokenType.RESERVED,
                TokenType.OPEN_BRACKET,
                TokenType.NUMBER,
                TokenType.CLOSE_BRACKET,
                TokenType.SEMI,
            ],
        )
