"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from kror.lexer import tokenize
from kror.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token list."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def lex_code():
    """Return a helper that tokenizes source and drops whitespace/comments."""

    def _lex(source: str) -> list[Token]:
        return [t for t in tokenize(source) if not t.is_trivia]

    return _lex


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[object]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def positions(tokens: list[Token]) -> list[tuple[int, int]]:
    """Return (line, column) of each token."""
    return [(t.line, t.column) for t in tokens]
