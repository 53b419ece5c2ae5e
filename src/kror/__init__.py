"""kror hardware description language lexer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kror.tokens import Token

__version__ = "0.1.0"


def tokenize(source: str, filename: str = "input.kror") -> list[Token]:
    """Tokenize kror source text into a list of tokens, trivia included."""
    from kror.lexer import tokenize as _tokenize

    return _tokenize(source, filename)
