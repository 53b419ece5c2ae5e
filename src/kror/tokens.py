"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class TokenType(Enum):
    # Trivia
    COMMENT = auto()  # // to end of line
    WHITESPACE = auto()  # run of \t \n \r and space

    # Words and values
    IDENT = auto()  # [A-Za-z][A-Za-z0-9_]*
    RESERVED = auto()  # type, enum, logic
    NUMBER = auto()  # decimal, fits u32
    LITERAL = auto()  # "_@_@" bit pattern

    # Single-character punctuators
    SEMI = auto()  # ;
    COMMA = auto()  # ,
    DOT = auto()  # .
    OPEN_PAREN = auto()  # (
    CLOSE_PAREN = auto()  # )
    OPEN_BRACE = auto()  # {
    CLOSE_BRACE = auto()  # }
    OPEN_BRACKET = auto()  # [
    CLOSE_BRACKET = auto()  # ]
    AT = auto()  # @
    POUND = auto()  # #
    TILDE = auto()  # ~
    QUESTION = auto()  # ?
    COLON = auto()  # :
    DOLLAR = auto()  # $
    EQ = auto()  # =
    BANG = auto()  # !
    LT = auto()  # <
    GT = auto()  # >
    MINUS = auto()  # -
    AND = auto()  # &
    OR = auto()  # |
    PLUS = auto()  # +
    STAR = auto()  # *
    SLASH = auto()  # /
    CARET = auto()  # ^
    PERCENT = auto()  # %


class ReservedKind(Enum):
    TYPE = "type"
    ENUM = "enum"
    LOGIC = "logic"


# '/' is listed here too; the scanner checks for a comment before using it.
PUNCTUATORS: dict[str, TokenType] = {
    ";": TokenType.SEMI,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    "{": TokenType.OPEN_BRACE,
    "}": TokenType.CLOSE_BRACE,
    "[": TokenType.OPEN_BRACKET,
    "]": TokenType.CLOSE_BRACKET,
    "@": TokenType.AT,
    "#": TokenType.POUND,
    "~": TokenType.TILDE,
    "?": TokenType.QUESTION,
    ":": TokenType.COLON,
    "$": TokenType.DOLLAR,
    "=": TokenType.EQ,
    "!": TokenType.BANG,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "-": TokenType.MINUS,
    "&": TokenType.AND,
    "|": TokenType.OR,
    "+": TokenType.PLUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "^": TokenType.CARET,
    "%": TokenType.PERCENT,
}

_RESERVED_WORDS = {kind.value: kind for kind in ReservedKind}

U32_MAX = 0xFFFF_FFFF


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position (end exclusive)."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class PositionedChar:
    """One source character tagged with where it came from."""

    char: str
    line: int
    column: int

    @property
    def position(self) -> Position:
        return Position(self.line, self.column)


@dataclass(frozen=True, slots=True)
class BitLiteral:
    """Payload of a LITERAL token: bit count and MSB-first value."""

    bitwidth: int
    value: int


TokenValue = Union[str, int, ReservedKind, BitLiteral, None]


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token with its payload and original source text."""

    type: TokenType
    value: TokenValue
    raw: str
    span: Span

    @property
    def line(self) -> int:
        return self.span.start.line

    @property
    def column(self) -> int:
        return self.span.start.column

    @property
    def is_trivia(self) -> bool:
        return self.type in (TokenType.WHITESPACE, TokenType.COMMENT)


def detect_reserved(word: str) -> ReservedKind | None:
    """Return the keyword kind when *word* is exactly a reserved word."""
    return _RESERVED_WORDS.get(word)


def is_whitespace(ch: str) -> bool:
    return ch in "\t\n\r "


def is_ident_start(ch: str) -> bool:
    """Return True if ch may begin an identifier (ASCII letter)."""
    return ch.isascii() and ch.isalpha()


def is_ident_char(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return ch.isascii() and (ch.isalnum() or ch == "_")


def is_digit(ch: str) -> bool:
    return ch in "0123456789"
