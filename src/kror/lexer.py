"""kror lexer: converts source text into a flat, position-tagged token stream."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from enum import Enum, auto

from kror.cursor import Cursor
from kror.errors import LexError, LexErrorKind
from kror.tokens import (
    PUNCTUATORS,
    U32_MAX,
    BitLiteral,
    Position,
    PositionedChar,
    Span,
    Token,
    TokenType,
    detect_reserved,
    is_digit,
    is_ident_char,
    is_ident_start,
    is_whitespace,
)

logger = logging.getLogger(__name__)


class _BitClass(Enum):
    ZERO = auto()  # _
    ONE = auto()  # @
    TERMINATOR = auto()  # closing "
    INVALID = auto()  # ? (don't-care bits are not supported)
    STOP = auto()  # anything else ends the literal unconsumed


def _classify_bit(ch: str) -> _BitClass:
    if ch == "_":
        return _BitClass.ZERO
    if ch == "@":
        return _BitClass.ONE
    if ch == '"':
        return _BitClass.TERMINATOR
    if ch == "?":
        return _BitClass.INVALID
    return _BitClass.STOP


def scan(cursor: Cursor) -> Token | None:
    """Scan exactly one token from *cursor*, or return None at end of input.

    Raises LexError on the first character that cannot start or continue
    a valid token. An unsupported literal bit is left unconsumed on the
    cursor; for the other errors the offending input has been consumed.
    """
    first = cursor.next()
    if first is None:
        return None

    ch = first.char

    if is_whitespace(ch):
        return _scan_whitespace(cursor, first)

    if ch == "/":
        return _scan_slash(cursor, first)

    if ch in PUNCTUATORS:
        return _emit(cursor, first, PUNCTUATORS[ch], None, ch)

    if is_ident_start(ch):
        return _scan_word(cursor, first)

    if is_digit(ch):
        return _scan_number(cursor, first)

    if ch == '"':
        return _scan_literal(cursor, first)

    raise _error(
        cursor,
        LexErrorKind.UNRECOGNIZED_CHARACTER,
        f"unrecognized character {ch!r}",
        first.position,
    )


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _emit(
    cursor: Cursor, first: PositionedChar, tt: TokenType, value: object, raw: str
) -> Token:
    return Token(tt, value, raw, Span(first.position, cursor.position()))


def _error(cursor: Cursor, kind: LexErrorKind, message: str, pos: Position) -> LexError:
    return LexError(kind, message, pos, cursor.source)


def _collect(cursor: Cursor, first: PositionedChar, keep: Callable[[str], bool]) -> str:
    """Skip while *keep* holds, returning the first char plus everything skipped."""
    chars = [first.char]

    def take(c: str) -> bool:
        if keep(c):
            chars.append(c)
            return True
        return False

    cursor.skip(take)
    return "".join(chars)


# ------------------------------------------------------------------
# Token classes
# ------------------------------------------------------------------


def _scan_whitespace(cursor: Cursor, first: PositionedChar) -> Token:
    text = _collect(cursor, first, is_whitespace)
    return _emit(cursor, first, TokenType.WHITESPACE, None, text)


def _scan_slash(cursor: Cursor, first: PositionedChar) -> Token:
    if not cursor.consume("/"):
        return _emit(cursor, first, TokenType.SLASH, None, "/")
    # The line terminator is left for the next call to pick up as whitespace.
    body = []

    def in_comment(c: str) -> bool:
        if c == "\n":
            return False
        body.append(c)
        return True

    cursor.skip(in_comment)
    return _emit(cursor, first, TokenType.COMMENT, None, "//" + "".join(body))


def _scan_word(cursor: Cursor, first: PositionedChar) -> Token:
    word = _collect(cursor, first, is_ident_char)
    reserved = detect_reserved(word)
    if reserved is not None:
        return _emit(cursor, first, TokenType.RESERVED, reserved, word)
    return _emit(cursor, first, TokenType.IDENT, word, word)


def _scan_number(cursor: Cursor, first: PositionedChar) -> Token:
    digits = _collect(cursor, first, is_digit)
    value = int(digits)
    if value > U32_MAX:
        raise _error(
            cursor,
            LexErrorKind.NUMBER_OVERFLOW,
            f"number {digits} does not fit in 32 bits",
            first.position,
        )
    return _emit(cursor, first, TokenType.NUMBER, value, digits)


def _scan_literal(cursor: Cursor, first: PositionedChar) -> Token:
    """Scan a bit literal after its opening quote.

    The run ends at a closing quote (consumed), at any character that is
    not a bit (left for the next token), or at end of input. An empty or
    unterminated literal is still a literal.
    """
    raw = [first.char]
    value = 0
    bitwidth = 0

    while True:
        pc = cursor.peek()
        if pc is None:
            break
        cls = _classify_bit(pc.char)
        if cls is _BitClass.STOP:
            break
        if cls is _BitClass.INVALID:
            raise _error(
                cursor,
                LexErrorKind.UNSUPPORTED_LITERAL_BIT,
                f"unsupported bit {pc.char!r} in literal",
                pc.position,
            )
        cursor.next()
        raw.append(pc.char)
        if cls is _BitClass.TERMINATOR:
            break
        value = (value << 1) | (1 if cls is _BitClass.ONE else 0)
        bitwidth += 1

    if value > U32_MAX:
        raise _error(
            cursor,
            LexErrorKind.NUMBER_OVERFLOW,
            f"literal value of {bitwidth} bits does not fit in 32 bits",
            first.position,
        )
    return _emit(cursor, first, TokenType.LITERAL, BitLiteral(bitwidth, value), "".join(raw))


# ------------------------------------------------------------------
# Drivers
# ------------------------------------------------------------------


class Lexer:
    """Drive ``scan`` over one cursor until the source is exhausted."""

    def __init__(self, source: str, filename: str = "input.kror") -> None:
        self._cursor = Cursor(source)
        self._filename = filename

    def __iter__(self) -> Iterator[Token]:
        count = 0
        while True:
            tok = scan(self._cursor)
            if tok is None:
                break
            count += 1
            yield tok
        logger.debug("lexed %d tokens from %s", count, self._filename)

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        return list(self)


def iter_tokens(source: str, filename: str = "input.kror") -> Iterator[Token]:
    """Lazily yield tokens from *source*; LexError surfaces when reached."""
    return iter(Lexer(source, filename))


def tokenize(source: str, filename: str = "input.kror") -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, filename).tokenize()


def without_trivia(tokens: Iterable[Token]) -> Iterator[Token]:
    """Drop WHITESPACE and COMMENT tokens."""
    return (t for t in tokens if not t.is_trivia)
