"""Human-readable and JSON renderings of a token stream."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from typing import Any, TextIO

from kror.tokens import BitLiteral, ReservedKind, Token, TokenType


def kind_name(tt: TokenType) -> str:
    """CamelCase name of a token type, e.g. OPEN_PAREN -> OpenParen."""
    return "".join(part.capitalize() for part in tt.name.split("_"))


def format_kind(tok: Token) -> str:
    name = kind_name(tok.type)
    value = tok.value
    if isinstance(value, BitLiteral):
        return f"{name} {{ bitwidth: {value.bitwidth}, value: {value.value} }}"
    if isinstance(value, ReservedKind):
        return f"{name}({value.name.capitalize()})"
    if isinstance(value, str):
        return f"{name}({json.dumps(value)})"
    if isinstance(value, int):
        return f"{name}({value})"
    return name


def format_token(tok: Token) -> str:
    """Render a token as ``(line, column, Kind)``."""
    return f"({tok.line}, {tok.column}, {format_kind(tok)})"


def token_to_dict(tok: Token) -> dict[str, Any]:
    value: Any = tok.value
    if isinstance(value, BitLiteral):
        value = {"bitwidth": value.bitwidth, "value": value.value}
    elif isinstance(value, ReservedKind):
        value = value.value
    return {
        "line": tok.line,
        "column": tok.column,
        "kind": tok.type.name,
        "value": value,
        "raw": tok.raw,
    }


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stdout) -> int:
    """Write one formatted token per line to *file*; return the count."""
    count = 0
    for tok in tokens:
        file.write(format_token(tok) + "\n")
        count += 1
    return count


def dump_tokens_json(tokens: Iterable[Token], *, file: TextIO = sys.stdout) -> int:
    """Write the tokens as a JSON array to *file*; return the count."""
    items = [token_to_dict(tok) for tok in tokens]
    json.dump(items, file, indent=2)
    file.write("\n")
    return len(items)
