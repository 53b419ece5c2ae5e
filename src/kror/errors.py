"""Error types with formatted source context."""

from __future__ import annotations

from enum import Enum

from kror.tokens import Position


class LexErrorKind(Enum):
    NUMBER_OVERFLOW = "number overflow"
    UNSUPPORTED_LITERAL_BIT = "unsupported literal bit"
    UNRECOGNIZED_CHARACTER = "unrecognized character"


class LexError(Exception):
    """Raised on the first lexing error, with kind, position and source context.

    Scanning stops at the first error; no token is produced for the
    offending input and nothing after it is scanned.
    """

    def __init__(
        self, kind: LexErrorKind, message: str, position: Position, source: str
    ) -> None:
        self.kind = kind
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "input.kror") -> str:
        lines = self.source.split("\n")
        line_idx = self.position.line - 1
        col = self.position.column

        # Lines are split the same way the cursor splits them
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error[{self.kind.name.lower()}]: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )
