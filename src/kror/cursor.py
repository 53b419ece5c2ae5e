"""Forward-only character cursor over position-tagged source text."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from kror.tokens import Position, PositionedChar


def split_lines(source: str) -> list[str]:
    """Split *source* into lines on ``\\n``, dropping a trailing ``\\r`` per line.

    A final line terminator does not start another line, so ``"a\\n"`` is
    one line and ``""`` is none.
    """
    if not source:
        return []
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def expand_lines(source: str) -> Iterator[PositionedChar]:
    """Yield every character of *source* with its line and column.

    Each line is followed by one synthetic ``"\\n"`` at column
    ``len(line) + 1``, including the last line.
    """
    for line_num, line in enumerate(split_lines(source), start=1):
        for col, ch in enumerate(line, start=1):
            yield PositionedChar(ch, line_num, col)
        yield PositionedChar("\n", line_num, len(line) + 1)


class Cursor:
    """Single-pass reader with one character of lookahead.

    The cursor is not restartable and must be advanced from one place
    only; ``skip`` predicates may accumulate state as they go.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self._chars = expand_lines(source)
        self._lookahead: PositionedChar | None = None
        self._last: PositionedChar | None = None

    def peek(self) -> PositionedChar | None:
        """Return the next character without consuming it."""
        if self._lookahead is None:
            self._lookahead = next(self._chars, None)
        return self._lookahead

    def next(self) -> PositionedChar | None:
        """Consume and return the next character, or None when exhausted."""
        pc = self.peek()
        if pc is not None:
            self._lookahead = None
            self._last = pc
        return pc

    def consume(self, expected: str) -> bool:
        """Consume the next character only if it equals *expected*."""
        pc = self.peek()
        if pc is None or pc.char != expected:
            return False
        self.next()
        return True

    def skip(self, predicate: Callable[[str], bool]) -> None:
        """Consume characters while *predicate* holds for the next one."""
        while True:
            pc = self.peek()
            if pc is None or not predicate(pc.char):
                return
            self.next()

    def position(self) -> Position:
        """Position of the next unconsumed character.

        At exhaustion this is one column past the last character consumed,
        or (1, 1) for empty input. The last character is always a line
        terminator, so the final token of a source ends at
        ``(last_line, len(last_line) + 2)``; it never moves to a new line.
        """
        pc = self.peek()
        if pc is not None:
            return pc.position
        if self._last is not None:
            return Position(self._last.line, self._last.column + 1)
        return Position(1, 1)
