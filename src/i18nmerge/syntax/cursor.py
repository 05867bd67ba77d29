"""Source positions for the Go lexer and parser.

`Cursor` is a frozen (source, offset) pair: the lexer moves through a file
by replacing its cursor, never by mutating it, so a failed scan cannot
leave a half-advanced position behind. End of input is a state (`is_eof`),
not a sentinel character.

`LineOffsetCache` answers offset -> (line, column) questions for the
parser, which reports errors at token offsets long after the text was
scanned.

Lines end at LF. A CR before the LF is part of the preceding line, and a
lone CR does not end a line (gofmt never writes one).

Python 3.13+. Zero external dependencies.
"""

from bisect import bisect_right
from dataclasses import dataclass

__all__ = ["Cursor", "LineOffsetCache"]


def _line_col(source: str, pos: int) -> tuple[int, int]:
    line_start = source.rfind("\n", 0, pos) + 1
    return source.count("\n", 0, pos) + 1, pos - line_start + 1


@dataclass(frozen=True, slots=True)
class Cursor:
    """Read position in one source file.

    Example:
        >>> cursor = Cursor('t("id")', 0)
        >>> cursor.current
        't'
        >>> cursor.advance().current
        '('
        >>> cursor.jump(cursor.find(")")).current
        ')'
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character under the cursor.

        Raises:
            EOFError: At end of input; check is_eof first
        """
        if self.is_eof:
            msg = f"no character at offset {self.pos}: end of input"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character `offset` places ahead, or None past the end."""
        index = self.pos + offset
        return self.source[index] if index < len(self.source) else None

    def advance(self, count: int = 1) -> "Cursor":
        """Cursor `count` characters further on, stopping at end of input."""
        return Cursor(self.source, min(self.pos + count, len(self.source)))

    def jump(self, pos: int) -> "Cursor":
        """Cursor at an absolute offset in the same source."""
        return Cursor(self.source, min(pos, len(self.source)))

    def startswith(self, prefix: str | tuple[str, ...]) -> bool:
        return self.source.startswith(prefix, self.pos)

    def find(self, text: str, offset: int = 0) -> int:
        """Absolute offset of the next `text` at or after pos + offset, or -1."""
        return self.source.find(text, self.pos + offset)

    def line_col(self) -> tuple[int, int]:
        """1-based (line, column) of the cursor.

        Rescans the source up to the cursor; the lexer only calls it when
        reporting an error.

        Example:
            >>> Cursor("package main\\nfunc", 15).line_col()
            (2, 3)
        """
        return _line_col(self.source, self.pos)


class LineOffsetCache:
    """Start offsets of every line in a source, for repeated lookups.

    Example:
        >>> lines = LineOffsetCache("package main\\n\\nfunc main() {}")
        >>> lines.get_line_col(14)
        (3, 1)
    """

    __slots__ = ("_length", "_starts")

    def __init__(self, source: str) -> None:
        starts = [0]
        index = source.find("\n")
        while index >= 0:
            starts.append(index + 1)
            index = source.find("\n", index + 1)
        self._starts: tuple[int, ...] = tuple(starts)
        self._length = len(source)

    @property
    def line_count(self) -> int:
        return len(self._starts)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """1-based (line, column) of an offset, clamped into the source."""
        pos = max(0, min(pos, self._length))
        line = bisect_right(self._starts, pos)
        return line, pos - self._starts[line - 1] + 1
