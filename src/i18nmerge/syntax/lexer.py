"""Go lexical scanner.

Turns Go source text into a flat token sequence following the lexical
grammar of the Go specification:

- identifiers and the 25 keywords
- operators and punctuation (longest match)
- integer, floating-point, imaginary, rune and string literals
  (interpreted and raw), each kept as its original source text
- line and general comments (dropped)
- automatic semicolon insertion at line ends and at EOF

Literal validation is limited to what can make the token stream ambiguous:
unterminated literals and comments, newlines inside interpreted strings and
runes, and characters that start no token. Escape sequences and digit
separators are accepted as written.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from i18nmerge.diagnostics import ErrorTemplate, GoSyntaxError
from i18nmerge.enums import TokenKind

from .cursor import Cursor

__all__ = ["KEYWORDS", "Token", "tokenize"]

KEYWORDS: frozenset[str] = frozenset({
    "break", "case", "chan", "const", "continue", "default", "defer",
    "else", "fallthrough", "for", "func", "go", "goto", "if", "import",
    "interface", "map", "package", "range", "return", "select", "struct",
    "switch", "type", "var",
})

# Longest first, so the first prefix match is the longest match.
_OPERATORS: tuple[str, ...] = (
    "<<=", ">>=", "&^=", "...",
    "&&", "||", "<-", "++", "--", "==", "!=", "<=", ">=", ":=",
    "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "<<", ">>", "&^",
    "+", "-", "*", "/", "%", "&", "|", "^", "<", ">", "=", "!", "~",
    "(", ")", "[", "]", "{", "}", ",", ";", ".", ":",
)

# A line break after one of these tokens ends the statement.
_SEMICOLON_KINDS = frozenset({
    TokenKind.IDENT, TokenKind.INT, TokenKind.FLOAT, TokenKind.IMAG,
    TokenKind.CHAR, TokenKind.STRING,
})
_SEMICOLON_KEYWORDS = frozenset({"break", "continue", "fallthrough", "return"})
_SEMICOLON_OPERATORS = frozenset({"++", "--", ")", "]", "}"})

_ASCII_DIGITS = "0123456789"


@dataclass(frozen=True, slots=True)
class Token:
    """Lexical token.

    Attributes:
        kind: Token class
        value: Source text of the token (";" for inserted semicolons)
        start: Offset of the first character
        end: Offset past the last character (== start for inserted semicolons)
    """

    kind: TokenKind
    value: str
    start: int
    end: int


def _is_letter(char: str) -> bool:
    return char == "_" or char.isalpha()


def _is_ident_part(char: str) -> bool:
    return char == "_" or char.isalnum()


def _is_digit(char: str | None) -> bool:
    return char is not None and char in _ASCII_DIGITS


class _Lexer:
    """Single-use scanner state: the token list built so far."""

    __slots__ = ("_source", "_tokens")

    def __init__(self, source: str) -> None:
        self._source = source
        self._tokens: list[Token] = []

    def _error(self, message: str, pos: int) -> GoSyntaxError:
        line, column = Cursor(self._source, pos).line_col()
        return GoSyntaxError(
            ErrorTemplate.go_syntax(message, pos, line, column), line=line, column=column
        )

    def _emit(self, kind: TokenKind, start: int, end: int) -> None:
        self._tokens.append(Token(kind, self._source[start:end], start, end))

    def _line_break(self, pos: int) -> None:
        """Insert a semicolon if the previous token can end a statement."""
        if not self._tokens:
            return
        last = self._tokens[-1]
        if (
            last.kind in _SEMICOLON_KINDS
            or (last.kind is TokenKind.KEYWORD and last.value in _SEMICOLON_KEYWORDS)
            or (last.kind is TokenKind.OPERATOR and last.value in _SEMICOLON_OPERATORS)
        ):
            self._tokens.append(Token(TokenKind.OPERATOR, ";", pos, pos))

    def run(self) -> tuple[Token, ...]:
        source = self._source
        # A leading byte order mark is not part of the source.
        cursor = Cursor(source, 1 if source.startswith("\ufeff") else 0)

        while not cursor.is_eof:
            char = cursor.current
            if char == "\n":
                self._line_break(cursor.pos)
                cursor = cursor.advance()
            elif char in " \t\r":
                cursor = cursor.advance()
            elif cursor.startswith("//"):
                cursor = self._skip_line_comment(cursor)
            elif cursor.startswith("/*"):
                cursor = self._skip_general_comment(cursor)
            elif _is_letter(char):
                cursor = self._scan_identifier(cursor)
            elif char in _ASCII_DIGITS or (char == "." and _is_digit(cursor.peek(1))):
                cursor = self._scan_number(cursor)
            elif char == '"':
                cursor = self._scan_string(cursor)
            elif char == "`":
                cursor = self._scan_raw_string(cursor)
            elif char == "'":
                cursor = self._scan_rune(cursor)
            else:
                cursor = self._scan_operator(cursor)

        self._line_break(len(source))
        self._tokens.append(Token(TokenKind.EOF, "", len(source), len(source)))
        return tuple(self._tokens)

    def _skip_line_comment(self, cursor: Cursor) -> Cursor:
        # Stops AT the newline so the main loop sees the line break.
        end = cursor.find("\n")
        return cursor.jump(len(cursor.source) if end < 0 else end)

    def _skip_general_comment(self, cursor: Cursor) -> Cursor:
        end = cursor.find("*/", 2)
        if end < 0:
            raise self._error("comment not terminated", cursor.pos)
        # A general comment spanning lines acts like a newline.
        if "\n" in cursor.source[cursor.pos : end]:
            self._line_break(cursor.pos)
        return cursor.jump(end + 2)

    def _scan_identifier(self, cursor: Cursor) -> Cursor:
        start = cursor.pos
        cursor = cursor.advance()
        while not cursor.is_eof and _is_ident_part(cursor.current):
            cursor = cursor.advance()
        word = self._source[start : cursor.pos]
        kind = TokenKind.KEYWORD if word in KEYWORDS else TokenKind.IDENT
        self._emit(kind, start, cursor.pos)
        return cursor

    def _scan_number(self, cursor: Cursor) -> Cursor:
        start = cursor.pos
        is_hex = cursor.startswith(("0x", "0X"))
        exponent_markers = "pP" if is_hex else "eE"
        previous = ""
        while not cursor.is_eof:
            char = cursor.current
            if (char.isascii() and char.isalnum()) or char in "_.":
                pass
            elif char in "+-" and previous and previous in exponent_markers:
                pass
            else:
                break
            previous = char
            cursor = cursor.advance()

        text = self._source[start : cursor.pos].lower()
        if text.endswith("i"):
            kind = TokenKind.IMAG
        elif is_hex:
            kind = TokenKind.FLOAT if "p" in text else TokenKind.INT
        elif text.startswith(("0b", "0o")):
            kind = TokenKind.INT
        elif "." in text or "e" in text:
            kind = TokenKind.FLOAT
        else:
            kind = TokenKind.INT
        self._emit(kind, start, cursor.pos)
        return cursor

    def _scan_quoted(self, cursor: Cursor, quote: str, what: str) -> Cursor:
        """Scan an interpreted string or rune literal up to its closing quote."""
        start = cursor.pos
        cursor = cursor.advance()
        while True:
            if cursor.is_eof or cursor.current == "\n":
                raise self._error(f"{what} literal not terminated", start)
            char = cursor.current
            if char == "\\":
                if cursor.peek(1) in (None, "\n"):
                    raise self._error(f"{what} literal not terminated", start)
                cursor = cursor.advance(2)
                continue
            cursor = cursor.advance()
            if char == quote:
                return cursor

    def _scan_string(self, cursor: Cursor) -> Cursor:
        start = cursor.pos
        cursor = self._scan_quoted(cursor, '"', "string")
        self._emit(TokenKind.STRING, start, cursor.pos)
        return cursor

    def _scan_rune(self, cursor: Cursor) -> Cursor:
        start = cursor.pos
        cursor = self._scan_quoted(cursor, "'", "rune")
        if cursor.pos - start == 2:
            raise self._error("empty rune literal or unescaped ' in rune literal", start)
        self._emit(TokenKind.CHAR, start, cursor.pos)
        return cursor

    def _scan_raw_string(self, cursor: Cursor) -> Cursor:
        start = cursor.pos
        end = cursor.find("`", 1)
        if end < 0:
            raise self._error("raw string literal not terminated", start)
        self._emit(TokenKind.STRING, start, end + 1)
        return cursor.jump(end + 1)

    def _scan_operator(self, cursor: Cursor) -> Cursor:
        for operator in _OPERATORS:
            if cursor.startswith(operator):
                end = cursor.pos + len(operator)
                self._emit(TokenKind.OPERATOR, cursor.pos, end)
                return cursor.jump(end)
        raise self._error(f"invalid character {cursor.current!r}", cursor.pos)


def tokenize(source: str) -> tuple[Token, ...]:
    """Tokenize Go source text.

    Args:
        source: Complete contents of one .go file

    Returns:
        Tokens in source order, with inserted semicolons, ending in EOF

    Raises:
        GoSyntaxError: On unterminated literals or comments and on
            characters that start no token

    Example:
        >>> [t.value for t in tokenize('t("hi")\\n')]
        ['t', '(', '"hi"', ')', ';', '']
    """
    return _Lexer(source).run()
