"""Structural Go parser.

Builds the syntax tree defined in `ast` from the token stream:

1. The file must open with a package clause.
2. Brackets are matched into `Group` nodes; a missing or mismatched closer
   is a syntax error, and so is nesting deeper than MAX_NESTING.
3. Group bodies are split on ';' (explicit or inserted) into statements.
4. Within each statement, selectors (`x.Name`) and calls (`f(...)`) are
   folded left to right, so `i18n.MustTfunc("en")(id)` becomes a call whose
   callee is a call whose callee is a selector.
5. Inside blocks and at top level, statements whose first top-level
   operator is an assignment become `AssignStmt`, after clause headers
   (`case x:`), labels and a leading if/for/switch keyword are split off.

Declarations (`var`, `const`) and `range` clauses are never assignments.

Python 3.13+. Zero external dependencies.
"""

from typing import cast

from i18nmerge.constants import MAX_NESTING
from i18nmerge.diagnostics import ErrorTemplate, GoSyntaxError
from i18nmerge.enums import TokenKind

from .ast import (
    AssignStmt,
    BasicLit,
    CallExpr,
    Element,
    Expr,
    File,
    Group,
    Ident,
    Keyword,
    Operator,
    SelectorExpr,
    Span,
    Statement,
    Stmt,
)
from .cursor import LineOffsetCache
from .lexer import Token, tokenize

__all__ = ["parse_file"]

_ASSIGN_OPERATORS = frozenset({
    "=", ":=", "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "<<=", ">>=", "&^=",
})

_BRACKETS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_BRACKETS.values())

# Keywords that may open a simple statement: `if x := f(); x {`.
_CONTROL_KEYWORDS = frozenset({"if", "for", "switch"})

_LITERAL_KINDS = frozenset({
    TokenKind.INT, TokenKind.FLOAT, TokenKind.IMAG, TokenKind.CHAR, TokenKind.STRING,
})

type _Row = list[Element]


def _span_of(elements: list[Element] | tuple[Element, ...]) -> Span:
    return Span(elements[0].span.start, elements[-1].span.end)


def _is_keyword(element: Element | None, name: str) -> bool:
    return isinstance(element, Keyword) and element.name == name


def _is_operator(element: Element | None, value: str) -> bool:
    return isinstance(element, Operator) and element.value == value


def _describe(token: Token) -> str:
    if token.kind is TokenKind.EOF:
        return "'EOF'"
    if token.kind is TokenKind.OPERATOR and token.value == ";" and token.start == token.end:
        return "newline"
    return f"'{token.value}'"


def _leaf(token: Token) -> Element:
    span = Span(token.start, token.end)
    if token.kind is TokenKind.IDENT:
        return Ident(token.value, span)
    if token.kind is TokenKind.KEYWORD:
        return Keyword(token.value, span)
    if token.kind in _LITERAL_KINDS:
        return BasicLit(token.kind, token.value, span)
    return Operator(token.value, span)


class _Parser:
    """Single-use parser over one file's token sequence."""

    __slots__ = ("_index", "_lines", "_name", "_source", "_tokens")

    def __init__(self, source: str, name: str) -> None:
        self._source = source
        self._name = name
        self._tokens = tokenize(source)
        self._index = 0
        self._lines = LineOffsetCache(source)

    def _error(self, message: str, pos: int) -> GoSyntaxError:
        line, column = self._lines.get_line_col(pos)
        return GoSyntaxError(
            ErrorTemplate.go_syntax(message, pos, line, column), line=line, column=column
        )

    def _next(self) -> Token:
        token = self._tokens[self._index]
        # EOF is sticky: never step past the last token.
        if token.kind is not TokenKind.EOF:
            self._index += 1
        return token

    def parse(self) -> File:
        keyword = self._next()
        if keyword.kind is not TokenKind.KEYWORD or keyword.value != "package":
            raise self._error(f"expected 'package', found {_describe(keyword)}", keyword.start)
        name = self._next()
        if name.kind is not TokenKind.IDENT:
            raise self._error(f"expected package name, found {_describe(name)}", name.start)
        package = Ident(name.value, Span(name.start, name.end))

        rows, _ = self._read_rows(None, 0)
        body = self._build_statements(rows, block=True)
        return File(self._name, package, body, Span(0, len(self._source)))

    # ------------------------------------------------------------------------
    # Bracket matching
    # ------------------------------------------------------------------------

    def _read_rows(self, opener: Token | None, depth: int) -> tuple[list[_Row], int]:
        """Read elements up to the matching closer, split into rows on ';'.

        Returns:
            (rows, end offset past the closer or at EOF)
        """
        closer = _BRACKETS[opener.value] if opener is not None else None
        rows: list[_Row] = [[]]
        while True:
            token = self._next()
            if token.kind is TokenKind.EOF:
                if closer is None:
                    return rows, token.start
                raise self._error(f"expected '{closer}', found 'EOF'", token.start)
            if token.kind is TokenKind.OPERATOR:
                if token.value == ";":
                    rows.append([])
                    continue
                if token.value in _BRACKETS:
                    rows[-1].append(self._group(token, depth + 1))
                    continue
                if token.value in _CLOSERS:
                    if token.value == closer:
                        return rows, token.end
                    if closer is None:
                        raise self._error(f"unexpected '{token.value}'", token.start)
                    raise self._error(
                        f"expected '{closer}', found '{token.value}'", token.start
                    )
            rows[-1].append(_leaf(token))

    def _group(self, opener: Token, depth: int) -> Group:
        if depth > MAX_NESTING:
            line, column = self._lines.get_line_col(opener.start)
            raise GoSyntaxError(
                ErrorTemplate.nesting_depth_exceeded(MAX_NESTING, opener.start, line, column),
                line=line,
                column=column,
            )
        rows, end = self._read_rows(opener, depth)
        body = self._build_statements(rows, block=opener.value == "{")
        return Group(opener.value, body, Span(opener.start, end))

    # ------------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------------

    def _build_statements(self, rows: list[_Row], *, block: bool) -> tuple[Statement, ...]:
        statements: list[Statement] = []
        for row in rows:
            if not row:
                continue
            elements = self._fold(row)
            if block:
                statements.extend(self._block_statements(elements))
            else:
                statements.append(Stmt(tuple(elements), _span_of(elements)))
        return tuple(statements)

    def _block_statements(self, elements: list[Element]) -> list[Statement]:
        """Split clause headers, labels and control keywords off a statement."""
        statements: list[Statement] = []
        rest = elements

        first = rest[0]
        if _is_keyword(first, "case") or _is_keyword(first, "default"):
            colon = next(
                (i for i, element in enumerate(rest) if _is_operator(element, ":")), None
            )
            if colon is not None:
                statements.append(Stmt(tuple(rest[: colon + 1]), _span_of(rest[: colon + 1])))
                rest = rest[colon + 1 :]
        elif isinstance(first, Ident) and len(rest) > 1 and _is_operator(rest[1], ":"):
            statements.append(Stmt(tuple(rest[:2]), _span_of(rest[:2])))
            rest = rest[2:]

        if rest and isinstance(rest[0], Keyword) and rest[0].name in _CONTROL_KEYWORDS:
            statements.append(Stmt((rest[0],), rest[0].span))
            rest = rest[1:]

        if rest:
            statements.append(self._simple_statement(rest))
        return statements

    def _simple_statement(self, elements: list[Element]) -> Statement:
        span = _span_of(elements)
        for index, element in enumerate(elements):
            if isinstance(element, Operator) and element.value in _ASSIGN_OPERATORS:
                lhs, rhs = elements[:index], elements[index + 1 :]
                if (
                    lhs
                    and rhs
                    and not any(isinstance(part, Keyword) for part in lhs)
                    and not _is_keyword(rhs[0], "range")
                ):
                    return AssignStmt(
                        self._split_list(lhs, allow_trailing=False),
                        element.value,
                        self._split_list(rhs, allow_trailing=False),
                        span,
                    )
                break
        return Stmt(tuple(elements), span)

    def _split_list(self, elements: list[Element], *, allow_trailing: bool) -> tuple[Expr, ...]:
        """Split elements on top-level commas into expressions."""
        expressions: list[Expr] = []
        current: list[Element] = []
        for element in elements:
            if _is_operator(element, ","):
                if not current:
                    raise self._error("expected operand, found ','", element.span.start)
                expressions.append(Expr(tuple(current), _span_of(current)))
                current = []
            else:
                current.append(element)
        if current:
            expressions.append(Expr(tuple(current), _span_of(current)))
        elif expressions and not allow_trailing:
            raise self._error("expected operand", elements[-1].span.end)
        return tuple(expressions)

    # ------------------------------------------------------------------------
    # Selectors and calls
    # ------------------------------------------------------------------------

    def _fold(self, row: _Row) -> list[Element]:
        folded: list[Element] = []
        index = 0
        while index < len(row):
            element = row[index]
            following = row[index + 1] if index + 1 < len(row) else None
            if (
                _is_operator(element, ".")
                and isinstance(following, Ident)
                and folded
                and isinstance(folded[-1], (Ident, SelectorExpr, CallExpr, Group))
            ):
                operand = folded.pop()
                folded.append(
                    SelectorExpr(operand, following, Span(operand.span.start, following.span.end))
                )
                index += 2
                continue
            if isinstance(element, Group) and element.delimiter == "(" and _is_callee(folded):
                callee = folded.pop()
                folded.append(
                    CallExpr(
                        callee,
                        self._call_arguments(element),
                        Span(callee.span.start, element.span.end),
                    )
                )
                index += 1
                continue
            folded.append(element)
            index += 1
        return folded

    def _call_arguments(self, group: Group) -> tuple[Expr, ...]:
        if not group.body:
            return ()
        if len(group.body) > 1:
            raise self._error(
                "missing ',' before newline in argument list", group.body[0].span.end
            )
        # Parenthesized bodies are never blocks, so they hold plain statements.
        statement = cast(Stmt, group.body[0])
        return self._split_list(list(statement.elements), allow_trailing=True)


def _is_callee(folded: list[Element]) -> bool:
    """Whether a '(' group after the folded elements is a call.

    Parameter lists are not calls: the group after `func`, after
    `func Name` and after `func (recv) Name`.
    """
    if not folded:
        return False
    last = folded[-1]
    if not isinstance(last, (Ident, SelectorExpr, CallExpr, Group)):
        return False
    before = folded[-2] if len(folded) >= 2 else None
    if _is_keyword(before, "func"):
        return False
    if isinstance(last, Ident) and isinstance(before, Group) and len(folded) >= 3:
        return not _is_keyword(folded[-3], "func")
    return True


def parse_file(source: str, name: str = "<source>") -> File:
    """Parse one Go source file.

    Args:
        source: File contents
        name: File name recorded on the File node

    Returns:
        Root File node

    Raises:
        GoSyntaxError: On lexical errors, a missing package clause,
            unbalanced or too deeply nested brackets and malformed
            argument lists

    Example:
        >>> tree = parse_file('package main\\nfunc main() { t("hi") }\\n')
        >>> tree.package.name
        'main'
    """
    return _Parser(source, name).parse()
