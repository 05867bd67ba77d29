"""Go syntax tree node definitions.

A structural tree over Go source: brackets are matched into groups, group
bodies are split into statements, selector expressions and calls are folded
out of the token stream, and simple assignments are recognized. Everything
else stays as a flat sequence of leaf elements. This is the level of detail
needed to find which identifier a factory call is bound to and which string
literals are passed to that identifier.

Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from i18nmerge.enums import TokenKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    # Leaves
    "Ident",
    "BasicLit",
    "Keyword",
    "Operator",
    # Expressions
    "SelectorExpr",
    "CallExpr",
    "Group",
    "Expr",
    # Statements
    "Stmt",
    "AssignStmt",
    # File
    "File",
    # Type aliases
    "Element",
    "Statement",
    "ASTNode",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)

    Example:
        Source: 't := i18n.MustTfunc("en-US")'
        Ident "t" span: Span(start=0, end=1)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


# ============================================================================
# LEAVES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Ident:
    """Identifier: letter { letter | unicode_digit }"""

    name: str
    span: Span

    @staticmethod
    def guard(node: object) -> TypeIs["Ident"]:
        """Type guard for Ident."""
        return isinstance(node, Ident)


@dataclass(frozen=True, slots=True)
class BasicLit:
    """Literal of basic type, kept as written in the source.

    Attributes:
        kind: INT, FLOAT, IMAG, CHAR or STRING
        value: Literal source text, quotes included ('"hello"', '`raw`', "42")
        span: Source position
    """

    kind: TokenKind
    value: str
    span: Span

    @staticmethod
    def guard(node: object) -> TypeIs["BasicLit"]:
        """Type guard for BasicLit."""
        return isinstance(node, BasicLit)

    @property
    def is_string(self) -> bool:
        """True for interpreted and raw string literals."""
        return self.kind is TokenKind.STRING


@dataclass(frozen=True, slots=True)
class Keyword:
    """One of the 25 reserved words."""

    name: str
    span: Span


@dataclass(frozen=True, slots=True)
class Operator:
    """Operator or punctuation token other than brackets and separators."""

    value: str
    span: Span


# ============================================================================
# EXPRESSIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class SelectorExpr:
    """Selector: x.sel (package-qualified name or field/method access)."""

    x: "Element"
    sel: Ident
    span: Span

    @staticmethod
    def guard(node: object) -> TypeIs["SelectorExpr"]:
        """Type guard for SelectorExpr."""
        return isinstance(node, SelectorExpr)


@dataclass(frozen=True, slots=True)
class CallExpr:
    """Call: fun(args...).

    Attributes:
        fun: Callee (identifier, selector, call result or parenthesized group)
        args: Comma-separated argument expressions, in source order
        span: Source position from callee start to closing parenthesis
    """

    fun: "Element"
    args: tuple["Expr", ...]
    span: Span

    @staticmethod
    def guard(node: object) -> TypeIs["CallExpr"]:
        """Type guard for CallExpr."""
        return isinstance(node, CallExpr)


@dataclass(frozen=True, slots=True)
class Group:
    """Bracketed region: (...), [...] or {...}.

    Attributes:
        delimiter: Opening bracket character
        body: Statements split on ';' inside the brackets
        span: Source position including both brackets
    """

    delimiter: str
    body: tuple["Statement", ...]
    span: Span


@dataclass(frozen=True, slots=True)
class Expr:
    """Sequence of elements between separators.

    An expression that consists of exactly one element is that element;
    see `single`.
    """

    elements: tuple["Element", ...]
    span: Span

    @property
    def single(self) -> "Element | None":
        """The only element, or None when the expression has zero or many."""
        if len(self.elements) == 1:
            return self.elements[0]
        return None


# ============================================================================
# STATEMENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Stmt:
    """Statement or declaration not recognized as an assignment."""

    elements: tuple["Element", ...]
    span: Span


@dataclass(frozen=True, slots=True)
class AssignStmt:
    """Assignment or short variable declaration: lhs tok rhs.

    Attributes:
        lhs: Left-hand expressions
        tok: Assignment operator ("=", ":=", "+=", ...)
        rhs: Right-hand expressions
        span: Source position of the whole statement
    """

    lhs: tuple[Expr, ...]
    tok: str
    rhs: tuple[Expr, ...]
    span: Span

    @staticmethod
    def guard(node: object) -> TypeIs["AssignStmt"]:
        """Type guard for AssignStmt."""
        return isinstance(node, AssignStmt)


# ============================================================================
# FILE
# ============================================================================


@dataclass(frozen=True, slots=True)
class File:
    """Root node for one source file.

    Attributes:
        name: File name used in diagnostics
        package: Package clause identifier
        body: Top-level declarations after the package clause
        span: Whole file
    """

    name: str
    package: Ident
    body: tuple["Statement", ...]
    span: Span


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Element = Ident | BasicLit | Keyword | Operator | SelectorExpr | CallExpr | Group
type Statement = Stmt | AssignStmt

type ASTNode = (
    File
    | Stmt
    | AssignStmt
    | Expr
    | Group
    | CallExpr
    | SelectorExpr
    | Ident
    | BasicLit
    | Keyword
    | Operator
    | Span
)
