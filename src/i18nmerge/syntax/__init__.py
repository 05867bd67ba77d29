"""Go syntax package.

Provides the lexer, the structural parser, syntax tree definitions and the
visitor used by the sift layer.

Python 3.13+.
"""

from .ast import (
    AssignStmt,
    ASTNode,
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
from .cursor import Cursor, LineOffsetCache
from .lexer import KEYWORDS, Token, tokenize
from .parser import parse_file
from .visitor import ASTVisitor

__all__ = [
    "KEYWORDS",
    "ASTNode",
    "ASTVisitor",
    "AssignStmt",
    "BasicLit",
    "CallExpr",
    "Cursor",
    "Element",
    "Expr",
    "File",
    "Group",
    "Ident",
    "Keyword",
    "LineOffsetCache",
    "Operator",
    "SelectorExpr",
    "Span",
    "Statement",
    "Stmt",
    "Token",
    "parse_file",
    "tokenize",
]
