"""Two-pass extraction of message identifiers from Go source.

Pass one (`discover_alias`) finds the local name bound to the result of the
translation-function factory:

    T := i18n.MustTfunc("en-US")

Pass two (`collect_literals`) parses every file again and gathers the string
literals passed directly to that name:

    T("program.greeting")

The passes share nothing but the alias value; each builds its own trees.

Python 3.13+.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from i18nmerge.constants import DEFAULT_FACTORY, MAX_SOURCE_SIZE
from i18nmerge.core.depth_guard import DepthLimitExceededError
from i18nmerge.diagnostics import ErrorTemplate, GoSyntaxError, ScanError
from i18nmerge.syntax import (
    AssignStmt,
    ASTNode,
    ASTVisitor,
    BasicLit,
    CallExpr,
    File,
    Ident,
    SelectorExpr,
    parse_file,
)

from .files import resolve_source_files

__all__ = [
    "ScanResult",
    "collect_literals",
    "discover_alias",
    "parse_source_file",
    "sift",
    "strip_literal_quotes",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of sifting a source tree.

    Attributes:
        files: Files scanned, in scan order
        alias: Name bound to the factory result, or None when no binding exists
        literals: String literals passed to the alias, quotes included
        identifiers: The literals with their quotes stripped
    """

    files: tuple[Path, ...]
    alias: str | None
    literals: tuple[str, ...]
    identifiers: tuple[str, ...]


def parse_source_file(path: Path) -> File:
    """Read and parse one source file.

    Raises:
        ScanError: If the file cannot be read, is not UTF-8, is larger than
            MAX_SOURCE_SIZE, or does not parse
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ScanError(
            ErrorTemplate.source_unreadable(path, e.strerror or str(e)), path=path
        ) from e
    if len(data) > MAX_SOURCE_SIZE:
        raise ScanError(
            ErrorTemplate.source_unreadable(path, f"it exceeds {MAX_SOURCE_SIZE} bytes"),
            path=path,
        )
    try:
        source = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ScanError(
            ErrorTemplate.source_unreadable(path, f"it is not valid UTF-8 ({e.reason})"),
            path=path,
        ) from e

    logger.debug("Parsing %s", path)
    try:
        return parse_file(source, str(path))
    except GoSyntaxError as e:
        raise ScanError(
            ErrorTemplate.source_syntax(path, e.diagnostic or str(e)),
            path=path,
            line=e.line,
            column=e.column,
        ) from e


def _walk(tree: File, visitor: ASTVisitor, path: Path) -> None:
    try:
        visitor.visit(tree)
    except DepthLimitExceededError as e:
        raise ScanError(ErrorTemplate.source_syntax(path, e.diagnostic or str(e)), path=path) from e


class _AliasFinder(ASTVisitor):
    """Records the first identifier assigned from a factory call."""

    __slots__ = ("alias", "factory")

    def __init__(self, factory: tuple[str, str]) -> None:
        super().__init__()
        self.factory = factory
        self.alias: str | None = None

    def _is_factory_call(self, node: ASTNode | None) -> bool:
        if not isinstance(node, CallExpr) or not isinstance(node.fun, SelectorExpr):
            return False
        package, function = self.factory
        qualifier = node.fun.x
        return (
            isinstance(qualifier, Ident)
            and qualifier.name == package
            and node.fun.sel.name == function
        )

    def visit_AssignStmt(self, node: AssignStmt) -> ASTNode:
        if self.alias is not None:
            return node
        target = node.lhs[0].single
        if isinstance(target, Ident) and any(
            self._is_factory_call(expression.single) for expression in node.rhs
        ):
            self.alias = target.name
            return node
        return self.generic_visit(node)


class _LiteralCollector(ASTVisitor):
    """Gathers string literal arguments of calls to one identifier."""

    __slots__ = ("alias", "literals")

    def __init__(self, alias: str) -> None:
        super().__init__()
        self.alias = alias
        self.literals: list[str] = []

    def visit_CallExpr(self, node: CallExpr) -> ASTNode:
        if isinstance(node.fun, Ident) and node.fun.name == self.alias:
            for argument in node.args:
                literal = argument.single
                if isinstance(literal, BasicLit) and literal.is_string:
                    logger.debug("Collected %s", literal.value)
                    self.literals.append(literal.value)
                else:
                    logger.debug(
                        "Ignoring non-literal argument to %s at offset %d",
                        self.alias,
                        argument.span.start,
                    )
        return self.generic_visit(node)


def discover_alias(
    paths: Iterable[Path], factory: tuple[str, str] = DEFAULT_FACTORY
) -> str | None:
    """Find the name bound to the factory's result.

    Files are parsed in order and the first matching assignment wins; files
    after it are not parsed.

    Args:
        paths: Source files, in scan order
        factory: (package qualifier, function name) of the factory

    Returns:
        The bound identifier, or None if no file binds one

    Raises:
        ScanError: If a file scanned before the match cannot be parsed
    """
    for path in paths:
        finder = _AliasFinder(factory)
        _walk(parse_source_file(path), finder, path)
        if finder.alias is not None:
            logger.info("Found %s.%s alias %r in %s", *factory, finder.alias, path)
            return finder.alias
    return None


def collect_literals(paths: Iterable[Path], alias: str) -> list[str]:
    """Collect string literals passed to the alias, in source order.

    Args:
        paths: Source files, in scan order
        alias: Name returned by discover_alias

    Returns:
        Raw literals, quotes included, duplicates kept

    Raises:
        ScanError: If a file cannot be parsed
    """
    if not alias:
        return []
    literals: list[str] = []
    for path in paths:
        collector = _LiteralCollector(alias)
        _walk(parse_source_file(path), collector, path)
        literals.extend(collector.literals)
    return literals


def strip_literal_quotes(raw: str) -> str:
    """Drop the first and last character of a string literal.

    Escape sequences are kept as written.

    Example:
        >>> strip_literal_quotes('"hello.world"')
        'hello.world'
        >>> strip_literal_quotes("`raw`")
        'raw'
    """
    return raw[1:-1]


def sift(path: Path | str, factory: tuple[str, str] = DEFAULT_FACTORY) -> ScanResult:
    """Resolve, scan and extract message identifiers under a path.

    Args:
        path: Directory or single source file
        factory: (package qualifier, function name) of the factory

    Returns:
        ScanResult; when no alias is found, literals and identifiers are empty

    Raises:
        ScanError: If a source file cannot be read or parsed
    """
    files: Sequence[Path] = resolve_source_files(path)
    alias = discover_alias(files, factory)
    if alias is None:
        logger.warning("%s", ErrorTemplate.alias_not_found(factory))
        return ScanResult(tuple(files), None, (), ())

    literals = collect_literals(files, alias)
    identifiers = tuple(strip_literal_quotes(literal) for literal in literals)
    logger.info("Collected %d identifiers from %d files", len(identifiers), len(files))
    return ScanResult(tuple(files), alias, tuple(literals), identifiers)
