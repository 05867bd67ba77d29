"""Visitor for walking Go syntax trees.

Method names follow `ast.NodeVisitor`: `visit_CallExpr`, `visit_AssignStmt`,
named after the node classes in `ast`. A node without a visit method is
passed to `generic_visit`, which visits its children.

The walk is pre-order and in source order: a node's visit method runs
before its children are visited, and children come in dataclass field
order, which is left to right in the source for every node type. For
`T("a", T("b"))` the outer call is seen before the inner one.

ASTVisitor[T] is generic over the visit return type; it defaults to ASTNode.

Python 3.13+.
"""

from collections.abc import Callable, Iterator
from dataclasses import fields, is_dataclass
from typing import ClassVar

from i18nmerge.constants import MAX_DEPTH
from i18nmerge.core.depth_guard import DepthGuard

from .ast import ASTNode, Span

__all__ = ["ASTVisitor"]

# Field names holding child nodes, per node class.
_child_fields: dict[type, tuple[str, ...]] = {}


def _children(node: ASTNode) -> Iterator[ASTNode]:
    """Direct child nodes in source order (spans and scalars excluded)."""
    node_type = type(node)
    names = _child_fields.get(node_type)
    if names is None:
        names = tuple(field.name for field in fields(node_type) if field.name != "span")
        _child_fields[node_type] = names
    for name in names:
        value = getattr(node, name)
        if isinstance(value, tuple):
            yield from (item for item in value if is_dataclass(item))
        elif is_dataclass(value) and not isinstance(value, Span):
            yield value


class ASTVisitor[T = ASTNode]:
    """Base class for syntax tree visitors.

    Subclasses define visit_<NodeType> methods and call generic_visit()
    from them to keep descending; returning without it prunes the subtree.

    The visit_* names of a class are collected once, when the class is
    defined. Each instance then binds the method for a node type on first
    use.

    Example:
        >>> class CallCounter(ASTVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.calls = 0
        ...
        ...     def visit_CallExpr(self, node):
        ...         self.calls += 1
        ...         return self.generic_visit(node)
        >>> counter = CallCounter()
        >>> _ = counter.visit(parse_file('package main\\nfunc main() { f(g()) }\\n'))
        >>> counter.calls
        2
    """

    __slots__ = ("_depth_guard", "_handlers")

    # Node class name -> visit method name, per visitor class.
    _visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        cls._visit_methods = {
            name.removeprefix("visit_"): name
            for name in dir(cls)
            if name.startswith("visit_")
        }

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Create a visitor.

        Subclasses must call super().__init__().

        Args:
            max_depth: Deepest node nesting walked (default: MAX_DEPTH)
        """
        self._depth_guard = DepthGuard(max_depth=MAX_DEPTH if max_depth is None else max_depth)
        self._handlers: dict[type, Callable[[ASTNode], T]] = {}

    def visit(self, node: ASTNode) -> T:
        """Dispatch node to visit_<NodeType>, or to generic_visit if undefined."""
        handler = self._handlers.get(type(node))
        if handler is None:
            method_name = self._visit_methods.get(type(node).__name__)
            handler = getattr(self, method_name) if method_name else self.generic_visit
            self._handlers[type(node)] = handler
        return handler(node)

    def generic_visit(self, node: ASTNode) -> T:
        """Visit every child of node, one depth level further down.

        Returns:
            node itself

        Raises:
            DepthLimitExceededError: If the walk goes deeper than max_depth
        """
        with self._depth_guard:
            for child in _children(node):
                self.visit(child)
        return node  # type: ignore[return-value]  # T defaults to ASTNode
