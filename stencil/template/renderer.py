"""
Tree-walking renderer.

Evaluates a parsed tree against a :class:`~stencil.template.context.Context`
and returns the output text. Rendering either completes or raises; callers
never see partial output.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .._logging import scoped_logger
from ..exceptions import TemplateTypeError, TemplateUndefinedError
from .context import Context
from .nodes import ForLoop, Node, NodeKind, RangeSource, TupleSource
from .values import IntValue, TupleValue, Value

__all__ = ["render_node", "substitute", "MARKER_OPEN", "MARKER_CLOSE"]

MARKER_OPEN = "{{"
MARKER_CLOSE = "}}"

LITERAL_TRUE = "True"
LITERAL_FALSE = "False"

log = scoped_logger("renderer")


def substitute(text: str, context: Context) -> str:
    """
    Replace every ``{{ name }}`` marker in ``text`` with the bound value.

    Names are whitespace-trimmed and must be bound exactly; there are no
    expressions, filters or escaping. A ``{{`` without a closing ``}}``
    is left in the output as literal text.

    Raises
    ------
        TemplateUndefinedError: If a marker names an unbound variable.

    Example:
        >>> substitute("a[{{ i }}]", Context(i=3))
        'a[3]'
    """
    parts: list[str] = []
    pos = 0
    while True:
        start = text.find(MARKER_OPEN, pos)
        if start == -1:
            parts.append(text[pos:])
            return "".join(parts)
        parts.append(text[pos:start])
        end = text.find(MARKER_CLOSE, start + len(MARKER_OPEN))
        if end == -1:
            parts.append(text[start:])
            return "".join(parts)
        name = text[start + len(MARKER_OPEN) : end].strip()
        value = context.get(name)
        if value is None:
            raise TemplateUndefinedError(f"name {name} not defined", details={"name": name})
        parts.append(value.render())
        pos = end + len(MARKER_CLOSE)


def render_node(node: Node, context: Context) -> str:
    """
    Render ``node`` and its descendants.

    Raises
    ------
        TemplateUndefinedError: A ``{{ name }}`` marker is unbound.
        TemplateRedefinitionError: A loop variable is already bound.
        TemplateTypeError: A tuple loop source changed kind since parsing.
    """
    match node.kind:
        case NodeKind.TEXT:
            return substitute(node.text, context)
        case NodeKind.ROOT:
            return _render_children(node.children, context)
        case NodeKind.FOR:
            return _render_for(node, context)
        case NodeKind.IF:
            if node.operand == LITERAL_TRUE:
                test = True
            elif node.operand == LITERAL_FALSE:
                test = False
            else:
                value = context.get(node.operand)
                test = value is not None and value.is_true()
            if test != node.negated:
                return _render_children(node.children, context)
            return ""
        case _:
            raise ValueError(f"Unknown node kind: {node.kind!r}")


def _render_children(children: Iterable[Node], context: Context) -> str:
    return "".join(render_node(child, context) for child in children)


def _iteration_values(loop: ForLoop, context: Context) -> tuple[Iterator[Value], int]:
    """Return the loop's values, produced on demand, and how many there are."""
    source = loop.source
    if isinstance(source, RangeSource):
        indices = range(source.stop)
        return (IntValue(value=i) for i in indices), len(indices)
    assert isinstance(source, TupleSource)
    value = context.get(source.name)
    if value is None:
        raise TemplateUndefinedError(
            f"name {source.name} not defined", details={"name": source.name}
        )
    if not isinstance(value, TupleValue):
        raise TemplateTypeError(
            f"variable {source.name} no longer valid in context",
            details={"name": source.name, "kind": value.kind.name},
        )
    return iter(value.values), len(value.values)


def _render_for(loop: ForLoop, context: Context) -> str:
    values, count = _iteration_values(loop, context)
    log.debug(
        "Entering for loop",
        extra={"var": loop.var, "iterations": count, "position": loop.position},
    )
    parts: list[str] = []
    # Placeholder binding; every iteration rebinds before its body renders
    with context.bind(loop.var, IntValue(value=0)):
        for value in values:
            context[loop.var] = value
            parts.append(_render_children(loop.children, context))
    return "".join(parts)
