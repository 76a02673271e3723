"""
Syntax tree for parsed templates.

The parser produces a strict tree of immutable nodes. Every node carries a
``kind`` tag so that consumers (the renderer, :func:`dump`) dispatch with a
single ``match`` instead of per-class virtual methods:

    Root            ordered top-level children
    TextBlock       literal text, possibly containing ``{{ name }}`` markers
    ForLoop         body repeated over a range or a tuple variable
    Conditional     body rendered when a single-variable test holds

Architecture::

    "abc{% if x %}{{ y }}{% endif %}"

    Root
    ├── TextBlock "abc"
    └── Conditional (x)
        └── TextBlock "{{ y }}"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Union

__all__ = [
    "NodeKind",
    "Node",
    "Root",
    "TextBlock",
    "ForLoop",
    "Conditional",
    "RangeSource",
    "TupleSource",
    "IterationSource",
    "dump",
]


class NodeKind(IntEnum):
    """Discriminator for syntax tree nodes."""

    ROOT = 0
    TEXT = 1
    FOR = 2
    IF = 3


# =============================================================================
# Loop Sources
# =============================================================================


@dataclass(frozen=True, slots=True)
class RangeSource:
    """
    Synthetic integer range ``[0, stop)``.

    ``stop`` is resolved when the template is parsed, from either a literal
    (``range(3)``) or an Int variable (``range(its)``); ``arg`` keeps the
    original argument text.
    """

    stop: int
    arg: str


@dataclass(frozen=True, slots=True)
class TupleSource:
    """Elements of the Tuple variable ``name``, in order."""

    name: str


IterationSource = Union[RangeSource, TupleSource]


# =============================================================================
# Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class _NodeBase:
    """Base class for syntax tree nodes."""

    kind: NodeKind


@dataclass(frozen=True, slots=True)
class Root(_NodeBase):
    """Top of the tree. Owns the top-level children."""

    kind: NodeKind = field(default=NodeKind.ROOT, init=False)
    children: tuple[Node, ...] = ()


@dataclass(frozen=True, slots=True)
class TextBlock(_NodeBase):
    """Literal slice ``source[start:end]``; substituted at render time."""

    kind: NodeKind = field(default=NodeKind.TEXT, init=False)
    text: str = ""
    start: int = 0
    end: int = 0


@dataclass(frozen=True, slots=True)
class ForLoop(_NodeBase):
    """``{% for var in source %}`` block."""

    kind: NodeKind = field(default=NodeKind.FOR, init=False)
    var: str = ""
    source: IterationSource = RangeSource(stop=0, arg="0")
    children: tuple[Node, ...] = ()
    position: int = 0


@dataclass(frozen=True, slots=True)
class Conditional(_NodeBase):
    """
    ``{% if [not] operand %}`` block.

    ``operand`` is a variable name or one of the literals ``True``/``False``.
    """

    kind: NodeKind = field(default=NodeKind.IF, init=False)
    operand: str = ""
    negated: bool = False
    children: tuple[Node, ...] = ()
    position: int = 0


Node = Union[Root, TextBlock, ForLoop, Conditional]


def dump(node: Node, indent: str = "") -> str:
    """
    Describe a tree as indented text, one node per line.

    Example:
        >>> print(dump(parse("a{% for i in range(2) %}{{i}}{% endfor %}", Context())))
        Root {
            Text (0, 1) 'a'
            For (i in range(2)) {
                Text (24, 29) '{{i}}'
            }
        }
    """
    inner = indent + "    "
    match node.kind:
        case NodeKind.TEXT:
            return f"{indent}Text ({node.start}, {node.end}) {node.text!r}\n"
        case NodeKind.ROOT:
            header = "Root"
        case NodeKind.FOR:
            if isinstance(node.source, RangeSource):
                header = f"For ({node.var} in range({node.source.arg}))"
            else:
                header = f"For ({node.var} in {node.source.name})"
        case NodeKind.IF:
            header = f"If ({'not ' if node.negated else ''}{node.operand})"
        case _:
            raise ValueError(f"Unknown node kind: {node.kind!r}")
    body = "".join(dump(child, inner) for child in node.children)
    return f"{indent}{header} {{\n{body}{indent}}}\n"
