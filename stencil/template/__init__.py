"""
Minimal Jinja-style template engine for code generators.

Parses a small template language into a syntax tree and renders it
against typed values. Designed for generating source code and other
structured text where the template author controls the inputs.

Syntax
------

**Interpolation**::

    This is my {{ avalue }} template.

**Loops over integer ranges** (literal or Int variable)::

    {% for i in range(its) %}
    a[{{ i }}] = image[{{ i }}];
    {% endfor %}

**Loops over tuples** (elements may be of mixed kinds)::

    {% for name in names %}{{ name }} {% endfor %}

**Single-variable conditionals**::

    {% if verbose %}...{% endif %}
    {% if not verbose %}...{% endif %}

Quick Start
-----------

::

    from stencil import Template

    t = Template("{% for i in range(n) %}{{ i }};{% endfor %}")
    t.set_value("n", 3)
    t.render()  # '0;1;2;'

Two-phase use with an explicit context::

    from stencil.template import Context, parse, render

    ctx = Context(n=3)
    tree = parse(source, ctx)
    render(tree, ctx)
"""

from .config import config as config
from .context import Context
from .nodes import Conditional, ForLoop, Node, NodeKind, RangeSource, Root, TextBlock, TupleSource, dump
from .parser import Parser, parse
from .renderer import substitute
from .template import Template, render
from .values import FloatValue, IntValue, StringValue, TupleValue, Value, ValueKind, to_value

# =============================================================================
# Public API - See stencil/__init__.py for the top-level re-exports
# =============================================================================
__all__ = [
    # Core
    "Template",
    "Context",
    "parse",
    "render",
    "Parser",
    "substitute",
    # Values
    "Value",
    "ValueKind",
    "IntValue",
    "FloatValue",
    "StringValue",
    "TupleValue",
    "to_value",
    # Tree
    "Node",
    "NodeKind",
    "Root",
    "TextBlock",
    "ForLoop",
    "Conditional",
    "RangeSource",
    "TupleSource",
    "dump",
]
