"""
Template facade: value binding and the render entry point.

Wraps the parser and renderer behind a small object API modelled on the
way generator tools use templates: build a template from source, register
named values, render.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from .._logging import scoped_logger
from ..exceptions import ResourceError, StencilError, TemplateNotFoundError, ValidationError
from .config import config
from .context import Context
from .nodes import Root, dump
from .parser import Parser
from .renderer import render_node
from .values import Value

__all__ = ["Template", "render"]

log = scoped_logger("template")


@contextmanager
def _fail_fast(phase: str) -> Iterator[None]:
    """Log failures of ``phase`` and turn stack exhaustion into ResourceError."""
    try:
        yield
    except RecursionError as e:
        log.debug(f"Template {phase} exhausted the call stack")
        raise ResourceError(
            f"Template nesting too deep to {phase}",
            details={"phase": phase},
        ) from e
    except StencilError as e:
        extra: dict[str, Any] = {"code": e.code}
        if "position" in e.details:
            extra["position"] = e.details["position"]
        # LogRecord reserves "name"; undefined and redefined names go out as "var"
        if "name" in e.details:
            extra["var"] = e.details["name"]
        log.debug(f"Template {phase} failed: {e}", extra=extra)
        raise


def _as_context(context: Mapping[str, Any] | None) -> Context:
    if context is None:
        return Context()
    if isinstance(context, Context):
        return context
    return Context(context)


class Template:
    r"""
    Text template with ``{{ }}`` interpolation and ``for``/``if`` blocks.

    The supported syntax is intentionally small:

        - Interpolation: ``{{ name }}``
        - Range loops: ``{% for i in range(3) %}...{% endfor %}`` or
          ``range(name)`` with ``name`` bound to an Int
        - Tuple loops: ``{% for x in items %}...{% endfor %}`` with ``items``
          bound to a Tuple
        - Conditionals: ``{% if name %}``, ``{% if not name %}``,
          ``{% if True %}``, ``{% if False %}``, closed by ``{% endif %}``

    There are no expressions, filters, ``else`` branches or includes.

    Loop sources are read from the bound values when the template is parsed,
    which happens on every ``render()``. Values used by ``range(name)`` and
    ``for x in name`` must therefore be bound before rendering.

    Example:
        >>> t = Template('''{% for i in range(its) %}a[{{i}}] = image[{{i}}];
        ... {% endfor %}''')
        >>> t.set_value("its", 3).render()
        'a[0] = image[0];\na[1] = image[1];\na[2] = image[2];\n'

        >>> t = Template("Values list: {{ values }}")
        >>> t["values"] = TupleValue.create(10, 20.256, "Hello World!")
        >>> t()
        'Values list: {10, 20.256, Hello World!}'

    Args:
        source: The template text.

    Raises
    ------
        ValidationError: If ``source`` is not a string.
    """

    __slots__ = ("_source", "_context")

    def __init__(self, source: str):
        if not isinstance(source, str):
            raise ValidationError(
                f"Template source must be str, got {type(source).__name__}",
                code="INVALID_ARGUMENT",
                details={"param": "source", "type": type(source).__name__},
            )
        self._source = source
        self._context = Context()

    @classmethod
    def from_file(cls, path: str | Path) -> Template:
        """
        Load a template from a UTF-8 file.

        Raises
        ------
            TemplateNotFoundError: If the file doesn't exist.
        """
        template_path = Path(path)
        if not template_path.is_file():
            raise TemplateNotFoundError(
                f"Template file not found: {path}",
                details={"path": str(path)},
            )
        return cls(template_path.read_text(encoding="utf-8"))

    # =========================================================================
    # Binding
    # =========================================================================

    def set_value(self, name: str, value: Any) -> Template:
        """
        Bind ``name`` to ``value``, replacing any previous binding.

        Args:
            name: Variable name as used in the template.
            value: An int, float, str, tuple/list (becomes a Tuple) or a
                template value.

        Returns
        -------
            Self, for method chaining.

        Raises
        ------
            ValidationError: If ``value`` has no template value counterpart.
        """
        self._context[name] = value
        return self

    def __setitem__(self, name: str, value: Any) -> None:
        self.set_value(name, value)

    def __getitem__(self, name: str) -> Value:
        return self._context[name]

    @property
    def context(self) -> Context:
        """Values bound with ``set_value()``."""
        return self._context

    @property
    def source(self) -> str:
        """The template text."""
        return self._source

    # =========================================================================
    # Parsing and rendering
    # =========================================================================

    def _merged_context(self, values: dict[str, Any]) -> Context:
        if not values:
            return self._context
        context = self._context.copy()
        context.update(values)
        return context

    def parse(self, context: Mapping[str, Any] | None = None) -> Root:
        """
        Parse the template against ``context`` (default: the bound values).

        Raises
        ------
            TemplateSyntaxError: If the template is malformed or references
                an unbound loop source.
            TemplateTypeError: If a loop source has the wrong value kind.
            ResourceError: If nesting is too deep to parse.
        """
        ctx = self._context if context is None else _as_context(context)
        with _fail_fast("parse"):
            return Parser(self._source, ctx).parse()

    def render(self, **values: Any) -> str:
        """
        Parse and render the template.

        Args:
            **values: Extra bindings for this render only. They take
                precedence over values registered with ``set_value()``
                and are not kept afterwards.

        Returns
        -------
            The fully substituted text.

        Raises
        ------
            TemplateError: On the first syntax or render defect.
            ResourceError: If nesting is too deep.
        """
        context = self._merged_context(values)
        tree = self.parse(context)
        if config.debug:
            log.debug(f"Parsed template tree:\n{dump(tree)}")
        return render(tree, context)

    def __call__(self, **values: Any) -> str:
        """Render the template (same as ``render()``)."""
        return self.render(**values)

    def dump(self, **values: Any) -> str:
        """Return an indented description of the parsed tree."""
        return dump(self.parse(self._merged_context(values)))

    def __repr__(self) -> str:
        preview = self._source[:50]
        if len(self._source) > 50:
            preview += "..."
        return f"Template({preview!r})"

    def __str__(self) -> str:
        return self._source


def render(tree: Root | str, context: Mapping[str, Any] | None = None) -> str:
    """
    Render a parsed tree (or template source) against ``context``.

    Args:
        tree: A tree from ``parse()``, or template source to parse first.
        context: Bindings for the render. A :class:`Context` is used in place
            (loop variables are bound and removed again); any other mapping
            is copied into a new Context.

    Returns
    -------
        The fully substituted text.

    Example:
        >>> ctx = Context(its=2)
        >>> tree = parse("{% for i in range(its) %}{{ i }}{% endfor %}", ctx)
        >>> render(tree, ctx)
        '01'
    """
    ctx = _as_context(context)
    if isinstance(tree, str):
        with _fail_fast("parse"):
            tree = Parser(tree, ctx).parse()
    with _fail_fast("render"):
        return render_node(tree, ctx)
