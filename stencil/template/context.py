"""
Variable context for template rendering.

A Context maps variable names to template values. It is owned by the
caller and borrowed by the parser (to resolve loop sources) and by the
renderer (to substitute ``{{ name }}`` markers). Loops mutate it only
through :meth:`Context.bind`, which always restores the previous state.

A single Context must not be rendered from several threads at once; use
one Context per concurrent render.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from contextlib import contextmanager
from typing import Any

from ..exceptions import TemplateRedefinitionError
from .values import Value, to_value

__all__ = ["Context"]


class Context(MutableMapping[str, Value]):
    """
    Mutable mapping from variable name to template value.

    Assignment converts native Python values with ``to_value()``::

        >>> ctx = Context(its=3)
        >>> ctx["weather"] = "rain"
        >>> ctx["its"]
        IntValue(kind=<ValueKind.INT: 0>, value=3)

    Args:
        values: Optional initial bindings (mapping or keyword arguments).

    Raises
    ------
        ValidationError: If a value cannot be converted to a template value.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any] | None = None, **kwargs: Any):
        self._values: dict[str, Value] = {}
        if values is not None:
            self.update(values)
        if kwargs:
            self.update(kwargs)

    def __getitem__(self, name: str) -> Value:
        return self._values[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._values[name] = to_value(value)

    def __delitem__(self, name: str) -> None:
        del self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Context({self._values!r})"

    def copy(self) -> Context:
        """Return a shallow copy (values are immutable, so this is independent)."""
        clone = Context()
        clone._values = dict(self._values)
        return clone

    @contextmanager
    def bind(self, name: str, value: Value) -> Iterator[None]:
        """
        Bind ``name`` for the dynamic extent of a ``with`` block.

        The binding is removed on every exit path, including when the body
        raises, so a failed render never leaks loop variables into the
        caller's context. Rebinding inside the block (``ctx[name] = ...``)
        is allowed; the name is still removed on exit.

        Raises
        ------
            TemplateRedefinitionError: If ``name`` is already bound.
        """
        if name in self._values:
            raise TemplateRedefinitionError(
                f"variable {name} already exists in this context",
                details={"name": name},
            )
        self._values[name] = value
        try:
            yield
        finally:
            self._values.pop(name, None)
