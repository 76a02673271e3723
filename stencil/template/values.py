"""
Typed template values.

Every variable a template can see is one of four value kinds. Each kind
knows how to render itself as text and how to answer ``{% if %}`` tests:

    ========  ==========================  ================
    Kind      render()                    is_true()
    ========  ==========================  ================
    INT       ``42``                      nonzero
    FLOAT     ``%g`` (``12.123``)         nonzero
    STRING    verbatim                    non-empty
    TUPLE     ``{10, 20.256, Hello}``     non-empty
    ========  ==========================  ================

Native Python values are converted with :func:`to_value`:

    >>> to_value(3)
    IntValue(kind=<ValueKind.INT: 0>, value=3)
    >>> TupleValue.create(10, 20.256, "Hello World!").render()
    '{10, 20.256, Hello World!}'
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Union

from ..exceptions import ValidationError

__all__ = [
    "ValueKind",
    "Value",
    "IntValue",
    "FloatValue",
    "StringValue",
    "TupleValue",
    "to_value",
]


class ValueKind(IntEnum):
    """Discriminator for the closed set of template values."""

    INT = 0
    FLOAT = 1
    STRING = 2
    TUPLE = 3


@dataclass(frozen=True, slots=True)
class _ValueBase:
    """Base class for template values."""

    kind: ValueKind

    def render(self) -> str:
        raise NotImplementedError

    def is_true(self) -> bool:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class IntValue(_ValueBase):
    """Integer value."""

    kind: ValueKind = field(default=ValueKind.INT, init=False)
    value: int = 0

    def render(self) -> str:
        return str(self.value)

    def is_true(self) -> bool:
        return self.value != 0


@dataclass(frozen=True, slots=True)
class FloatValue(_ValueBase):
    """
    Floating point value.

    Rendered with ``%g`` semantics: six significant digits, trailing zeros
    dropped, exponent notation for very large or small magnitudes. The
    output never depends on the process locale.
    """

    kind: ValueKind = field(default=ValueKind.FLOAT, init=False)
    value: float = 0.0

    def render(self) -> str:
        return f"{self.value:g}"

    def is_true(self) -> bool:
        return self.value != 0.0


@dataclass(frozen=True, slots=True)
class StringValue(_ValueBase):
    """String value, rendered verbatim."""

    kind: ValueKind = field(default=ValueKind.STRING, init=False)
    value: str = ""

    def render(self) -> str:
        return self.value

    def is_true(self) -> bool:
        return bool(self.value)


@dataclass(frozen=True, slots=True)
class TupleValue(_ValueBase):
    """
    Ordered, heterogeneous sequence of values.

    Tuples are the only iterable source for ``{% for x in name %}`` loops.
    Elements may be of mixed kinds, including nested tuples.

    Example:
        >>> t = TupleValue.create(0, 1.1, "2abc")
        >>> t.render()
        '{0, 1.1, 2abc}'
        >>> [v.render() for v in t]
        ['0', '1.1', '2abc']
    """

    kind: ValueKind = field(default=ValueKind.TUPLE, init=False)
    values: tuple[Value, ...] = ()

    @classmethod
    def create(cls, *items: Any) -> TupleValue:
        """Build a tuple from native Python values or existing values."""
        return cls(values=tuple(to_value(item) for item in items))

    def render(self) -> str:
        return "{" + ", ".join(v.render() for v in self.values) + "}"

    def is_true(self) -> bool:
        return len(self.values) > 0

    def __iter__(self) -> Iterator[Value]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


Value = Union[IntValue, FloatValue, StringValue, TupleValue]


def to_value(obj: Any) -> Value:
    """
    Convert a native Python value to a template value.

    Args:
        obj: A template value, ``int``, ``bool``, ``float``, ``str``, or a
            ``tuple``/``list`` of any of these (converted recursively).

    Returns
    -------
        The corresponding template value. Template values pass through
        unchanged; ``bool`` becomes an Int of 0 or 1.

    Raises
    ------
        ValidationError: If ``obj`` has no counterpart in the value model.
    """
    if isinstance(obj, _ValueBase):
        return obj
    if isinstance(obj, bool):
        return IntValue(value=int(obj))
    if isinstance(obj, int):
        return IntValue(value=obj)
    if isinstance(obj, float):
        return FloatValue(value=obj)
    if isinstance(obj, str):
        return StringValue(value=obj)
    if isinstance(obj, (tuple, list)):
        return TupleValue.create(*obj)
    raise ValidationError(
        f"Unsupported template value type: {type(obj).__name__}",
        code="INVALID_ARGUMENT",
        details={"param": "value", "type": type(obj).__name__},
    )
